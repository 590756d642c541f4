import pytest

from covoit.services.pricing import commission_rate, get_model, quote_fare, quote_route
from covoit.services.pricing.cost_sharing import FuelSharingModel, FuelWearTollSharingModel
from covoit.services.pricing.moto_taxi import MotoTaxiParityModel


@pytest.fixture
def moto_taxi() -> MotoTaxiParityModel:
    return MotoTaxiParityModel(base_price=200, per_km_rate=100)


def test_cotonou_porto_novo_quote(moto_taxi):
    quote = quote_fare(35, model=moto_taxi)

    assert quote.distance_km == 35
    assert quote.reference_fare_price == 3700
    assert quote.max_price == 1850
    assert quote.suggested_price == 1570
    assert quote.min_price == 740
    assert quote.commission.rate == 0.05
    assert quote.commission.amount == 80
    assert quote.model == "moto_taxi_parity"


def test_short_trip_uses_higher_cap(moto_taxi):
    quote = quote_fare(10, model=moto_taxi)

    assert quote.reference_fare_price == 1200
    assert quote.max_price == 790
    assert quote.suggested_price == 670
    assert quote.min_price == 320
    assert quote.commission.rate == 0.10
    assert quote.commission.amount == 70


def test_long_trip_cap_starts_after_ten_km(moto_taxi):
    quote = quote_fare(11, model=moto_taxi)
    assert (quote.min_price, quote.suggested_price, quote.max_price) == (260, 550, 650)


def test_min_price_floor_on_one_km(moto_taxi):
    quote = quote_fare(1, model=moto_taxi)
    assert (quote.min_price, quote.suggested_price, quote.max_price) == (100, 170, 200)


@pytest.mark.parametrize("distance", [0, -5])
def test_degenerate_distance_collapses_to_zero(moto_taxi, distance):
    quote = quote_fare(distance, model=moto_taxi)

    assert quote.reference_fare_price == 0
    assert quote.max_price == 0
    assert quote.suggested_price == 0
    assert quote.min_price == 100
    assert quote.commission.amount == 0


def test_bounds_are_ordered_multiples_of_ten(moto_taxi):
    for distance in range(1, 1001):
        quote = quote_fare(distance, model=moto_taxi)
        assert 0 <= quote.min_price <= quote.suggested_price <= quote.max_price, distance
        for price in (quote.min_price, quote.suggested_price, quote.max_price):
            assert price % 10 == 0


def test_default_model_follows_settings():
    quote = quote_fare(35)
    assert quote.model == "moto_taxi_parity"
    assert quote.max_price == 1850


def test_pricing_model_switch_from_settings(monkeypatch):
    from covoit.config import settings

    monkeypatch.setattr(settings, "pricing_model", "fuel_sharing")
    quote = quote_fare(100, seat_count=4)
    assert quote.model == "fuel_sharing"
    assert (quote.min_price, quote.suggested_price, quote.max_price) == (1300, 2600, 5200)


@pytest.mark.parametrize(("distance", "rate"), [(5, 0.10), (20, 0.10), (21, 0.05), (400, 0.05)])
def test_commission_rate_thresholds(distance, rate):
    assert commission_rate(distance) == rate


def test_fuel_wear_toll_sharing_model():
    model = FuelWearTollSharingModel(
        fuel_price_per_liter=650, consumption_l_per_100km=8, wear_per_km=15, toll_per_100km=200
    )
    quote = quote_fare(100, seat_count=4, model=model)

    assert quote.reference_fare_price == 6900
    assert (quote.min_price, quote.suggested_price, quote.max_price) == (1700, 3500, 5500)
    assert quote.commission.amount == 180


def test_fuel_sharing_model_splits_fuel_cost():
    model = FuelSharingModel(fuel_price_per_liter=650, consumption_l_per_100km=8)
    quote = quote_fare(100, seat_count=4, model=model)

    assert quote.reference_fare_price == 5200
    assert (quote.min_price, quote.suggested_price, quote.max_price) == (1300, 2600, 5200)


def test_cost_sharing_single_seat_keeps_bounds_ordered():
    model = FuelWearTollSharingModel(650, 8, 15, 200)
    quote = quote_fare(100, seat_count=1, model=model)
    assert quote.min_price <= quote.suggested_price <= quote.max_price


def test_get_model_by_name():
    assert get_model("fuel_sharing").name == "fuel_sharing"
    assert get_model("fuel_wear_toll_sharing").name == "fuel_wear_toll_sharing"
    with pytest.raises(ValueError):
        get_model("flat_rate")


def test_quote_fare_rejects_zero_seats(moto_taxi):
    with pytest.raises(ValueError):
        quote_fare(10, seat_count=0, model=moto_taxi)


def test_quote_route(moto_taxi):
    quote = quote_route("Porto-Novo", "Cotonou", model=moto_taxi)
    assert quote is not None
    assert quote.max_price == 1850
    assert quote_route("Cotonou", "Zogbodomey", model=moto_taxi) is None
