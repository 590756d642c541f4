import pytest

from covoit.data.cities_repository import find_city
from covoit.data.distances import iter_distance_entries
from covoit.services.distance import estimate_duration, resolve_distance, road_distance_from_coords
from covoit.services.geospatial import haversine_km, round_half_up


def test_haversine_one_degree_on_equator():
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19, abs=0.01)


@pytest.mark.parametrize(
    ("value", "step", "expected"),
    [(2.5, 1, 3), (2.4, 1, 2), (15, 10, 20), (14.9, 10, 10), (1572.5, 10, 1570), (-15, 10, -20), (250, 100, 300)],
)
def test_round_half_up(value, step, expected):
    assert round_half_up(value, step) == expected


def test_table_entries_reference_directory_cities():
    for entry in iter_distance_entries():
        assert find_city(entry.city_a) is not None, entry.city_a
        assert find_city(entry.city_b) is not None, entry.city_b
        assert entry.km > 0


def test_resolve_distance_is_symmetric():
    assert resolve_distance("Cotonou", "Porto-Novo") == 35
    assert resolve_distance("Porto-Novo", "Cotonou") == 35


def test_resolve_distance_normalizes_city_names():
    assert resolve_distance("cotonou", "porto novo") == 35
    assert resolve_distance(" KANDI ", "malanvil") == 110


def test_resolve_distance_falls_back_to_coordinates():
    cotonou = find_city("Cotonou")
    nikki = find_city("Nikki")
    straight_line = haversine_km(cotonou.lat, cotonou.lng, nikki.lat, nikki.lng)

    km = resolve_distance("Cotonou", "Nikki")

    assert isinstance(km, int)
    assert km > 0
    assert km == int(straight_line * 1.3 + 0.5)
    assert resolve_distance("Nikki", "Cotonou") == km


def test_resolve_distance_unknown_city():
    assert resolve_distance("Zogbodomey", "Cotonou") is None
    assert resolve_distance("Cotonou", "Zogbodomey") is None


def test_road_distance_from_supplied_coordinates():
    zogbodomey = (7.0833, 2.1)
    cotonou = find_city("Cotonou")
    km = road_distance_from_coords(zogbodomey[0], zogbodomey[1], cotonou.lat, cotonou.lng)
    assert km > 0
    assert road_distance_from_coords(6.0, 2.0, 6.0, 2.0) == 0


def test_same_city_is_zero_km():
    assert resolve_distance("Cotonou", "cotonou") == 0


@pytest.mark.parametrize(("km", "expected"), [(0, (0, 0)), (35, (0, 42)), (120, (2, 24)), (415, (8, 18))])
def test_estimate_duration(km, expected):
    assert estimate_duration(km) == expected
