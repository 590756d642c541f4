"""Cost-sharing fare models.

The trip cost is fixed and split between passengers: the more seats are
filled, the less each passenger pays.
"""

from __future__ import annotations

from decimal import Decimal

from ..geospatial import round_half_up
from .base import PricingModel

PRICE_STEP = 100


class CostSharingModel(PricingModel):
    """Per-seat bounds derived from a whole-trip cost."""

    # Share of the full trip cost a single passenger may be asked to pay.
    max_share = Decimal("1")

    def __init__(self, fuel_price_per_liter: int, consumption_l_per_100km: float) -> None:
        self.fuel_price_per_liter = fuel_price_per_liter
        self.consumption_l_per_100km = Decimal(str(consumption_l_per_100km))

    def fuel_cost(self, distance_km: int) -> int:
        liters = Decimal(max(distance_km, 0)) * self.consumption_l_per_100km / 100
        return round_half_up(liters * self.fuel_price_per_liter)

    def trip_cost(self, distance_km: int) -> int:
        return self.fuel_cost(distance_km)

    def reference_fare_price(self, distance_km: int, seat_count: int = 4) -> int:
        return self.trip_cost(distance_km)

    @staticmethod
    def average_passengers(seat_count: int) -> int:
        # Priced for an average fill of half the car, never more seats than offered.
        return min(seat_count, max(2, seat_count // 2))

    def price_bounds(self, distance_km: int, seat_count: int = 4) -> tuple[int, int, int]:
        seats = max(seat_count, 1)
        total = Decimal(self.trip_cost(distance_km))
        minimum = round_half_up(total / seats, PRICE_STEP)
        suggested = round_half_up(total / self.average_passengers(seats), PRICE_STEP)
        maximum = round_half_up(total * self.max_share, PRICE_STEP)
        return minimum, suggested, max(maximum, suggested)


class FuelSharingModel(CostSharingModel):
    name = "fuel_sharing"


class FuelWearTollSharingModel(CostSharingModel):
    name = "fuel_wear_toll_sharing"
    max_share = Decimal("0.8")

    def __init__(
        self,
        fuel_price_per_liter: int,
        consumption_l_per_100km: float,
        wear_per_km: int,
        toll_per_100km: int,
    ) -> None:
        super().__init__(fuel_price_per_liter, consumption_l_per_100km)
        self.wear_per_km = wear_per_km
        self.toll_per_100km = toll_per_100km

    def trip_cost(self, distance_km: int) -> int:
        distance = Decimal(max(distance_km, 0))
        wear = distance * self.wear_per_km
        toll = distance / 100 * self.toll_per_100km
        return round_half_up(self.fuel_cost(distance_km) + wear + toll)
