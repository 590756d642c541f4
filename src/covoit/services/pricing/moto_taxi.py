"""Moto-taxi parity fare model.

Ride-share seats are capped at a fraction of what a zem (moto-taxi) would
charge for the same trip. Short trips tolerate a higher fraction of the
reference fare than long ones.
"""

from __future__ import annotations

from decimal import Decimal

from ..geospatial import round_half_up
from .base import PricingModel

SHORT_TRIP_MAX_KM = 10
SHORT_TRIP_CAP = Decimal("0.66")
LONG_TRIP_CAP = Decimal("0.50")
SUGGESTED_SHARE = Decimal("0.85")
MIN_SHARE = Decimal("0.40")
ABSOLUTE_MIN_PRICE = 100
PRICE_STEP = 10


class MotoTaxiParityModel(PricingModel):
    name = "moto_taxi_parity"

    def __init__(self, base_price: int, per_km_rate: int) -> None:
        self.base_price = base_price
        self.per_km_rate = per_km_rate

    def reference_fare_price(self, distance_km: int, seat_count: int = 1) -> int:
        if distance_km <= 0:
            return 0
        return round_half_up(self.base_price + distance_km * self.per_km_rate, PRICE_STEP)

    def max_price(self, distance_km: int) -> int:
        cap = SHORT_TRIP_CAP if distance_km <= SHORT_TRIP_MAX_KM else LONG_TRIP_CAP
        return round_half_up(self.reference_fare_price(distance_km) * cap, PRICE_STEP)

    def suggested_price(self, distance_km: int) -> int:
        return round_half_up(self.max_price(distance_km) * SUGGESTED_SHARE, PRICE_STEP)

    def min_price(self, distance_km: int) -> int:
        floor = max(Decimal(ABSOLUTE_MIN_PRICE), self.max_price(distance_km) * MIN_SHARE)
        return round_half_up(floor, PRICE_STEP)

    def price_bounds(self, distance_km: int, seat_count: int = 1) -> tuple[int, int, int]:
        return self.min_price(distance_km), self.suggested_price(distance_km), self.max_price(distance_km)
