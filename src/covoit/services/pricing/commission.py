"""Platform commission on a reservation price."""

from __future__ import annotations

from decimal import Decimal

from ..geospatial import round_half_up
from .base import Commission

LONG_TRIP_THRESHOLD_KM = 20
SHORT_TRIP_RATE = 0.10
LONG_TRIP_RATE = 0.05


def commission_rate(distance_km: int) -> float:
    return LONG_TRIP_RATE if distance_km > LONG_TRIP_THRESHOLD_KM else SHORT_TRIP_RATE


def compute_commission(price: int, distance_km: int) -> Commission:
    rate = commission_rate(distance_km)
    return Commission(rate=rate, amount=round_half_up(Decimal(price) * Decimal(str(rate)), 10))
