"""Fare quotes from a resolved distance."""

from __future__ import annotations

from typing import Optional

from ...config import settings
from ..distance import resolve_distance
from .base import FareQuote, PricingModel
from .commission import compute_commission
from .dispatcher import get_model


def quote_fare(
    distance_km: int,
    seat_count: int | None = None,
    model: PricingModel | None = None,
) -> FareQuote:
    """Build the price recommendation and commission for one seat.

    Pure computation; degenerate distances (<= 0) yield zero prices rather than errors.
    """

    seats = seat_count if seat_count is not None else settings.default_seat_count
    if seats < 1:
        raise ValueError("seat_count must be at least 1")
    pricing = model or get_model()

    minimum, suggested, maximum = pricing.price_bounds(distance_km, seats)
    return FareQuote(
        distance_km=distance_km,
        min_price=minimum,
        suggested_price=suggested,
        max_price=maximum,
        reference_fare_price=pricing.reference_fare_price(distance_km, seats),
        commission=compute_commission(suggested, distance_km),
        model=pricing.name,
    )


def quote_route(
    from_city: str,
    to_city: str,
    seat_count: int | None = None,
    model: PricingModel | None = None,
) -> Optional[FareQuote]:
    """Resolve the distance between two cities and quote it, or None when unknown."""

    distance_km = resolve_distance(from_city, to_city)
    if distance_km is None:
        return None
    return quote_fare(distance_km, seat_count, model)
