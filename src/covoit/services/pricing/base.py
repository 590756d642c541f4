"""Base classes for fare model implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Commission:
    rate: float
    amount: int


@dataclass(frozen=True, slots=True)
class FareQuote:
    """Bounded price recommendation for one seat over a given distance."""

    distance_km: int
    min_price: int
    suggested_price: int
    max_price: int
    reference_fare_price: int
    commission: Commission
    model: str


class PricingModel(ABC):
    """Contract for fare formulas: distance -> reference price -> bounds."""

    name: str

    @abstractmethod
    def reference_fare_price(self, distance_km: int, seat_count: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def price_bounds(self, distance_km: int, seat_count: int) -> tuple[int, int, int]:
        """Return (min, suggested, max) per-seat prices."""
        raise NotImplementedError
