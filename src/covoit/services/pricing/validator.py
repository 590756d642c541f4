"""Classification of a driver-entered seat price against a fare quote."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .base import FareQuote
from .engine import quote_route
from .moto_taxi import ABSOLUTE_MIN_PRICE


@dataclass(frozen=True, slots=True)
class PriceCheck:
    accepted: bool
    warning: Optional[str] = None


def validate_price(candidate_price: int, quote: FareQuote) -> PriceCheck:
    """Reject prices over the cap; warn (but accept) prices under the absolute floor."""

    if candidate_price > quote.max_price:
        return PriceCheck(
            accepted=False,
            warning=f"Prix supérieur au plafond autorisé de {quote.max_price} FCFA par place",
        )
    if candidate_price < ABSOLUTE_MIN_PRICE:
        return PriceCheck(
            accepted=True,
            warning="Prix très bas - vous risquez de ne pas couvrir vos frais",
        )
    return PriceCheck(accepted=True)


NO_ESTIMATE_WARNING = "Aucune estimation disponible pour ce trajet"


def check_route_price(
    candidate_price: int,
    from_city: str,
    to_city: str,
    seat_count: int | None = None,
) -> tuple[PriceCheck, Optional[FareQuote]]:
    """Validate a price for a city pair; routes without an estimate are accepted with a notice."""

    quote = quote_route(from_city, to_city, seat_count)
    if quote is None:
        return PriceCheck(accepted=True, warning=NO_ESTIMATE_WARNING), None
    return validate_price(candidate_price, quote), quote
