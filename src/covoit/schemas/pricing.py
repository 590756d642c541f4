"""Distance and fare API schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..services.pricing import FareQuote, PriceCheck


class DurationModel(BaseModel):
    hours: int
    minutes: int


class DistanceResponse(BaseModel):
    from_city: str
    to_city: str
    available: bool
    distance_km: Optional[int] = None
    duration: Optional[DurationModel] = None


class CommissionModel(BaseModel):
    rate: float
    amount: int


class FareQuoteModel(BaseModel):
    distanceKm: int
    minPrice: int
    suggestedPrice: int
    maxPrice: int
    referenceFarePrice: int
    commission: CommissionModel
    model: str

    @classmethod
    def from_quote(cls, quote: FareQuote) -> "FareQuoteModel":
        return cls(
            distanceKm=quote.distance_km,
            minPrice=quote.min_price,
            suggestedPrice=quote.suggested_price,
            maxPrice=quote.max_price,
            referenceFarePrice=quote.reference_fare_price,
            commission=CommissionModel(rate=quote.commission.rate, amount=quote.commission.amount),
            model=quote.model,
        )


class QuoteResponse(BaseModel):
    from_city: str
    to_city: str
    available: bool
    quote: Optional[FareQuoteModel] = None


class PriceValidationRequest(BaseModel):
    from_city: str
    to_city: str
    price: int = Field(..., ge=0)
    seats: int = Field(default=4, ge=1, le=8)


class PriceValidationResponse(BaseModel):
    accepted: bool
    warning: Optional[str] = None
    quote: Optional[FareQuoteModel] = None

    @classmethod
    def from_check(cls, check: PriceCheck, quote: FareQuote | None) -> "PriceValidationResponse":
        return cls(
            accepted=check.accepted,
            warning=check.warning,
            quote=FareQuoteModel.from_quote(quote) if quote else None,
        )


class KnownRouteModel(BaseModel):
    city_a: str
    city_b: str
    km: int
