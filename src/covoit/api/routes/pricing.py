"""Distance and fare estimation endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from ...data.distances import iter_distance_entries
from ...services.distance import estimate_duration, resolve_distance
from ...services.pricing import check_route_price, quote_fare, quote_route
from ...schemas.pricing import (
    DistanceResponse,
    DurationModel,
    FareQuoteModel,
    KnownRouteModel,
    PriceValidationRequest,
    PriceValidationResponse,
    QuoteResponse,
)

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
def get_distance(
    from_city: str = Query(..., min_length=1),
    to_city: str = Query(..., min_length=1),
) -> DistanceResponse:
    distance_km = resolve_distance(from_city, to_city)
    if distance_km is None:
        return DistanceResponse(from_city=from_city, to_city=to_city, available=False)
    hours, minutes = estimate_duration(distance_km)
    return DistanceResponse(
        from_city=from_city,
        to_city=to_city,
        available=True,
        distance_km=distance_km,
        duration=DurationModel(hours=hours, minutes=minutes),
    )


@router.get("/quote", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def get_quote(
    from_city: str = Query(..., min_length=1),
    to_city: str = Query(..., min_length=1),
    seats: int = Query(default=4, ge=1, le=8),
) -> QuoteResponse:
    quote = quote_route(from_city, to_city, seats)
    return QuoteResponse(
        from_city=from_city,
        to_city=to_city,
        available=quote is not None,
        quote=FareQuoteModel.from_quote(quote) if quote else None,
    )


@router.get("/quote/{distance_km}", response_model=FareQuoteModel, status_code=status.HTTP_200_OK)
def get_quote_for_distance(distance_km: int, seats: int = Query(default=4, ge=1, le=8)) -> FareQuoteModel:
    return FareQuoteModel.from_quote(quote_fare(distance_km, seats))


@router.post("/validate", response_model=PriceValidationResponse, status_code=status.HTTP_200_OK)
def post_validate_price(request: PriceValidationRequest) -> PriceValidationResponse:
    check, quote = check_route_price(request.price, request.from_city, request.to_city, request.seats)
    return PriceValidationResponse.from_check(check, quote)


@router.get("/routes", response_model=List[KnownRouteModel], status_code=status.HTTP_200_OK)
def list_known_routes() -> List[KnownRouteModel]:
    return [
        KnownRouteModel(city_a=entry.city_a, city_b=entry.city_b, km=entry.km)
        for entry in iter_distance_entries()
    ]
