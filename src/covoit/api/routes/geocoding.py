"""Geocoding proxy endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...services.geocoding import (
    GeocodingClient,
    GeolocationErrorKind,
    geolocation_error_message,
    geolocation_options,
)
from ...schemas.geocoding import GeocodeResultModel, GeolocationErrorResponse, ReverseGeocodeResponse
from ..deps import get_geocoding_client

router = APIRouter(prefix="/geocoding", tags=["geocoding"])


@router.get("/reverse", response_model=ReverseGeocodeResponse, status_code=status.HTTP_200_OK)
def reverse(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    client: GeocodingClient = Depends(get_geocoding_client),
) -> ReverseGeocodeResponse:
    return ReverseGeocodeResponse(lat=lat, lng=lng, name=client.reverse_geocode(lat, lng))


@router.get("/search", response_model=List[GeocodeResultModel], status_code=status.HTTP_200_OK)
def search(
    q: str = Query(..., min_length=2),
    country: str | None = Query(default=None, min_length=2, max_length=2),
    client: GeocodingClient = Depends(get_geocoding_client),
) -> List[GeocodeResultModel]:
    return [
        GeocodeResultModel(name=result.name, lat=result.lat, lng=result.lng)
        for result in client.forward_geocode(q, country)
    ]


@router.get(
    "/geolocation-errors/{kind}",
    response_model=GeolocationErrorResponse,
    status_code=status.HTTP_200_OK,
)
def geolocation_error(kind: GeolocationErrorKind) -> GeolocationErrorResponse:
    return GeolocationErrorResponse(kind=kind.value, message=geolocation_error_message(kind))


@router.get("/geolocation-options", status_code=status.HTTP_200_OK)
def get_geolocation_options() -> dict:
    """Options the browser should pass when acquiring the device position."""
    return geolocation_options()
