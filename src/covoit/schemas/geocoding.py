"""Geocoding API schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ReverseGeocodeResponse(BaseModel):
    lat: float
    lng: float
    name: str


class GeocodeResultModel(BaseModel):
    name: str
    lat: float
    lng: float


class GeolocationErrorResponse(BaseModel):
    kind: str
    message: str
