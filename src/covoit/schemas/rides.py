"""Ride and reservation API schemas."""

from __future__ import annotations

from datetime import date, time
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..data.cities_repository import find_city, normalize
from ..models.domain import PaymentMethod, Reservation, ReservationStatus


class RideCreateRequest(BaseModel):
    departure_city: str = Field(..., min_length=1)
    arrival_city: str = Field(..., min_length=1)
    departure_address: Optional[str] = None
    arrival_address: Optional[str] = None
    departure_date: date
    departure_time: time
    price: int = Field(..., ge=0, description="Price per seat in FCFA.")
    total_seats: int = Field(..., ge=1, le=8)
    allows_luggage: bool = True
    allows_smoking: bool = False
    description: Optional[str] = None

    @field_validator("departure_city", "arrival_city")
    @classmethod
    def _strip_city(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("city must not be blank")
        return value

    @model_validator(mode="after")
    def _distinct_cities(self) -> "RideCreateRequest":
        departure = find_city(self.departure_city)
        same_city = normalize(self.departure_city) == normalize(self.arrival_city) or (
            departure is not None and departure == find_city(self.arrival_city)
        )
        if same_city:
            raise ValueError("La ville d'arrivée doit être différente de la ville de départ")
        return self


class RideCreateResponse(BaseModel):
    ride: dict
    warning: Optional[str] = None


class ReservationRequest(BaseModel):
    seats: int = Field(default=1, ge=1, le=8)
    payment_method: Optional[PaymentMethod] = None


class ReservationModel(BaseModel):
    id: str
    ride_id: str
    passenger_id: str
    seats_booked: int
    total_price: int
    payment_method: Optional[PaymentMethod] = None
    status: ReservationStatus

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> "ReservationModel":
        return cls(
            id=reservation.id,
            ride_id=reservation.ride_id,
            passenger_id=reservation.passenger_id,
            seats_booked=reservation.seats_booked,
            total_price=reservation.total_price,
            payment_method=reservation.payment_method,
            status=reservation.status,
        )


class ReservationCreateResponse(BaseModel):
    reservation: ReservationModel
    available_seats: int


class ReservationStatusUpdate(BaseModel):
    status: ReservationStatus
