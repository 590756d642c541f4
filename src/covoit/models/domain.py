"""Domain models for cities, rides and reservations."""

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Optional


class RideStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentMethod(str, Enum):
    MTN_MOMO = "mtn_momo"
    MOOV_MONEY = "moov_money"
    CASH = "cash"


@dataclass(frozen=True, slots=True)
class City:
    """A Beninese city with its accepted spellings and GPS coordinates."""

    name: str
    variants: frozenset[str]
    lat: float
    lng: float
    department: str


@dataclass(frozen=True, slots=True)
class DistanceEntry:
    """Known road distance between two cities, stored in one direction only."""

    city_a: str
    city_b: str
    km: int


@dataclass(slots=True)
class RideOffer:
    """A ride published by a driver."""

    id: str
    driver_id: str
    departure_city: str
    arrival_city: str
    departure_date: date
    departure_time: time
    price_per_seat: int
    total_seats: int
    available_seats: int
    status: RideStatus = RideStatus.ACTIVE
    departure_address: Optional[str] = None
    arrival_address: Optional[str] = None
    allows_luggage: bool = True
    allows_smoking: bool = False
    description: Optional[str] = None


@dataclass(slots=True)
class Reservation:
    """Seats booked by a passenger on a ride."""

    id: str
    ride_id: str
    passenger_id: str
    seats_booked: int
    total_price: int
    payment_method: Optional[PaymentMethod] = None
    status: ReservationStatus = ReservationStatus.PENDING


@dataclass(slots=True)
class Profile:
    """Read-only view of the authenticated user's profile."""

    id: str
    user_id: str
    full_name: str
    is_driver: bool = False
    phone_number: Optional[str] = None
    rating: Optional[float] = None
    vehicle_brand: Optional[str] = None
    vehicle_model: Optional[str] = None
    vehicle_color: Optional[str] = None
    license_plate: Optional[str] = None
    raw: dict = field(default_factory=dict)
