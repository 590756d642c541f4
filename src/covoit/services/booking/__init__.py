"""Booking seat accounting."""

from .errors import (
    BookingError,
    InsufficientSeats,
    InvalidSeatCount,
    InvalidStatusTransition,
    ReservationNotFound,
    RideNotBookable,
    RideNotFound,
    SelfBookingNotAllowed,
)
from .service import change_reservation_status, reserve
from .store import InMemoryRideStore, RideSeatStore, SupabaseRideStore

__all__ = [
    "BookingError",
    "InsufficientSeats",
    "InvalidSeatCount",
    "InvalidStatusTransition",
    "ReservationNotFound",
    "RideNotBookable",
    "RideNotFound",
    "SelfBookingNotAllowed",
    "InMemoryRideStore",
    "RideSeatStore",
    "SupabaseRideStore",
    "change_reservation_status",
    "reserve",
]
