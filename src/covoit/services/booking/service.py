"""Seat accounting for ride reservations."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ...models.domain import PaymentMethod, Reservation, ReservationStatus, RideOffer, RideStatus
from .errors import (
    InvalidSeatCount,
    InvalidStatusTransition,
    ReservationNotFound,
    RideNotBookable,
    SelfBookingNotAllowed,
)
from .store import ALLOWED_TRANSITIONS, RideSeatStore

logger = logging.getLogger(__name__)

DriverNotifier = Callable[[RideOffer, Reservation], None]


def _log_notification(ride: RideOffer, reservation: Reservation) -> None:
    logger.info(
        "Driver %s notified of reservation %s (%d seat(s))",
        ride.driver_id,
        reservation.id,
        reservation.seats_booked,
    )


def reserve(
    store: RideSeatStore,
    ride: RideOffer,
    passenger_id: str,
    seats_requested: int,
    total_price: int,
    payment_method: Optional[PaymentMethod] = None,
    notify_driver: DriverNotifier | None = None,
) -> Reservation:
    """Book seats on a ride for a passenger.

    Identity is checked before seat availability; the availability check and
    the decrement happen atomically inside the store, so concurrent requests
    can never overbook a ride.
    """

    if ride.driver_id == passenger_id:
        raise SelfBookingNotAllowed()
    if seats_requested < 1:
        raise InvalidSeatCount()
    if ride.status != RideStatus.ACTIVE:
        raise RideNotBookable()

    reservation, seats_left = store.reserve_seats(
        ride.id, passenger_id, seats_requested, total_price, payment_method
    )
    ride.available_seats = seats_left

    (notify_driver or _log_notification)(ride, reservation)
    return reservation


def change_reservation_status(
    store: RideSeatStore, reservation_id: str, status: ReservationStatus
) -> Reservation:
    """Move a reservation along its lifecycle; cancelling gives the seats back.

    The early check gives a precise message; the store re-checks the current
    status inside its atomic update so concurrent changes cannot both apply.
    """

    reservation = store.get_reservation(reservation_id)
    if reservation is None:
        raise ReservationNotFound()
    if status not in ALLOWED_TRANSITIONS[reservation.status]:
        raise InvalidStatusTransition(
            f"Impossible de passer de '{reservation.status.value}' à '{status.value}'"
        )
    release = status == ReservationStatus.CANCELLED
    return store.set_reservation_status(reservation_id, status, release_seats=release)
