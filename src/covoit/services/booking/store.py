"""Seat storage backends with atomic reserve/release semantics."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import date, time
from typing import Any, Optional, Protocol

from ...models.domain import (
    PaymentMethod,
    Reservation,
    ReservationStatus,
    RideOffer,
    RideStatus,
)
from .errors import InsufficientSeats, InvalidStatusTransition, ReservationNotFound, RideNotFound

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED, ReservationStatus.COMPLETED}
    ),
    ReservationStatus.CONFIRMED: frozenset({ReservationStatus.CANCELLED, ReservationStatus.COMPLETED}),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.COMPLETED: frozenset(),
}


def allowed_sources(status: ReservationStatus) -> list[ReservationStatus]:
    """Statuses a reservation may currently hold to move to ``status``."""

    return [source for source, targets in ALLOWED_TRANSITIONS.items() if status in targets]


def _transition_error(current: ReservationStatus, target: ReservationStatus) -> InvalidStatusTransition:
    return InvalidStatusTransition(f"Impossible de passer de '{current.value}' à '{target.value}'")


class RideSeatStore(Protocol):
    """Persistence boundary for rides, reservations and seat counters."""

    def get_ride(self, ride_id: str) -> Optional[RideOffer]: ...

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]: ...

    def reserve_seats(
        self,
        ride_id: str,
        passenger_id: str,
        seats: int,
        total_price: int,
        payment_method: Optional[PaymentMethod],
    ) -> tuple[Reservation, int]:
        """Decrement seats only if enough remain and insert a pending reservation.

        Returns the reservation and the seats left; raises InsufficientSeats otherwise.
        """
        ...

    def set_reservation_status(
        self, reservation_id: str, status: ReservationStatus, release_seats: bool = False
    ) -> Reservation:
        """Apply a status change only if it is allowed from the current stored status.

        Raises ReservationNotFound or InvalidStatusTransition; seats are released
        in the same atomic unit when ``release_seats`` is set.
        """
        ...


class InMemoryRideStore:
    """Lock-protected store used for local runs and tests."""

    def __init__(self, rides: list[RideOffer] | None = None) -> None:
        self._lock = threading.Lock()
        self._rides: dict[str, RideOffer] = {ride.id: ride for ride in rides or []}
        self._reservations: dict[str, Reservation] = {}

    def add_ride(self, ride: RideOffer) -> None:
        with self._lock:
            self._rides[ride.id] = ride

    def get_ride(self, ride_id: str) -> Optional[RideOffer]:
        with self._lock:
            ride = self._rides.get(ride_id)
            return replace(ride) if ride else None

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            return replace(reservation) if reservation else None

    def reservations_for_ride(self, ride_id: str) -> list[Reservation]:
        with self._lock:
            return [replace(r) for r in self._reservations.values() if r.ride_id == ride_id]

    def reserve_seats(
        self,
        ride_id: str,
        passenger_id: str,
        seats: int,
        total_price: int,
        payment_method: Optional[PaymentMethod],
    ) -> tuple[Reservation, int]:
        with self._lock:
            ride = self._rides.get(ride_id)
            if ride is None:
                raise RideNotFound()
            if ride.available_seats < seats:
                raise InsufficientSeats()
            ride.available_seats -= seats
            reservation = Reservation(
                id=str(uuid.uuid4()),
                ride_id=ride_id,
                passenger_id=passenger_id,
                seats_booked=seats,
                total_price=total_price,
                payment_method=payment_method,
            )
            self._reservations[reservation.id] = reservation
            return replace(reservation), ride.available_seats

    def set_reservation_status(
        self, reservation_id: str, status: ReservationStatus, release_seats: bool = False
    ) -> Reservation:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                raise ReservationNotFound()
            if status not in ALLOWED_TRANSITIONS[reservation.status]:
                raise _transition_error(reservation.status, status)
            if release_seats:
                ride = self._rides.get(reservation.ride_id)
                if ride is not None:
                    ride.available_seats = min(ride.total_seats, ride.available_seats + reservation.seats_booked)
            reservation.status = status
            return replace(reservation)


def ride_from_row(row: dict[str, Any]) -> RideOffer:
    departure_date = row["departure_date"]
    departure_time = row["departure_time"]
    return RideOffer(
        id=str(row["id"]),
        driver_id=str(row["driver_id"]),
        departure_city=row["departure_city"],
        arrival_city=row["arrival_city"],
        departure_date=date.fromisoformat(departure_date) if isinstance(departure_date, str) else departure_date,
        departure_time=time.fromisoformat(departure_time) if isinstance(departure_time, str) else departure_time,
        price_per_seat=int(row["price"]),
        total_seats=int(row["total_seats"]),
        available_seats=int(row["available_seats"]),
        status=RideStatus(row.get("status") or RideStatus.ACTIVE.value),
        departure_address=row.get("departure_address"),
        arrival_address=row.get("arrival_address"),
        allows_luggage=bool(row.get("allows_luggage", True)),
        allows_smoking=bool(row.get("allows_smoking", False)),
        description=row.get("description"),
    )


def reservation_from_row(row: dict[str, Any]) -> Reservation:
    payment_method = row.get("payment_method")
    return Reservation(
        id=str(row["id"]),
        ride_id=str(row["ride_id"]),
        passenger_id=str(row["passenger_id"]),
        seats_booked=int(row["seats_booked"]),
        total_price=int(row["total_price"]),
        payment_method=PaymentMethod(payment_method) if payment_method else None,
        status=ReservationStatus(row.get("status") or ReservationStatus.PENDING.value),
    )


def _single_row(data: Any) -> Optional[dict[str, Any]]:
    if isinstance(data, list):
        return data[0] if data else None
    return data or None


class SupabaseRideStore:
    """Store backed by Supabase tables and the seat-accounting Postgres functions.

    ``reserve_ride_seats`` performs the conditional decrement and the
    reservation insert in a single transaction (see supabase/migrations).
    """

    def __init__(self, client) -> None:
        self.client = client

    def get_ride(self, ride_id: str) -> Optional[RideOffer]:
        response = self.client.table("rides").select("*").eq("id", ride_id).limit(1).execute()
        row = _single_row(response.data)
        return ride_from_row(row) if row else None

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        response = self.client.table("reservations").select("*").eq("id", reservation_id).limit(1).execute()
        row = _single_row(response.data)
        return reservation_from_row(row) if row else None

    def reserve_seats(
        self,
        ride_id: str,
        passenger_id: str,
        seats: int,
        total_price: int,
        payment_method: Optional[PaymentMethod],
    ) -> tuple[Reservation, int]:
        response = self.client.rpc(
            "reserve_ride_seats",
            {
                "p_ride_id": ride_id,
                "p_passenger_id": passenger_id,
                "p_seats": seats,
                "p_total_price": total_price,
                "p_payment_method": payment_method.value if payment_method else None,
            },
        ).execute()
        row = _single_row(response.data)
        if not row or row.get("reservation_id") is None:
            raise InsufficientSeats()
        reservation = Reservation(
            id=str(row["reservation_id"]),
            ride_id=ride_id,
            passenger_id=passenger_id,
            seats_booked=seats,
            total_price=total_price,
            payment_method=payment_method,
        )
        logger.info("Reserved %d seat(s) on ride %s (reservation %s)", seats, ride_id, reservation.id)
        return reservation, int(row["available_seats"])

    def set_reservation_status(
        self, reservation_id: str, status: ReservationStatus, release_seats: bool = False
    ) -> Reservation:
        if release_seats:
            response = self.client.rpc(
                "cancel_reservation_and_release_seats",
                {"p_reservation_id": reservation_id},
            ).execute()
        else:
            response = (
                self.client.table("reservations")
                .update({"status": status.value})
                .eq("id", reservation_id)
                .in_("status", [source.value for source in allowed_sources(status)])
                .execute()
            )
        row = _single_row(response.data)
        if row:
            return reservation_from_row(row)

        current = self.get_reservation(reservation_id)
        if current is None:
            raise ReservationNotFound()
        raise _transition_error(current.status, status)
