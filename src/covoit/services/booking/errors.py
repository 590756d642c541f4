"""Booking failures surfaced to callers."""

from __future__ import annotations


class BookingError(Exception):
    """Base class for reservation failures; ``message`` is user-facing."""

    message = "Erreur lors de la réservation"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class InsufficientSeats(BookingError):
    message = "Pas assez de places disponibles"


class SelfBookingNotAllowed(BookingError):
    message = "Vous ne pouvez pas réserver votre propre trajet"


class RideNotFound(BookingError):
    message = "Trajet introuvable"


class RideNotBookable(BookingError):
    message = "Ce trajet n'est plus ouvert aux réservations"


class InvalidSeatCount(BookingError):
    message = "Le nombre de places demandé est invalide"


class ReservationNotFound(BookingError):
    message = "Réservation introuvable"


class InvalidStatusTransition(BookingError):
    message = "Changement de statut non autorisé"
