"""Reservation listing and lifecycle endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...models.domain import Profile
from ...persistence import rides as rides_store
from ...schemas.rides import ReservationModel, ReservationStatusUpdate
from ...services.booking import (
    BookingError,
    InvalidStatusTransition,
    ReservationNotFound,
    RideSeatStore,
    change_reservation_status,
)
from ..deps import get_current_profile, get_database, get_ride_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reservations", tags=["reservations"])

LOAD_ERROR_DETAIL = "Erreur lors du chargement des réservations"


@router.get("/mine", status_code=status.HTTP_200_OK)
def get_my_reservations(
    profile: Profile = Depends(get_current_profile),
    client=Depends(get_database),
) -> list[dict]:
    try:
        return rides_store.list_passenger_reservations(client, profile.id)
    except Exception as exc:
        logger.error(f"Error fetching reservations for passenger {profile.id}: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=LOAD_ERROR_DETAIL) from exc


@router.get("/driver", status_code=status.HTTP_200_OK)
def get_driver_reservations(
    profile: Profile = Depends(get_current_profile),
    client=Depends(get_database),
) -> list[dict]:
    try:
        return rides_store.list_driver_reservations(client, profile.id)
    except Exception as exc:
        logger.error(f"Error fetching reservations for driver {profile.id}: {exc}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=LOAD_ERROR_DETAIL) from exc


@router.patch("/{reservation_id}", response_model=ReservationModel, status_code=status.HTTP_200_OK)
def update_reservation(
    reservation_id: str,
    update: ReservationStatusUpdate,
    profile: Profile = Depends(get_current_profile),
    client=Depends(get_database),
    store: RideSeatStore = Depends(get_ride_store),
) -> ReservationModel:
    try:
        owned = rides_store.reservation_belongs_to(client, reservation_id, profile.id)
        if not owned:
            raise ReservationNotFound()
        reservation = change_reservation_status(store, reservation_id, update.status)
    except ReservationNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except InvalidStatusTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message) from exc
    except BookingError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    except Exception as exc:
        logger.error(f"Error updating reservation {reservation_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Erreur lors de la mise à jour de la réservation",
        ) from exc
    return ReservationModel.from_reservation(reservation)
