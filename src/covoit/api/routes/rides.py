"""Ride search, publication and booking endpoints."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...models.domain import Profile
from ...persistence import rides as rides_store
from ...schemas.rides import (
    ReservationCreateResponse,
    ReservationModel,
    ReservationRequest,
    RideCreateRequest,
    RideCreateResponse,
)
from ...services.booking import (
    BookingError,
    InsufficientSeats,
    InvalidSeatCount,
    RideNotBookable,
    RideNotFound,
    RideSeatStore,
    SelfBookingNotAllowed,
    reserve,
)
from ...services.pricing import check_route_price
from ..deps import get_current_profile, get_database, get_ride_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rides", tags=["rides"])

BOOKING_ERROR_STATUS: dict[type[BookingError], int] = {
    InsufficientSeats: status.HTTP_409_CONFLICT,
    SelfBookingNotAllowed: status.HTTP_403_FORBIDDEN,
    RideNotFound: status.HTTP_404_NOT_FOUND,
    RideNotBookable: status.HTTP_409_CONFLICT,
    InvalidSeatCount: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def booking_http_error(exc: BookingError) -> HTTPException:
    code = BOOKING_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=code, detail=exc.message)


@router.get("", status_code=status.HTTP_200_OK)
def search_rides(
    origin: str | None = Query(default=None, description="Departure city substring"),
    destination: str | None = Query(default=None, description="Arrival city substring"),
    departure_date: date | None = Query(default=None, alias="date"),
    client=Depends(get_database),
) -> list[dict]:
    try:
        return rides_store.list_rides(client, origin=origin, destination=destination, departure_date=departure_date)
    except Exception as exc:
        logger.error(f"Error fetching rides: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Erreur lors du chargement des trajets",
        ) from exc


@router.post("", response_model=RideCreateResponse, status_code=status.HTTP_201_CREATED)
def publish_ride(
    request: RideCreateRequest,
    profile: Profile = Depends(get_current_profile),
    client=Depends(get_database),
) -> RideCreateResponse:
    check, quote = check_route_price(
        request.price, request.departure_city, request.arrival_city, request.total_seats
    )
    if not check.accepted:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=check.warning)

    try:
        created = rides_store.create_ride(client, profile.id, request.model_dump())
    except Exception as exc:
        logger.error(f"Error creating ride: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Erreur lors de la création du trajet",
        ) from exc
    return RideCreateResponse(ride=created, warning=check.warning)


@router.post(
    "/{ride_id}/reservations",
    response_model=ReservationCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def book_ride(
    ride_id: str,
    request: ReservationRequest,
    profile: Profile = Depends(get_current_profile),
    store: RideSeatStore = Depends(get_ride_store),
) -> ReservationCreateResponse:
    try:
        ride = store.get_ride(ride_id)
        if ride is None:
            raise RideNotFound()
        reservation = reserve(
            store,
            ride,
            passenger_id=profile.id,
            seats_requested=request.seats,
            total_price=ride.price_per_seat * request.seats,
            payment_method=request.payment_method,
        )
    except BookingError as exc:
        raise booking_http_error(exc) from exc
    except Exception as exc:
        logger.error(f"Error booking ride {ride_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=BookingError.message,
        ) from exc

    return ReservationCreateResponse(
        reservation=ReservationModel.from_reservation(reservation),
        available_seats=ride.available_seats,
    )
