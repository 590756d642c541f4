"""Supabase persistence for rides and reservations."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

logger = logging.getLogger(__name__)

DRIVER_FIELDS = "id, full_name, avatar_url, rating, vehicle_brand, vehicle_model, vehicle_color"


def list_rides(
    client,
    origin: str | None = None,
    destination: str | None = None,
    departure_date: date | None = None,
    today: date | None = None,
) -> list[dict[str, Any]]:
    """Active upcoming rides, optionally filtered by city substrings and date."""

    query = (
        client.table("rides")
        .select(f"*, driver:profiles!rides_driver_id_fkey({DRIVER_FIELDS})")
        .eq("status", "active")
        .gte("departure_date", (today or date.today()).isoformat())
        .order("departure_date", desc=False)
    )
    if origin:
        query = query.ilike("departure_city", f"%{origin}%")
    if destination:
        query = query.ilike("arrival_city", f"%{destination}%")
    if departure_date:
        query = query.eq("departure_date", departure_date.isoformat())

    response = query.execute()
    return response.data or []


def create_ride(client, driver_id: str, ride: dict[str, Any]) -> dict[str, Any]:
    """Insert a ride row; all seats start available."""

    row = {
        "driver_id": driver_id,
        "departure_city": ride["departure_city"],
        "arrival_city": ride["arrival_city"],
        "departure_address": ride.get("departure_address"),
        "arrival_address": ride.get("arrival_address"),
        "departure_date": ride["departure_date"].isoformat(),
        "departure_time": ride["departure_time"].isoformat(),
        "price": ride["price"],
        "total_seats": ride["total_seats"],
        "available_seats": ride["total_seats"],
        "allows_luggage": ride.get("allows_luggage", True),
        "allows_smoking": ride.get("allows_smoking", False),
        "description": ride.get("description"),
    }
    response = client.table("rides").insert(row).execute()
    if not response.data:
        raise ValueError("Ride insert returned no data")
    created = response.data[0]
    logger.info(f"Ride {created.get('id')} published by driver {driver_id}")
    return created


def list_passenger_reservations(client, profile_id: str) -> list[dict[str, Any]]:
    response = (
        client.table("reservations")
        .select("*, ride:rides(*, driver:profiles!rides_driver_id_fkey(full_name, avatar_url, phone_number))")
        .eq("passenger_id", profile_id)
        .order("created_at", desc=True)
        .execute()
    )
    return response.data or []


def list_driver_reservations(client, profile_id: str) -> list[dict[str, Any]]:
    response = (
        client.table("reservations")
        .select(
            "*, ride:rides!inner(*), "
            "passenger:profiles!reservations_passenger_id_fkey(full_name, avatar_url, phone_number)"
        )
        .eq("ride.driver_id", profile_id)
        .order("created_at", desc=True)
        .execute()
    )
    return response.data or []


def reservation_belongs_to(client, reservation_id: str, profile_id: str) -> bool:
    """True when the profile is the passenger or the driver of the reservation's ride."""

    response = (
        client.table("reservations")
        .select("passenger_id, ride:rides!inner(driver_id)")
        .eq("id", reservation_id)
        .limit(1)
        .execute()
    )
    rows = response.data or []
    if not rows:
        return False
    row = rows[0]
    ride = row.get("ride") or {}
    return profile_id in {str(row.get("passenger_id")), str(ride.get("driver_id"))}
