"""Road distance resolution between two cities."""

from __future__ import annotations

import logging
from typing import Optional

from ...config import settings
from ...data.cities_repository import find_city
from ...data.distances import load_distance_table
from ..geospatial import haversine_km, round_half_up

logger = logging.getLogger(__name__)


def _lookup_key(value: str) -> str:
    city = find_city(value)
    return city.name if city else value.strip()


def road_distance_from_coords(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    factor: float | None = None,
) -> int:
    """Approximate road distance as the great-circle distance times an indirection factor."""

    indirection = factor if factor is not None else settings.road_indirection_factor
    return round_half_up(haversine_km(lat1, lon1, lat2, lon2) * indirection)


def resolve_distance(from_city: str, to_city: str) -> Optional[int]:
    """Return the road distance in km between two cities, or None when unknown."""

    origin = _lookup_key(from_city)
    destination = _lookup_key(to_city)
    table = load_distance_table()

    if (origin, destination) in table:
        return table[(origin, destination)]
    if (destination, origin) in table:
        return table[(destination, origin)]

    origin_city = find_city(origin)
    destination_city = find_city(destination)
    if origin_city is None or destination_city is None:
        logger.debug("No distance path between %r and %r", from_city, to_city)
        return None

    km = road_distance_from_coords(origin_city.lat, origin_city.lng, destination_city.lat, destination_city.lng)
    logger.debug("Estimated %s -> %s at %d km from coordinates", origin, destination, km)
    return km


def estimate_duration(distance_km: int, average_speed_kmh: float | None = None) -> tuple[int, int]:
    """Split the driving time at the average speed into (hours, minutes)."""

    speed = average_speed_kmh or settings.average_speed_kmh
    total_hours = max(distance_km, 0) / speed
    hours = int(total_hours)
    minutes = round_half_up((total_hours - hours) * 60)
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return hours, minutes
