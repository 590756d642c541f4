"""Device geolocation error kinds and their user-facing messages."""

from __future__ import annotations

from enum import Enum

# Options handed to the browser geolocation API.
GEOLOCATION_TIMEOUT_MS = 10_000
GEOLOCATION_MAXIMUM_AGE_MS = 60_000


class GeolocationErrorKind(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"


_MESSAGES = {
    GeolocationErrorKind.PERMISSION_DENIED: "Autorisez l'accès à votre position dans les paramètres du navigateur",
    GeolocationErrorKind.POSITION_UNAVAILABLE: "Position indisponible, choisissez le lieu sur la carte",
    GeolocationErrorKind.TIMEOUT: "La localisation a pris trop de temps, réessayez",
}


def geolocation_error_message(kind: GeolocationErrorKind | str) -> str:
    return _MESSAGES[GeolocationErrorKind(kind)]


def geolocation_options() -> dict[str, int | bool]:
    return {
        "enableHighAccuracy": True,
        "timeout": GEOLOCATION_TIMEOUT_MS,
        "maximumAge": GEOLOCATION_MAXIMUM_AGE_MS,
    }
