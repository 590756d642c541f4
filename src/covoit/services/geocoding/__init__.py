"""Geocoding and geolocation adapters."""

from .client import GeocodeResult, GeocodingClient, format_coordinates
from .geolocation import GeolocationErrorKind, geolocation_error_message, geolocation_options

__all__ = [
    "GeocodeResult",
    "GeocodingClient",
    "GeolocationErrorKind",
    "format_coordinates",
    "geolocation_error_message",
    "geolocation_options",
]
