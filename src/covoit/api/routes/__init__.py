"""Route group exports."""

from . import cities, geocoding, health, pricing, reservations, rides

__all__ = ["cities", "geocoding", "health", "pricing", "reservations", "rides"]
