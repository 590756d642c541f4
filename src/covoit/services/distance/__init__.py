"""Distance resolution services."""

from .resolver import estimate_duration, resolve_distance, road_distance_from_coords

__all__ = ["resolve_distance", "road_distance_from_coords", "estimate_duration"]
