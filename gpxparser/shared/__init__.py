"""
Shared geometry utilities (NOT parsing logic).

Usage:
    from gpxparser.shared import haversine, accumulate_distance
    from gpxparser.shared.elevation import aggregate_elevation
"""
from .geo import (
    haversine,
    accumulate_distance,
    calculate_slope,
    compute_slopes,
    EARTH_RADIUS_M,
)
from .elevation import (
    aggregate_elevation,
    calculate_elevation_changes,
)

__all__ = [
    # geo
    "haversine",
    "accumulate_distance",
    "calculate_slope",
    "compute_slopes",
    "EARTH_RADIUS_M",
    # elevation
    "aggregate_elevation",
    "calculate_elevation_changes",
]
