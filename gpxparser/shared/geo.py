"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for distance and slope calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import List, Sequence

from gpxparser.gpx.schemas import Distance, Point

# Earth radius in meters
EARTH_RADIUS_M = 6371000.0


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters (nan if any coordinate is nan)
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push near-antipodal points just above 1
    if a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def accumulate_distance(points: Sequence[Point]) -> Distance:
    """
    Calculate total and cumulative distance for a point sequence.

    cumul[i] is the distance travelled from the first point to point i,
    so cumul has one entry per point and the last entry equals the total.

    Args:
        points: Ordered points with lat/lon

    Returns:
        Distance with total (meters) and cumul
    """
    total = 0.0
    cumul: List[float] = []

    for i, point in enumerate(points):
        if i > 0:
            prev = points[i - 1]
            total += haversine(prev.lat, prev.lon, point.lat, point.lon)
        cumul.append(total)

    if cumul:
        cumul[-1] = total

    return Distance(total=total, cumul=cumul)


def calculate_slope(elevation_diff_m: float, distance_m: float) -> float:
    """
    Calculate slope in percent.

    Never raises: a zero-length segment gives +/-inf, or nan when
    there is no elevation change either.
    """
    rise = elevation_diff_m * 100
    if distance_m == 0:
        if rise == 0 or math.isnan(rise):
            return math.nan
        return math.copysign(math.inf, rise)
    return rise / distance_m


def compute_slopes(points: Sequence[Point], cumul: Sequence[float]) -> List[float]:
    """
    Calculate the slope of every consecutive pair of points.

    Args:
        points: Ordered points with optional elevation
        cumul: Cumulative distances aligned with points

    Returns:
        len(points) - 1 slopes in percent, nan where an elevation is missing
    """
    slopes: List[float] = []

    for i in range(len(points) - 1):
        ele1 = points[i].ele
        ele2 = points[i + 1].ele

        if ele1 is None or ele2 is None:
            slopes.append(math.nan)
            continue

        slopes.append(calculate_slope(ele2 - ele1, cumul[i + 1] - cumul[i]))

    return slopes
