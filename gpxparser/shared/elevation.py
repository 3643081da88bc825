"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import List, Optional, Sequence, Tuple

from gpxparser.gpx.schemas import Elevation, Point


def calculate_elevation_changes(
    elevations: Sequence[Optional[float]]
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Pairs where either elevation is missing are skipped.

    Args:
        elevations: List of elevation values (None when unknown)

    Returns:
        Tuple of (gain_m, loss_m), both non-negative
    """
    gain = 0.0
    loss = 0.0

    for i in range(1, len(elevations)):
        prev = elevations[i - 1]
        current = elevations[i]
        if prev is None or current is None:
            continue

        diff = current - prev
        if diff > 0:
            gain += diff
        elif diff < 0:
            loss += abs(diff)

    return gain, loss


def _or_none(value: Optional[float]) -> Optional[float]:
    """Zero means nothing was measured."""
    return value if value else None


def aggregate_elevation(points: Sequence[Point]) -> Elevation:
    """
    Aggregate elevation statistics for a point sequence.

    Only points with an elevation take part. Aggregates equal to 0
    are reported as None, the same as when nothing was measured.

    Args:
        points: Ordered points with optional elevation

    Returns:
        Elevation with max, min, pos (gain), neg (loss) and avg
    """
    gain, loss = calculate_elevation_changes([p.ele for p in points])

    elevations: List[float] = [p.ele for p in points if p.ele is not None]
    if not elevations:
        return Elevation(pos=_or_none(gain), neg=_or_none(loss))

    return Elevation(
        max=_or_none(max(elevations)),
        min=_or_none(min(elevations)),
        pos=_or_none(gain),
        neg=_or_none(loss),
        avg=_or_none(sum(elevations) / len(elevations)),
    )
