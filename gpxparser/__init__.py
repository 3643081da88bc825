"""
gpxparser

Parse GPX documents into typed models with distance, elevation and slope
statistics, and export them as GeoJSON.

Usage:
    from gpxparser import parse_gpx

    document = parse_gpx(gpx_text)
    document.tracks[0].distance.total  # meters
    document.to_geojson()
"""

from .gpx import (
    Author,
    Distance,
    Elevation,
    Email,
    GPXDocument,
    GPXParserService,
    InvalidGPXError,
    Link,
    Metadata,
    Point,
    PointSequence,
    Route,
    Track,
    Waypoint,
    parse_gpx,
    to_geojson,
)

__version__ = "1.0.0"

__all__ = [
    "GPXParserService",
    "parse_gpx",
    "to_geojson",
    "InvalidGPXError",
    "Author",
    "Distance",
    "Elevation",
    "Email",
    "GPXDocument",
    "Link",
    "Metadata",
    "Point",
    "PointSequence",
    "Route",
    "Track",
    "Waypoint",
]
