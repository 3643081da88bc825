"""
GPX document module.

Usage:
    from gpxparser.gpx import GPXParserService, to_geojson

    document = GPXParserService.parse(content)
    collection = to_geojson(document)

Components:
- GPXParserService: Parse GPX text into a GPXDocument
- to_geojson: Export a GPXDocument as a GeoJSON FeatureCollection
- xml_tree: Tag lookups over the ElementTree
- Schemas: Pydantic models of the parsed document
"""

# schemas first: gpxparser.shared builds these models
from .schemas import (
    Author,
    Distance,
    Elevation,
    Email,
    GPXDocument,
    Link,
    Metadata,
    Point,
    PointSequence,
    Route,
    Track,
    Waypoint,
)
from .exceptions import InvalidGPXError
from .parser import GPXParserService, parse_gpx
from .geojson import to_geojson

__all__ = [
    # Services
    "GPXParserService",
    "parse_gpx",
    "to_geojson",
    # Errors
    "InvalidGPXError",
    # Schemas
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
