"""
GPX-related schemas.

Pydantic models for a parsed GPX document. Models are frozen: a document
is built once per parse call and only read afterwards.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GPXModel(BaseModel):
    """Base for all parsed GPX models."""

    model_config = ConfigDict(frozen=True)


class Link(GPXModel):
    """<link> element: href attribute plus text and MIME type."""

    href: Optional[str] = None
    text: Optional[str] = None
    type: Optional[str] = None


class Email(GPXModel):
    """<email id="..." domain="..."/>"""

    id: Optional[str] = None
    domain: Optional[str] = None


class Author(GPXModel):
    """Document author."""

    name: Optional[str] = None
    email: Optional[Email] = None
    link: Optional[Link] = None


class Metadata(GPXModel):
    """Document metadata."""

    name: Optional[str] = None
    desc: Optional[str] = None
    time: Optional[datetime] = None
    author: Optional[Author] = None
    link: Optional[Link] = None


class Point(GPXModel):
    """
    Single point of a track or route.

    lat/lon are nan when the attribute is missing or not a number;
    callers must validate coordinates before use.
    """

    lat: float
    lon: float
    ele: Optional[float] = None
    time: Optional[datetime] = None


class Waypoint(Point):
    """Named point of interest (<wpt>)."""

    name: Optional[str] = None
    sym: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None


class Distance(GPXModel):
    """Total distance (meters) and running totals aligned with the points."""

    total: float = 0.0
    cumul: List[float] = Field(default_factory=list)


class Elevation(GPXModel):
    """Elevation statistics (meters). Zero or unknown values are None."""

    max: Optional[float] = None
    min: Optional[float] = None
    pos: Optional[float] = None  # total gain
    neg: Optional[float] = None  # total loss, as a positive number
    avg: Optional[float] = None


class PointSequence(GPXModel):
    """Common shape of tracks and routes."""

    name: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    src: Optional[str] = None
    number: Optional[str] = None
    link: Link = Field(default_factory=Link)
    type: Optional[str] = None

    points: List[Point] = Field(default_factory=list)
    distance: Distance = Field(default_factory=Distance)
    elevation: Elevation = Field(default_factory=Elevation)
    slopes: List[float] = Field(default_factory=list)


class Track(PointSequence):
    """Recorded path (<trk>)."""


class Route(PointSequence):
    """Planned path (<rte>)."""


class GPXDocument(GPXModel):
    """Everything extracted from one GPX document."""

    metadata: Metadata = Field(default_factory=Metadata)
    waypoints: List[Waypoint] = Field(default_factory=list)
    tracks: List[Track] = Field(default_factory=list)
    routes: List[Route] = Field(default_factory=list)

    def to_geojson(self) -> dict:
        """Export as a GeoJSON FeatureCollection."""
        from gpxparser.gpx.geojson import to_geojson

        return to_geojson(self)
