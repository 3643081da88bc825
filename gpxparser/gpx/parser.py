"""
GPX Parser Service

Parses GPX documents into GPXDocument models and derives distance,
elevation and slope statistics for every track and route.
"""

import logging
import math
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import List, Optional, Type, TypeVar, Union

from gpxpy.gpx import GPXException
from gpxpy.gpxfield import parse_time

from gpxparser.shared.elevation import aggregate_elevation
from gpxparser.shared.geo import accumulate_distance, compute_slopes

from .schemas import (
    Author,
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
from .xml_tree import (
    descendants,
    direct_child,
    element_text,
    first_descendant,
    local_name,
    parse_xml,
    text_of,
)

logger = logging.getLogger(__name__)

SequenceT = TypeVar("SequenceT", bound=PointSequence)


def parse_coordinate(value: Optional[str]) -> float:
    """Parse a lat/lon attribute. Missing or non-numeric values give nan."""
    if value is None:
        return math.nan
    try:
        return float(value)
    except ValueError:
        return math.nan


def parse_elevation(value: Optional[str]) -> Optional[float]:
    """Parse <ele> text. Only finite numbers count as an elevation."""
    if value is None:
        return None
    try:
        ele = float(value)
    except ValueError:
        return None
    return ele if math.isfinite(ele) else None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GPX (ISO 8601) timestamp, None when missing or invalid."""
    if value is None:
        return None
    text = value.strip()
    try:
        parsed = parse_time(text)
    except (GPXException, ValueError) as e:
        logger.warning(f"Ignoring invalid GPX time {value!r}: {e}")
        return None
    if parsed is None and text:
        logger.warning(f"Ignoring invalid GPX time {value!r}")
    return parsed


class GPXParserService:
    """Service for parsing GPX documents."""

    @staticmethod
    def parse(content: Union[str, bytes]) -> GPXDocument:
        """
        Parse GPX content into a GPXDocument.

        Missing optional elements become None. Missing or invalid lat/lon
        attributes become nan rather than failing the parse.

        Args:
            content: GPX document as text or UTF-8 bytes

        Returns:
            GPXDocument with metadata, waypoints, tracks and routes

        Raises:
            InvalidGPXError: If the content is not well-formed XML
        """
        root = parse_xml(content)

        document = GPXDocument(
            metadata=GPXParserService._parse_metadata(root),
            waypoints=[
                GPXParserService._parse_waypoint(wpt)
                for wpt in descendants(root, "wpt")
            ],
            tracks=[
                GPXParserService._parse_sequence(trk, "trkpt", Track)
                for trk in descendants(root, "trk")
            ],
            routes=[
                GPXParserService._parse_sequence(rte, "rtept", Route)
                for rte in descendants(root, "rte")
            ],
        )

        logger.debug(
            f"Parsed GPX: {len(document.waypoints)} waypoints, "
            f"{len(document.tracks)} tracks, {len(document.routes)} routes"
        )
        return document

    @staticmethod
    def _parse_metadata(root: ET.Element) -> Metadata:
        """Extract <metadata>, or an empty Metadata when there is none."""
        metadata = first_descendant(root, "metadata")
        if metadata is None:
            return Metadata()

        # metadata/author/link and metadata/link share a tag name
        link_elem = direct_child(metadata, "link")

        return Metadata(
            name=text_of(metadata, "name"),
            desc=text_of(metadata, "desc"),
            time=parse_timestamp(text_of(metadata, "time")),
            author=GPXParserService._parse_author(metadata),
            link=GPXParserService._parse_link(link_elem) if link_elem is not None else None,
        )

    @staticmethod
    def _parse_author(metadata: ET.Element) -> Author:
        author_elem = first_descendant(metadata, "author")
        if author_elem is None:
            return Author()

        email = Email()
        email_elem = first_descendant(author_elem, "email")
        if email_elem is not None:
            email = Email(id=email_elem.get("id"), domain=email_elem.get("domain"))

        return Author(
            name=text_of(author_elem, "name"),
            email=email,
            link=GPXParserService._parse_link(first_descendant(author_elem, "link")),
        )

    @staticmethod
    def _parse_link(link_elem: Optional[ET.Element]) -> Link:
        """Build a Link; an absent element gives an empty Link."""
        if link_elem is None:
            return Link()
        return Link(
            href=link_elem.get("href"),
            text=text_of(link_elem, "text"),
            type=text_of(link_elem, "type"),
        )

    @staticmethod
    def _parse_point(elem: ET.Element) -> Point:
        return Point(**GPXParserService._point_fields(elem))

    @staticmethod
    def _point_fields(elem: ET.Element) -> dict:
        lat = parse_coordinate(elem.get("lat"))
        lon = parse_coordinate(elem.get("lon"))
        if math.isnan(lat) or math.isnan(lon):
            logger.debug(
                f"Invalid coordinates on <{local_name(elem.tag)}>: "
                f"lat={elem.get('lat')!r} lon={elem.get('lon')!r}"
            )

        return {
            "lat": lat,
            "lon": lon,
            "ele": parse_elevation(text_of(elem, "ele")),
            "time": parse_timestamp(text_of(elem, "time")),
        }

    @staticmethod
    def _parse_waypoint(wpt: ET.Element) -> Waypoint:
        return Waypoint(
            name=text_of(wpt, "name"),
            sym=text_of(wpt, "sym"),
            cmt=text_of(wpt, "cmt"),
            desc=text_of(wpt, "desc"),
            **GPXParserService._point_fields(wpt),
        )

    @staticmethod
    def _parse_sequence(
        elem: ET.Element,
        point_tag: str,
        model: Type[SequenceT],
    ) -> SequenceT:
        """
        Build a track or route.

        Args:
            elem: <trk> or <rte> element
            point_tag: "trkpt" or "rtept"
            model: Track or Route

        Returns:
            The record with points, distance, elevation and slopes
        """
        # <type> may also appear deeper, e.g. inside extensions
        type_elem = direct_child(elem, "type")

        points: List[Point] = [
            GPXParserService._parse_point(pt) for pt in descendants(elem, point_tag)
        ]
        distance = accumulate_distance(points)

        return model(
            name=text_of(elem, "name"),
            cmt=text_of(elem, "cmt"),
            desc=text_of(elem, "desc"),
            src=text_of(elem, "src"),
            number=text_of(elem, "number"),
            link=GPXParserService._parse_link(first_descendant(elem, "link")),
            type=element_text(type_elem) if type_elem is not None else None,
            points=points,
            distance=distance,
            elevation=aggregate_elevation(points),
            slopes=compute_slopes(points, distance.cumul),
        )


def parse_gpx(content: Union[str, bytes]) -> GPXDocument:
    """Shortcut for GPXParserService.parse()."""
    return GPXParserService.parse(content)
