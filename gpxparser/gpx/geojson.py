"""
GeoJSON export.

Maps a parsed GPXDocument to a GeoJSON FeatureCollection dict that can be
passed straight to json.dumps.
"""

from typing import Any, Dict, List, Optional

from .schemas import GPXDocument, GPXModel, Point, PointSequence, Waypoint


def _plain(model: Optional[GPXModel]) -> Optional[Dict[str, Any]]:
    """Nested model as a JSON-ready dict (datetimes become ISO strings)."""
    if model is None:
        return None
    return model.model_dump(mode="json")


def _coordinates(point: Point) -> List[Optional[float]]:
    return [point.lon, point.lat, point.ele]


def _line_feature(sequence: PointSequence) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [_coordinates(pt) for pt in sequence.points],
        },
        "properties": {
            "name": sequence.name,
            "cmt": sequence.cmt,
            "desc": sequence.desc,
            "src": sequence.src,
            "number": sequence.number,
            "link": _plain(sequence.link),
            "type": sequence.type,
        },
    }


def _point_feature(waypoint: Waypoint) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": _coordinates(waypoint),
        },
        "properties": {
            "name": waypoint.name,
            "sym": waypoint.sym,
            "cmt": waypoint.cmt,
            "desc": waypoint.desc,
        },
    }


def to_geojson(document: GPXDocument) -> Dict[str, Any]:
    """
    Export a document as a GeoJSON FeatureCollection.

    Features are ordered tracks, then routes, then waypoints. Coordinates
    are [lon, lat, ele] with ele None when unknown. No reprojection or
    coordinate validation is done.

    Args:
        document: Parsed GPX document

    Returns:
        FeatureCollection dict with document metadata as top-level properties
    """
    metadata = document.metadata

    features: List[Dict[str, Any]] = []
    features.extend(_line_feature(track) for track in document.tracks)
    features.extend(_line_feature(route) for route in document.routes)
    features.extend(_point_feature(wpt) for wpt in document.waypoints)

    return {
        "type": "FeatureCollection",
        "features": features,
        "properties": {
            "name": metadata.name,
            "desc": metadata.desc,
            "time": metadata.time.isoformat() if metadata.time else None,
            "author": _plain(metadata.author),
            "link": _plain(metadata.link),
        },
    }
