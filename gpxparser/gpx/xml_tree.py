"""
XML tree helpers for GPX documents.

Thin layer over xml.etree.ElementTree. Tags are matched by local name in
any (or no) namespace, so GPX 1.0, GPX 1.1 and un-namespaced documents
are read the same way.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from .exceptions import InvalidGPXError

logger = logging.getLogger(__name__)


def parse_xml(content: str | bytes) -> ET.Element:
    """Parse GPX text and return the root element.

    Raises:
        InvalidGPXError: If the content is not well-formed XML
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"GPX content is not UTF-8: {e}")
            raise InvalidGPXError(f"Invalid GPX file: {e}") from e

    try:
        return ET.fromstring(content.lstrip("\ufeff"))  # strip BOM if present
    except ET.ParseError as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise InvalidGPXError(f"Invalid GPX file: {e}") from e


def local_name(tag: str) -> str:
    """'{http://www.topografix.com/GPX/1/1}trk' -> 'trk'"""
    return tag.rsplit("}", 1)[-1]


def descendants(node: ET.Element, tag: str) -> list[ET.Element]:
    """All descendants named `tag`, in document order."""
    return node.findall(f".//{{*}}{tag}")


def first_descendant(node: ET.Element, tag: str) -> ET.Element | None:
    """First descendant named `tag`, in document order."""
    return node.find(f".//{{*}}{tag}")


def direct_child(node: ET.Element, tag: str) -> ET.Element | None:
    """Find the element `tag` belonging to `node` itself.

    GPX reuses tag names at several depths (metadata/link next to
    metadata/author/link, trk/type next to extension types). When more
    than one descendant matches, the immediate children win; if several
    immediate children match, the last one is returned.
    """
    matches = descendants(node, tag)
    if not matches:
        return None

    found = matches[0]
    if len(matches) > 1:
        for child in node:
            if local_name(child.tag) == tag:
                found = child
    return found


def element_text(elem: ET.Element) -> str:
    """Text content of an element, '' when it is empty."""
    return "".join(elem.itertext())


def text_of(node: ET.Element, tag: str) -> str | None:
    """Text of the first descendant named `tag`, None if there is none."""
    elem = first_descendant(node, tag)
    if elem is None:
        return None
    return element_text(elem)
