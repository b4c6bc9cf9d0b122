"""Slash-delimited location paths for comparison diagnostics."""

from __future__ import annotations

from collections.abc import Iterable

LOCATION_DELIMITER = "/"
ROOT_LOCATION = LOCATION_DELIMITER

PathSegment = str | int


def append(location: str, segment: PathSegment) -> str:
    """Append one segment, without doubling the delimiter at the root."""
    separator = "" if location.endswith(LOCATION_DELIMITER) else LOCATION_DELIMITER
    return f"{location}{separator}{segment}"


def render_location(segments: Iterable[PathSegment], *, root: str = ROOT_LOCATION) -> str:
    location = root
    for segment in segments:
        location = append(location, segment)
    return location
