"""Degree/minute/second coordinate parsing."""

from __future__ import annotations

import re
from typing import Iterable

from clubfacts.common.errors import ParseMismatch
from clubfacts.common.models import Coordinate

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_DMS_RE = re.compile(
    r"^(?P<degrees>\d+(?:\.\d+)?)°"
    r"(?P<minutes>\d+(?:\.\d+)?)′"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)?″)?"
    r"(?P<hemisphere>[NSEWO])$"
)

# "O" (Ost/Oest) is east in German and Spanish language editions.
NEGATIVE_HEMISPHERES = frozenset({"S", "W"})


def normalise_dms_text(text: str) -> str:
    cleaned = _TAG_RE.sub("", text)
    cleaned = cleaned.replace("&nbsp;", "").replace("\xa0", "")
    cleaned = _WHITESPACE_RE.sub("", cleaned)
    return cleaned.replace(",", ".")


def parse_dms(token: str) -> float:
    """Convert a token such as ``51°30′26″N`` to signed decimal degrees.

    Seconds are optional. South and west are negative. Raises
    ``ParseMismatch`` when the token does not follow the notation.
    """
    match = _DMS_RE.match(normalise_dms_text(token))
    if match is None:
        raise ParseMismatch(f"Not a degree/minute/second token: {token!r}")

    degrees = float(match.group("degrees"))
    minutes = float(match.group("minutes"))
    seconds = float(match.group("seconds") or 0.0)
    sign = -1 if match.group("hemisphere") in NEGATIVE_HEMISPHERES else 1
    return (degrees + minutes / 60 + seconds / 3600) * sign


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def pair_coordinates(texts: Iterable[str]) -> Coordinate | None:
    """Pair the first two non-empty texts as latitude then longitude.

    Pairing is positional: callers list latitude sources before longitude
    sources. Returns None when fewer than two values are present or the
    pair is out of range; raises ``ParseMismatch`` when either value does
    not parse.
    """
    values = [normalised for normalised in (normalise_dms_text(text) for text in texts) if normalised]
    if len(values) < 2:
        return None

    latitude = parse_dms(values[0])
    longitude = parse_dms(values[1])
    if not is_valid_coordinate(latitude, longitude):
        return None
    return Coordinate(latitude, longitude)
