"""Data models used across the crawl."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from clubfacts.common.constants import (
    STATUS_COLOUR_MISSING,
    STATUS_LOCATION_MISSING,
    STATUS_RESOLVED,
)


@dataclass(frozen=True)
class TeamReference:
    country: str | None
    name: str
    page_url: str


class Coordinate(NamedTuple):
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PixelGrid:
    """Decoded image as packed 0xRRGGBB integers, one per pixel."""

    width: int
    height: int
    pixels: tuple[int, ...]


@dataclass(frozen=True)
class ExtractionResult:
    colours: tuple[str, ...] | None
    location: Coordinate | None

    @property
    def status(self) -> str:
        # A missing palette is reported ahead of a missing location.
        if self.colours is None:
            return STATUS_COLOUR_MISSING
        if self.location is None:
            return STATUS_LOCATION_MISSING
        return STATUS_RESOLVED
