"""Palette ranking from kit images and colour fallbacks from inline styles."""

from __future__ import annotations

import re
from collections import Counter

from clubfacts.common.constants import DOMINANT_SHARE, MAX_PALETTE_SIZE
from clubfacts.common.models import PixelGrid

_DECLARATION_SPLIT_RE = re.compile(r"\s*;\s*")
_PROPERTY_SPLIT_RE = re.compile(r"\s*:\s*")
_BACKGROUND_RE = re.compile(r"^#?[A-Fa-f0-9]{6}(?:/#?[A-Fa-f0-9]{6})?$")


def unpack_rgb(packed: int) -> tuple[int, int, int]:
    blue = packed & 0xFF
    green = (packed >> 8) & 0xFF
    red = (packed >> 16) & 0xFF
    return red, green, blue


def rgb_token(packed: int) -> str:
    red, green, blue = unpack_rgb(packed)
    return f"rgb({red},{green},{blue})"


def build_histogram(grid: PixelGrid) -> Counter[str]:
    return Counter(rgb_token(packed) for packed in grid.pixels)


def extract_palette(grid: PixelGrid | None) -> tuple[str, ...] | None:
    """Rank the colours of a kit image.

    Every colour covering more than a quarter of the image is kept, most
    frequent first. When no colour is that dominant the three most frequent
    are used instead. At most three tokens are returned; an image without
    pixels has no palette.
    """
    if grid is None:
        return None

    total = grid.width * grid.height
    ranked = build_histogram(grid).most_common()
    dominant = [token for token, count in ranked if count > total * DOMINANT_SHARE][:MAX_PALETTE_SIZE]
    palette = dominant or [token for token, _count in ranked[:MAX_PALETTE_SIZE]]
    return tuple(palette) or None


def parse_style(style: str) -> dict[str, str]:
    declarations: dict[str, str] = {}
    for declaration in _DECLARATION_SPLIT_RE.split(style.strip()):
        parts = _PROPERTY_SPLIT_RE.split(declaration)
        if len(parts) == 2:
            declarations[parts[0].strip().lower()] = parts[1]
    return declarations


def extract_style_fallback(style: str | None) -> tuple[str, ...] | None:
    """Read one or two ``#RRGGBB`` colours from a ``background-color`` declaration.

    ``#AABBCC/112233`` style values describe a two-tone kit.
    """
    if not style:
        return None
    value = parse_style(style).get("background-color", "").strip()
    if not _BACKGROUND_RE.match(value):
        return None
    return tuple(part if part.startswith("#") else f"#{part}" for part in value.split("/"))
