"""Raster image decoding into packed pixel grids."""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from clubfacts.common.errors import DecodeError
from clubfacts.common.models import PixelGrid


def decode_image(data: bytes) -> PixelGrid:
    try:
        with Image.open(io.BytesIO(data)) as image:
            rgb = image.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise DecodeError(f"Unreadable image ({len(data)} bytes)") from exc

    width, height = rgb.size
    raw = rgb.tobytes()
    pixels = tuple((raw[i] << 16) | (raw[i + 1] << 8) | raw[i + 2] for i in range(0, len(raw), 3))
    return PixelGrid(width=width, height=height, pixels=pixels)
