"""Image detection so binary image files are never rewritten."""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from .constants import IMAGE_FORMATS


def is_image(data: bytes) -> bool:
    """Return True when ``data`` starts with a recognised raster image header.

    Sniffing runs on an in-memory copy, so the caller's bytes are never
    consumed. Only the header is parsed; pixel data is not decoded.
    """
    if not data:
        return False
    try:
        with Image.open(io.BytesIO(data), formats=IMAGE_FORMATS):
            return True
    except UnidentifiedImageError:
        return False
    except Image.DecompressionBombError:
        # Pillow only raises this after identifying the format.
        return True
