"""Image decoding with Pillow."""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from .errors import InvalidImageError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_FORMATS = {"PNG", "GIF", "BMP"}


def decode_image(stream: BinaryIO) -> Image.Image:
    """Decode a lossless raster image from ``stream`` and return it as RGBA."""

    data = stream.read()
    if not data:
        raise InvalidImageError("empty input")

    try:
        image = Image.open(io.BytesIO(data))
    except UnidentifiedImageError as exc:
        raise InvalidImageError("unrecognised image format") from exc
    except (OSError, Image.DecompressionBombError) as exc:
        raise InvalidImageError(str(exc)) from exc

    if image.format not in ALLOWED_IMAGE_FORMATS:
        raise InvalidImageError(f"unsupported format {image.format}")

    try:
        image.load()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise InvalidImageError(str(exc) or exc.__class__.__name__) from exc

    logger.debug("Decoded %s image %sx%s (mode %s)", image.format, image.width, image.height, image.mode)
    return image.convert("RGBA")
