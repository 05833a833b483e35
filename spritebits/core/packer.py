"""Thresholding and bit packing of frame pixels using numpy."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from PIL import Image

from . import Bitmap, BitOrder, Frame
from .errors import ValidationError
from .rules import FOREGROUND_RULES, lit_mask, visible_mask
from ..utils import validators

logger = logging.getLogger(__name__)

Pixel = Sequence[int]


def is_foreground(pixel: Pixel) -> bool:
    """Return True when an RGBA pixel counts as a set bit.

    Fully transparent pixels are background whatever colour they carry; every
    other pixel, opaque black included, is foreground.
    """

    return bool(visible_mask(pixel))


def is_lit(pixel: Pixel) -> bool:
    """Return True for a visible pixel that is not black."""

    return bool(lit_mask(pixel))


def foreground_mask(pixels: np.ndarray, rule: str = "visible") -> np.ndarray:
    """Apply the named foreground rule to an ``(height, width, 4)`` array."""

    return FOREGROUND_RULES[rule](pixels)


def pack(grid: np.ndarray, order: BitOrder) -> bytes:
    """Pack a ``(height, width)`` binary grid into bytes.

    Row-major: byte ``x // 8 + y * (width // 8)``, bit ``x % 8``.
    Column-major: byte ``x + (y // 8) * width``, bit ``y % 8``.
    """

    bits = np.asarray(grid, dtype=bool)
    height, width = bits.shape
    validators.validate_byte_aligned(width, height, label="Bitmap")

    if order is BitOrder.ROW_MAJOR:
        groups = bits.reshape(height, width // 8, 8)
    else:
        groups = bits.reshape(height // 8, 8, width).transpose(0, 2, 1)
    return np.packbits(groups, axis=-1, bitorder="little").tobytes()


def unpack(data: bytes, width: int, height: int, order: BitOrder) -> np.ndarray:
    """Inverse of :func:`pack`; returns a ``(height, width)`` array of 0/1."""

    validators.validate_byte_aligned(width, height, label="Bitmap")
    expected = width * height // 8
    if len(data) != expected:
        raise ValidationError(f"Expected {expected} bytes for {width}x{height}, got {len(data)}")

    raw = np.frombuffer(bytes(data), dtype=np.uint8)
    bits = np.unpackbits(raw, bitorder="little")
    if order is BitOrder.ROW_MAJOR:
        return bits.reshape(height, width)
    return bits.reshape(height // 8, width, 8).transpose(0, 2, 1).reshape(height, width)


def build_bitmap(
    image: Image.Image,
    frame: Frame,
    index: int,
    order: BitOrder = BitOrder.COLUMN_MAJOR,
    rule: str = "visible",
) -> Bitmap:
    """Threshold and pack the pixels of ``frame`` within ``image``."""

    validators.validate_frame(frame, image.size)
    cell = np.asarray(image.crop(frame.rect.box).convert("RGBA"))
    grid = foreground_mask(cell, rule)
    data = pack(grid, order)
    logger.debug(
        "Packed frame %s (%s) %sx%s into %s bytes", index, frame.name, frame.rect.width, frame.rect.height, len(data)
    )
    return Bitmap(
        width=frame.rect.width,
        height=frame.rect.height,
        index=index,
        pixels=grid.astype(np.uint8).ravel().tolist(),
        data=data,
    )
