"""Rendering of packed bitmaps as C source text."""

from __future__ import annotations

import logging
from typing import Sequence

from . import Bitmap, FrameMode
from .errors import ValidationError

logger = logging.getLogger(__name__)

SET_PIXEL = "#"
CLEAR_PIXEL = " "


def format_ascii(bitmap: Bitmap) -> str:
    """Return a block comment drawing the frame with ``#`` and spaces."""

    lines = [f"  /* Frame number {bitmap.index}"]
    for y in range(bitmap.height):
        row = bitmap.pixels[y * bitmap.width : (y + 1) * bitmap.width]
        lines.append("      " + "".join(SET_PIXEL if pixel else CLEAR_PIXEL for pixel in row))
    lines.append("  */")
    return "\n".join(lines) + "\n"


def format_bytes(bitmap: Bitmap) -> str:
    """Return the packed bytes as comma-separated ``0x`` literals."""

    return ",".join(f"0x{value:02x}" for value in bitmap.data)


def _scalar_type(value: int) -> str:
    return "uint8_t" if value <= 0xFF else "uint16_t"


def _declare(name: str, value: int) -> str:
    return f"const {_scalar_type(value)} {name} = {value};\n"


def render_source(
    bitmaps: Sequence[Bitmap],
    name: str = "sprite",
    mode: FrameMode = FrameMode.MULTI,
    header_guard: bool = True,
    progmem: bool = True,
) -> str:
    """Render bitmaps as a complete C header.

    Multi-frame output declares ``<name>FrameCount``, ``<name>FrameWidth`` and
    ``<name>FrameHeight`` followed by ``<name>Frames[][N]``; single-frame output
    is a flat ``<name>[N]`` array.
    """

    if not bitmaps:
        raise ValidationError("Nothing to emit: no frames were packed")

    first = bitmaps[0]
    for bitmap in bitmaps[1:]:
        if (bitmap.width, bitmap.height) != (first.width, first.height):
            raise ValidationError(
                f"Frame {bitmap.index} is {bitmap.width}x{bitmap.height}, "
                f"expected {first.width}x{first.height}"
            )
    if mode is FrameMode.SINGLE and len(bitmaps) != 1:
        raise ValidationError(f"Single-frame output takes exactly one frame, got {len(bitmaps)}")

    storage = "const uint8_t PROGMEM" if progmem else "const uint8_t"
    bytes_per_frame = len(first.data)
    parts: list[str] = []

    if header_guard:
        guard = f"{name.upper()}_H"
        parts.append(f"#ifndef {guard}\n#define {guard}\n\n")

    if mode is FrameMode.MULTI:
        parts.append(_declare(f"{name}FrameCount", len(bitmaps)))
        parts.append(_declare(f"{name}FrameWidth", first.width))
        parts.append(_declare(f"{name}FrameHeight", first.height))
        parts.append(f"{storage} {name}Frames[][{bytes_per_frame}] = {{\n")
        parts.append(
            ",\n".join(f"{format_ascii(bitmap)}  {{{format_bytes(bitmap)}}}" for bitmap in bitmaps)
        )
    else:
        parts.append(f"{storage} {name}[{bytes_per_frame}] = {{\n")
        parts.append(f"{format_ascii(first)}  {format_bytes(first)}")
    parts.append("\n};\n")

    if header_guard:
        parts.append("\n#endif\n")

    logger.debug("Rendered %s frame(s) of %s bytes as %s", len(bitmaps), bytes_per_frame, name)
    return "".join(parts)
