"""Validation helpers for settings, frames and identifiers."""

from __future__ import annotations

import re
from typing import Sequence

from ..core import ConversionSettings, Frame, FrameMode
from ..core.errors import ValidationError
from ..core.rules import FOREGROUND_RULES


PIXELS_PER_BYTE = 8
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_identifier(name: str) -> str:
    """Ensure ``name`` can be used as a C identifier."""

    if not name or not IDENTIFIER_PATTERN.match(name):
        raise ValidationError(f"Name {name!r} is not a valid C identifier")
    return name


def validate_byte_aligned(width: int, height: int, label: str = "Frame") -> None:
    """Ensure both dimensions are positive multiples of eight."""

    if width <= 0 or height <= 0:
        raise ValidationError(f"{label} size {width}x{height} must be positive")
    if width % PIXELS_PER_BYTE or height % PIXELS_PER_BYTE:
        raise ValidationError(
            f"{label} size {width}x{height} must be a multiple of {PIXELS_PER_BYTE} in both dimensions"
        )


def validate_frame(frame: Frame, image_size: tuple[int, int]) -> None:
    """Ensure a frame is byte aligned and lies inside the image."""

    rect = frame.rect
    validate_byte_aligned(rect.width, rect.height, label=f"Frame {frame.name!r}")
    image_width, image_height = image_size
    if rect.x < 0 or rect.y < 0 or rect.x + rect.width > image_width or rect.y + rect.height > image_height:
        raise ValidationError(
            f"Frame {frame.name!r} at ({rect.x},{rect.y}) size {rect.width}x{rect.height} "
            f"exceeds image bounds {image_width}x{image_height}"
        )


def validate_uniform_frames(frames: Sequence[Frame]) -> None:
    """Ensure every frame shares the first frame's dimensions."""

    if not frames:
        raise ValidationError("At least one frame is required")
    first = frames[0].rect
    for frame in frames[1:]:
        if (frame.rect.width, frame.rect.height) != (first.width, first.height):
            raise ValidationError(
                f"Frame {frame.name!r} is {frame.rect.width}x{frame.rect.height}, "
                f"expected {first.width}x{first.height} like the first frame"
            )


def validate_settings(settings: ConversionSettings) -> None:
    """Reject inconsistent combinations before any stream is opened."""

    validate_identifier(settings.name)
    if settings.mode is FrameMode.MULTI and not settings.metadata_path:
        raise ValidationError("Multi-frame mode requires a metadata file")
    if settings.mode is FrameMode.SINGLE and settings.metadata_path is not None:
        raise ValidationError("Single-frame mode does not take a metadata file")
    if settings.foreground not in FOREGROUND_RULES:
        choices = ", ".join(sorted(FOREGROUND_RULES))
        raise ValidationError(f"Unknown foreground rule {settings.foreground!r} (choose from {choices})")
