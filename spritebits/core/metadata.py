"""Sprite-sheet metadata parsing.

Two JSON layouts produced by sprite packers are understood: ``frames`` as a
list of ``{"filename": ..., "frame": {...}}`` objects, or as an object keyed by
filename. Parsing either returns a complete :class:`Spritesheet` or raises
:class:`MetadataError`; there is no partial result.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as SchemaError

from . import Frame, FrameRect, Spritesheet
from .errors import MetadataError
from ..utils import streams

logger = logging.getLogger(__name__)


class FrameRectModel(BaseModel):
    """Frame rectangle as written by the packer."""

    x: StrictInt = Field(..., ge=0)
    y: StrictInt = Field(..., ge=0)
    w: StrictInt = Field(..., ge=1)
    h: StrictInt = Field(..., ge=1)


class FrameEntry(BaseModel):
    """One entry of the ``frames`` collection."""

    filename: StrictStr
    frame: FrameRectModel
    rotated: StrictBool = False

    @field_validator("rotated")
    @classmethod
    def _reject_rotated(cls, value):
        if value:
            raise ValueError("rotated frames are not supported")
        return value


class SheetMeta(BaseModel):
    """Informational ``meta`` block."""

    image: StrictStr = ""


class SheetDocument(BaseModel):
    """Top-level metadata document."""

    frames: list[FrameEntry] = Field(..., min_length=1)
    meta: SheetMeta = Field(default_factory=SheetMeta)

    @field_validator("frames", mode="before")
    @classmethod
    def _frames_from_hash(cls, value):
        if isinstance(value, dict):
            return [
                {**entry, "filename": name} if isinstance(entry, dict) else entry
                for name, entry in value.items()
            ]
        return value


def parse_spritesheet(payload: str | bytes, source: str = "<metadata>") -> Spritesheet:
    """Parse a metadata document into an ordered :class:`Spritesheet`."""

    try:
        raw: Any = json.loads(payload)
    except ValueError as exc:
        raise MetadataError(f"{source} is not valid JSON: {exc}") from exc

    try:
        document = SheetDocument.model_validate(raw)
    except SchemaError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise MetadataError(f"{source} has invalid frame data: {problems}") from exc

    frames = tuple(
        Frame(
            name=entry.filename,
            rect=FrameRect(x=entry.frame.x, y=entry.frame.y, width=entry.frame.w, height=entry.frame.h),
        )
        for entry in document.frames
    )
    logger.info("Loaded %s frames from %s", len(frames), source)
    return Spritesheet(frames=frames, image=document.meta.image)


def load_spritesheet(path: str | Path) -> Spritesheet:
    """Read and parse the metadata file at ``path``."""

    return parse_spritesheet(streams.read_bytes(path), source=str(path))
