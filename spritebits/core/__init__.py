"""Core data model for sprite conversion."""

__all__ = [
    "BitOrder",
    "FrameMode",
    "FrameRect",
    "Frame",
    "Spritesheet",
    "Bitmap",
    "ConversionSettings",
    "ConversionOutcome",
]

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class BitOrder(str, Enum):
    """How eight pixels are gathered into one byte."""

    # 8 horizontally adjacent pixels of one row, leftmost pixel in bit 0
    ROW_MAJOR = "row"
    # 8 vertically stacked pixels of one column, top pixel in bit 0 (OLED pages)
    COLUMN_MAJOR = "column"


class FrameMode(str, Enum):
    """Whether the whole image is one sprite or a sheet of frames."""

    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class FrameRect:
    """Pixel-space bounding box of a frame within the source image."""

    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Return the rectangle as a Pillow crop box."""

        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class Frame:
    """One named cell of a sprite sheet."""

    name: str
    rect: FrameRect


@dataclass(frozen=True)
class Spritesheet:
    """Ordered frames read from sprite-sheet metadata."""

    frames: tuple[Frame, ...]
    image: str = ""


@dataclass
class Bitmap:
    """Thresholded and packed pixels of a single frame."""

    width: int
    height: int
    index: int
    pixels: list[int] = field(default_factory=list)
    data: bytes = b""


@dataclass
class ConversionSettings:
    """User-configurable settings for one conversion run."""

    input_path: str = "-"
    output_path: str = "-"
    name: str = "sprite"
    metadata_path: Optional[str] = None
    mode: FrameMode = FrameMode.SINGLE
    bit_order: BitOrder = BitOrder.COLUMN_MAJOR
    header_guard: bool = True
    progmem: bool = True
    foreground: str = "visible"


@dataclass
class ConversionOutcome:
    """Summary of what a conversion run produced."""

    frame_count: int
    frame_width: int
    frame_height: int
    bytes_per_frame: int
    output_path: str
