"""Domain-specific exceptions for the sprite converter."""

from pathlib import Path


class SpritebitsError(Exception):
    """Base class for every failure the converter reports."""


class ResourceError(SpritebitsError):
    """Raised when an input or output stream cannot be opened or written."""

    def __init__(self, path: Path | str, reason: str | None = None):
        message = f"Cannot access file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MetadataError(SpritebitsError, ValueError):
    """Raised when sprite-sheet metadata is missing, malformed or empty."""


class InvalidImageError(SpritebitsError, ValueError):
    """Raised when the image stream cannot be decoded."""

    def __init__(self, reason: str | None = None):
        message = "Invalid image data"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ValidationError(SpritebitsError, ValueError):
    """Raised when frames, dimensions or settings fail validation."""
