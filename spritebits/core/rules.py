"""Foreground rules deciding which RGBA pixels become set bits."""

from __future__ import annotations

from typing import Callable

import numpy as np


def _visible_channels(pixels: np.ndarray) -> np.ndarray:
    """Return RGBA channels with the colour of fully transparent pixels zeroed."""

    rgba = np.asarray(pixels, dtype=np.uint8)
    return rgba * (rgba[..., 3:4] != 0)


def visible_mask(pixels: np.ndarray) -> np.ndarray:
    """Mask of pixels whose RGBA channels are not all zero."""

    return np.any(_visible_channels(pixels) != 0, axis=-1)


def lit_mask(pixels: np.ndarray) -> np.ndarray:
    """Mask of visible pixels with a non-black colour."""

    return np.any(_visible_channels(pixels)[..., :3] != 0, axis=-1)


FOREGROUND_RULES: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "visible": visible_mask,
    "lit": lit_mask,
}
