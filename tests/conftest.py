import json

import numpy as np
import pytest
from PIL import Image


def rgba_from_mask(mask, color=(255, 255, 255, 255)):
    """Build an RGBA array with ``color`` where mask is set and transparent elsewhere."""

    mask = np.asarray(mask, dtype=bool)
    pixels = np.zeros(mask.shape + (4,), dtype=np.uint8)
    pixels[mask] = color
    return pixels


@pytest.fixture
def write_png(tmp_path):
    def _write(mask, name="sprite.png", color=(255, 255, 255, 255)):
        path = tmp_path / name
        Image.fromarray(rgba_from_mask(mask, color)).save(path)
        return path

    return _write


@pytest.fixture
def write_json(tmp_path):
    def _write(payload, name="sheet.json"):
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
