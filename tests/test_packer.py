import numpy as np
import pytest
from PIL import Image

from spritebits.core import BitOrder, Frame, FrameRect
from spritebits.core.errors import ValidationError
from spritebits.core import packer

from conftest import rgba_from_mask


def _frame(width, height, x=0, y=0):
    return Frame(name="cell", rect=FrameRect(x, y, width, height))


def test_is_foreground_treats_any_visible_pixel_as_set():
    assert packer.is_foreground((255, 255, 255, 255)) is True
    assert packer.is_foreground((0, 0, 0, 255)) is True
    assert packer.is_foreground((0, 0, 0, 1)) is True
    assert packer.is_foreground((0, 0, 0, 0)) is False
    assert packer.is_foreground((200, 10, 10, 0)) is False


def test_is_lit_ignores_black():
    assert packer.is_lit((0, 0, 0, 255)) is False
    assert packer.is_lit((1, 0, 0, 255)) is True
    assert packer.is_lit((255, 255, 255, 0)) is False


def test_foreground_mask_matches_scalar_predicate():
    pixels = np.array(
        [[(0, 0, 0, 0), (0, 0, 0, 255)], [(9, 9, 9, 0), (10, 20, 30, 40)]],
        dtype=np.uint8,
    )
    mask = packer.foreground_mask(pixels, "visible")
    expected = [[packer.is_foreground(px) for px in row] for row in pixels]
    assert mask.tolist() == expected


@pytest.mark.parametrize("order", list(BitOrder))
def test_full_image_packs_to_ff(order):
    image = Image.fromarray(rgba_from_mask(np.ones((16, 24), dtype=bool)))
    bitmap = packer.build_bitmap(image, _frame(24, 16), 0, order)
    assert len(bitmap.data) == 24 * 16 // 8
    assert set(bitmap.data) == {0xFF}


@pytest.mark.parametrize("order", list(BitOrder))
def test_transparent_image_packs_to_zero(order):
    image = Image.new("RGBA", (8, 16), (0, 0, 0, 0))
    bitmap = packer.build_bitmap(image, _frame(8, 16), 0, order)
    assert bitmap.data == bytes(16)
    assert bitmap.pixels == [0] * 128


@pytest.mark.parametrize("order", list(BitOrder))
def test_unpack_reverses_pack(order):
    rng = np.random.default_rng(1234)
    grid = rng.integers(0, 2, size=(24, 40), dtype=np.uint8)
    data = packer.pack(grid, order)
    assert len(data) == 24 * 40 // 8
    assert np.array_equal(packer.unpack(data, 40, 24, order), grid)


def test_row_major_quadrant_example():
    mask = np.zeros((16, 16), dtype=bool)
    mask[:8, :8] = True
    data = packer.pack(mask, BitOrder.ROW_MAJOR)
    assert len(data) == 32
    for y in range(16):
        assert data[2 * y] == (0xFF if y < 8 else 0x00)
        assert data[2 * y + 1] == 0x00


def test_row_major_bit_position_is_x_mod_8():
    mask = np.zeros((8, 16), dtype=bool)
    mask[3, 10] = True
    data = packer.pack(mask, BitOrder.ROW_MAJOR)
    assert data[10 // 8 + 3 * 2] == 1 << (10 % 8)
    assert sum(data) == 1 << 2


def test_column_major_bit_position_is_y_mod_8():
    mask = np.zeros((16, 16), dtype=bool)
    mask[0, 0] = True
    mask[11, 5] = True
    data = packer.pack(mask, BitOrder.COLUMN_MAJOR)
    assert data[0] == 0x01
    assert data[5 + 1 * 16] == 1 << 3
    assert sum(1 for value in data if value) == 2


@pytest.mark.parametrize("shape", [(8, 12), (10, 8), (0, 8)])
def test_pack_rejects_unaligned_dimensions(shape):
    with pytest.raises(ValidationError):
        packer.pack(np.zeros(shape, dtype=bool), BitOrder.ROW_MAJOR)


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValidationError):
        packer.unpack(b"\x00" * 3, 8, 8, BitOrder.COLUMN_MAJOR)


def test_build_bitmap_crops_frame():
    mask = np.zeros((8, 16), dtype=bool)
    mask[:, 8:] = True
    image = Image.fromarray(rgba_from_mask(mask))
    left = packer.build_bitmap(image, _frame(8, 8, x=0), 0)
    right = packer.build_bitmap(image, _frame(8, 8, x=8), 1)
    assert left.data == bytes(8)
    assert right.data == b"\xff" * 8
    assert right.index == 1


def test_build_bitmap_rejects_out_of_bounds_frame():
    image = Image.new("RGBA", (16, 16))
    with pytest.raises(ValidationError):
        packer.build_bitmap(image, _frame(16, 8, x=8), 0)


def test_build_bitmap_with_lit_rule_skips_black():
    image = Image.new("RGBA", (8, 8), (0, 0, 0, 255))
    assert packer.build_bitmap(image, _frame(8, 8), 0, rule="visible").data == b"\xff" * 8
    assert packer.build_bitmap(image, _frame(8, 8), 0, rule="lit").data == bytes(8)
