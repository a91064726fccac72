import struct

import pytest

from melice.bitmap import Bitmap


def _count(bitmap, predicate):
    return sum(
        1 for y in range(bitmap.height) for x in range(bitmap.width) if predicate(x, y)
    )


def test_size_and_pixels():
    bitmap = Bitmap(10, 3)
    assert bitmap.size() == (10, 3)
    bitmap.set_pixel(9, 2, True)
    assert bitmap.get_pixel(9, 2)
    assert not bitmap.get_pixel(8, 2)
    bitmap.set_pixel(9, 2, False)
    assert not bitmap.get_pixel(9, 2)


def test_out_of_range_pixel_raises():
    bitmap = Bitmap(4, 4)
    with pytest.raises(IndexError):
        bitmap.get_pixel(4, 0)
    with pytest.raises(IndexError):
        bitmap.set_pixel(0, -1, True)


def test_fade_full_makes_every_pixel_opaque_black():
    bitmap = Bitmap(8, 8, white=True)
    bitmap.fade(100)
    assert _count(bitmap, bitmap.is_opaque) == 64
    assert _count(bitmap, bitmap.get_pixel) == 0


def test_fade_zero_makes_nothing_opaque():
    bitmap = Bitmap(8, 8, white=True)
    bitmap.fade(0)
    assert _count(bitmap, bitmap.is_opaque) == 0


def test_fade_half_covers_half_of_a_tile():
    bitmap = Bitmap(8, 8)
    bitmap.fade(50)
    assert _count(bitmap, bitmap.is_opaque) == 32


def test_fade_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        Bitmap(8, 8).fade(101)


def test_shade_full_brightness_changes_nothing():
    bitmap = Bitmap(8, 8, white=True)
    bitmap.shade(1.0)
    assert _count(bitmap, bitmap.get_pixel) == 64


def test_shade_zero_brightness_blackens_everything():
    bitmap = Bitmap(16, 16, white=True)
    bitmap.shade(0.0)
    assert _count(bitmap, bitmap.get_pixel) == 0


def test_shade_half_darkens_half_a_tile():
    bitmap = Bitmap(8, 8, white=True)
    bitmap.shade(0.5)
    assert _count(bitmap, bitmap.get_pixel) == 32


def test_copy_and_shade_leaves_original():
    bitmap = Bitmap(8, 8, white=True, opaque=True)
    copy = bitmap.copy_and_shade(0.0)
    assert _count(bitmap, bitmap.get_pixel) == 64
    assert _count(copy, copy.get_pixel) == 0
    assert _count(copy, copy.is_opaque) == 64


def test_bmp_header():
    bmp = Bitmap(3, 2).to_bmp()
    magic, file_size, reserved, content = struct.unpack_from("<2siii", bmp)
    assert magic == b"BM"
    assert file_size == len(bmp) == 14 + 12 + 3 * 2 * 3
    assert reserved == 0
    assert content == 26
    assert struct.unpack_from("<ihhhh", bmp, 14) == (12, 3, 2, 1, 24)


def test_bmp_pixels_are_written_bottom_row_first():
    bitmap = Bitmap(1, 2)
    bitmap.set_pixel(0, 0, True)
    assert bitmap.to_bmp()[26:] == b"\x00" * 3 + b"\xff" * 3