"""One-bit bitmaps with a transparency mask, Bayer dithering and BMP export."""

from __future__ import annotations

import struct

__all__ = ["Bitmap", "BAYER_MATRIX"]

#: 8x8 ordered-dithering matrix holding every value from 0 to 63 once.
BAYER_MATRIX = (
    (0, 48, 12, 60, 3, 51, 15, 63),
    (32, 16, 44, 28, 35, 19, 47, 31),
    (8, 56, 4, 52, 11, 59, 7, 55),
    (40, 24, 36, 20, 43, 27, 39, 23),
    (2, 50, 14, 62, 1, 49, 13, 61),
    (34, 18, 46, 30, 33, 17, 45, 29),
    (10, 58, 6, 54, 9, 57, 5, 53),
    (42, 26, 38, 22, 41, 25, 37, 21),
)

_FILE_HEADER_LENGTH = 14
_CORE_HEADER_LENGTH = 12
_BYTES_PER_COLOR = 3


class Bitmap:
    """Bitmap of one bit per pixel: set bits are white, cleared bits black.

    Each row takes ``row_bytes`` bytes, most significant bit first. The mask
    uses the same layout; a set mask bit marks an opaque pixel.
    """

    def __init__(self, width: int, height: int, white: bool = False, opaque: bool = False) -> None:
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.width = width
        self.height = height
        self.row_bytes = (width + 7) // 8
        length = self.row_bytes * height
        self.data = bytearray(b"\xff" * length if white else length)
        self.mask = bytearray(b"\xff" * length if opaque else length)

    def size(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} bitmap")
        return x // 8 + y * self.row_bytes, 0x80 >> (x % 8)

    def get_pixel(self, x: int, y: int) -> bool:
        """Tell whether the pixel at ``(x, y)`` is white."""
        index, bit = self._locate(x, y)
        return bool(self.data[index] & bit)

    def set_pixel(self, x: int, y: int, value: bool) -> None:
        """Make the pixel at ``(x, y)`` white when ``value`` is true, else black."""
        index, bit = self._locate(x, y)
        if value:
            self.data[index] |= bit
        else:
            self.data[index] &= ~bit & 0xFF

    def is_opaque(self, x: int, y: int) -> bool:
        index, bit = self._locate(x, y)
        return bool(self.mask[index] & bit)

    def _dithered_pixels(self, threshold: int):
        for y in range(self.height):
            row = BAYER_MATRIX[y % 8]
            for x in range(self.width):
                if row[x % 8] < threshold:
                    yield x // 8 + y * self.row_bytes, 0x80 >> (x % 8)

    def fade(self, value: int) -> None:
        """Turn the bitmap into a black dither of intensity ``value`` (0 to 100).

        Every pixel becomes black and the dithered ones are made opaque.
        """
        if not 0 <= value <= 100:
            raise ValueError(f"fade value must be between 0 and 100, was {value}")
        self.data[:] = bytes(len(self.data))
        for index, bit in self._dithered_pixels(value * 64 // 100):
            self.mask[index] |= bit

    def shade(self, brightness: float) -> None:
        """Darken with a dither: 0 is all black, 1 leaves the bitmap unchanged."""
        value = int(100.0 * (1.0 - min(max(brightness, 0.0), 1.0)))
        threshold = value * 64 // 100
        if threshold == 0:
            return
        for index, bit in self._dithered_pixels(threshold):
            self.data[index] &= ~bit & 0xFF

    def copy_and_shade(self, brightness: float) -> Bitmap:
        """Return a shaded copy, leaving this bitmap untouched."""
        copy = Bitmap(self.width, self.height)
        copy.data[:] = self.data
        copy.mask[:] = self.mask
        copy.shade(brightness)
        return copy

    def to_bmp(self) -> bytes:
        """Return the bitmap as a 24-bit BMP file with a core header."""
        content_position = _FILE_HEADER_LENGTH + _CORE_HEADER_LENGTH
        file_size = content_position + self.width * self.height * _BYTES_PER_COLOR
        output = bytearray()
        output += struct.pack("<2siii", b"BM", file_size, 0, content_position)
        output += struct.pack(
            "<ihhhh", _CORE_HEADER_LENGTH, self.width, self.height, 1, 8 * _BYTES_PER_COLOR
        )
        for y in reversed(range(self.height)):
            for x in range(self.width):
                color = 0xFF if self.get_pixel(x, y) else 0x00
                output += bytes((color,)) * _BYTES_PER_COLOR
        return bytes(output)