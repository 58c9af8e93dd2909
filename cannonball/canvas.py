"""Fixed-size pixel grid the trajectory is drawn onto."""
from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from .color import Color, to_rgb8
from .ppm import Ppm


class PixelOutOfBoundsError(IndexError):
    """Raised when reading a pixel outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"pixel ({x}, {y}) is outside a {width}x{height} canvas")
        self.x = x
        self.y = y


class Canvas:
    """Row-major grid of colors.

    Pixels live in a ``(width * height, 3)`` float64 buffer; the pixel at
    ``(x, y)`` is stored at index ``x + width * y``. Writes outside the grid
    are ignored, reads outside it raise ``PixelOutOfBoundsError``.
    """

    def __init__(self, width: int, height: int, fill: Optional[Color] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("Canvas dimensions must not be negative")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._width * self._height, 3), dtype=np.float64)
        if fill is not None:
            self._pixels[:] = fill.as_array()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return self._width * self._height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index_of(self, x: int, y: int) -> int:
        return x + self._width * y

    def write_pixel(self, x: int, y: int, color: Color) -> bool:
        """Set one pixel. Coordinates off the canvas are a silent no-op.

        Returns whether the pixel was written.
        """
        if not self.contains(x, y):
            return False
        self._pixels[self.index_of(x, y)] = color.as_array()
        return True

    def pixel_at(self, x: int, y: int) -> Color:
        if not self.contains(x, y):
            raise PixelOutOfBoundsError(x, y, self._width, self._height)
        return Color.from_array(self._pixels[self.index_of(x, y)])

    def __iter__(self) -> Iterator[Color]:
        for index in range(len(self)):
            yield Color.from_array(self._pixels[index])

    def to_rgb8(self) -> np.ndarray:
        """All pixels as a ``(width * height, 3)`` uint8 array, row-major."""
        return to_rgb8(self._pixels)

    def to_ppm(self) -> Ppm:
        return Ppm.from_canvas(self)
