"""Linear RGB colors and their conversion to 8-bit channels."""
from __future__ import annotations

from numbers import Real

import numpy as np

from .vector_math import Triple

MAX_CHANNEL = 255


def to_rgb8(channels: np.ndarray) -> np.ndarray:
    """Convert float channels of shape (..., 3) to uint8.

    Each channel is scaled by 255 and truncated toward zero, then clamped to
    [0, 255]. NaN channels become 0.
    """
    scaled = np.trunc(np.asarray(channels, dtype=np.float64) * MAX_CHANNEL)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=MAX_CHANNEL, neginf=0.0)
    return np.clip(scaled, 0, MAX_CHANNEL).astype(np.uint8)


class Color(Triple):
    """Red, green and blue channels, unbounded until converted to 8 bits."""

    __slots__ = ()

    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def to_rgb(self) -> tuple[int, int, int]:
        r, g, b = to_rgb8(self._data).tolist()
        return r, g, b

    def __str__(self) -> str:
        return "{} {} {}".format(*self.to_rgb())

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return add_colors(self, other)

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return sub_colors(self, other)

    def __mul__(self, other):
        if isinstance(other, Color):
            return hadamard(self, other)
        if isinstance(other, Real):
            return scale_color(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return scale_color(self, other)

    def __repr__(self) -> str:
        return f"Color({self.red!r}, {self.green!r}, {self.blue!r})"


def add_colors(a: Color, b: Color) -> Color:
    return Color.from_array(a._data + b._data)


def sub_colors(a: Color, b: Color) -> Color:
    return Color.from_array(a._data - b._data)


def scale_color(color: Color, scalar: float) -> Color:
    return Color.from_array(color._data * scalar)


def hadamard(a: Color, b: Color) -> Color:
    """Blend two colors by multiplying matching channels."""
    return Color.from_array(a._data * b._data)


def black() -> Color:
    return Color(0.0, 0.0, 0.0)


def red() -> Color:
    return Color(1.0, 0.0, 0.0)
