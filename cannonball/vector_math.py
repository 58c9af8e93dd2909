"""Point and vector helpers for the projectile simulation."""
from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator, TypeVar

import numpy as np

T = TypeVar("T", bound="Triple")


class Triple:
    """Three float64 components backed by a numpy array.

    Equality is exact and only holds between instances of the same type, so a
    ``Point`` never compares equal to a ``Vector`` with the same components.
    """

    __slots__ = ("_data",)
    # make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls: type[T], data: np.ndarray) -> T:
        obj = cls.__new__(cls)
        obj._data = np.array(data, dtype=np.float64).reshape(3)
        return obj

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def as_array(self) -> np.ndarray:
        return self._data.copy()

    def copy(self: T) -> T:
        return type(self).from_array(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # accumulate() mutates in place

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


class Vector(Triple):
    __slots__ = ()

    def __add__(self, other):
        if not isinstance(other, (Vector, Point)):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return sub(self, other)

    def __neg__(self) -> Vector:
        return neg(self)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return scale(self, scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return divide(self, scalar)

    def dot(self, other: Vector) -> float:
        return dot(self, other)

    def cross(self, other: Vector) -> Vector:
        return cross(self, other)

    def magnitude(self) -> float:
        return magnitude(self)

    def normalize(self) -> Vector:
        return normalize(self)


class Point(Triple):
    __slots__ = ()

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, (Vector, Point)):
            return NotImplemented
        return sub(self, other)


def to_vector(value: Iterable[float] | np.ndarray) -> Vector:
    """Convert any three-element iterable to a Vector."""
    return Vector.from_array(np.asarray(list(value), dtype=np.float64))


def to_point(value: Iterable[float] | np.ndarray) -> Point:
    """Convert any three-element iterable to a Point."""
    return Point.from_array(np.asarray(list(value), dtype=np.float64))


def add(a: Triple, b: Triple) -> Triple:
    """Vector + Vector -> Vector, Point + Vector (either side) -> Point."""
    if isinstance(a, Vector) and isinstance(b, Vector):
        return Vector.from_array(a._data + b._data)
    if isinstance(a, Point) and isinstance(b, Vector) or isinstance(a, Vector) and isinstance(b, Point):
        return Point.from_array(a._data + b._data)
    raise TypeError(f"cannot add {type(a).__name__} and {type(b).__name__}")


def sub(a: Triple, b: Triple) -> Triple:
    """Point - Point -> Vector, Point - Vector -> Point, Vector - Vector -> Vector."""
    if isinstance(a, Point) and isinstance(b, Point):
        return Vector.from_array(a._data - b._data)
    if isinstance(a, Point) and isinstance(b, Vector):
        return Point.from_array(a._data - b._data)
    if isinstance(a, Vector) and isinstance(b, Vector):
        return Vector.from_array(a._data - b._data)
    raise TypeError(f"cannot subtract {type(b).__name__} from {type(a).__name__}")


def neg(vec: Vector) -> Vector:
    return Vector.from_array(-vec._data)


def scale(vec: Vector, scalar: float) -> Vector:
    return Vector.from_array(vec._data * scalar)


def divide(vec: Vector, scalar: float) -> Vector:
    """Component-wise division; dividing by zero gives inf/nan, never raises."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return Vector.from_array(vec._data / np.float64(scalar))


def dot(a: Vector, b: Vector) -> float:
    return float(np.dot(a._data, b._data))


def cross(a: Vector, b: Vector) -> Vector:
    """Right-handed cross product."""
    return Vector.from_array(np.cross(a._data, b._data))


def magnitude(vec: Vector) -> float:
    return float(np.linalg.norm(vec._data))


def normalize(vec: Vector) -> Vector:
    # zero vector -> nan components
    return divide(vec, magnitude(vec))


def accumulate(target: T, delta: Vector) -> T:
    """Add ``delta`` into ``target`` in place and return ``target``."""
    np.add(target._data, delta._data, out=target._data)
    return target
