"""Square float matrices."""
from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

EPSILON = 1e-5


class Matrix:
    """Fixed-size square matrix with bounds-checked element access.

    Equality compares element by element within ``EPSILON``.
    """

    __slots__ = ("_data",)

    def __init__(self, size: int, values: Optional[Iterable[Iterable[float]]] = None) -> None:
        if size < 1:
            raise ValueError("Matrix size must be positive")
        if values is None:
            self._data = np.zeros((size, size), dtype=np.float64)
        else:
            data = np.array([list(row) for row in values], dtype=np.float64)
            if data.shape != (size, size):
                raise ValueError(f"Expected {size}x{size} values, got shape {data.shape}")
            self._data = data

    @classmethod
    def identity(cls, size: int) -> Matrix:
        matrix = cls(size)
        matrix._data = np.identity(size, dtype=np.float64)
        return matrix

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} matrix")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self._data[self._check(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._data[self._check(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) <= EPSILON))

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return multiply(self, other)

    def transpose(self) -> Matrix:
        return Matrix(self.size, self._data.T)

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"Matrix({self.size}, {self.to_list()!r})"


def multiply(a: Matrix, b: Matrix) -> Matrix:
    if a.size != b.size:
        raise ValueError(f"Cannot multiply {a.size}x{a.size} by {b.size}x{b.size}")
    return Matrix(a.size, a._data @ b._data)
