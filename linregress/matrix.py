"""Dense two-dimensional matrix with 1-based, bounds-checked indexing."""

from __future__ import annotations

from collections.abc import Iterable


def _check_dim(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


class Matrix:
    """Zero-initialised matrix of floats addressed as ``m[i, j]`` from 1."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int) -> None:
        self._rows = _check_dim(rows, "rows")
        self._cols = _check_dim(cols, "cols")
        self._data = [[0.0] * self._cols for _ in range(self._rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise ValueError("All rows must have the same length")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _position(self, index: object) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Matrix indices must be a pair (row, col)")
        i, j = index
        for value in (i, j):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("Matrix indices must be integers")
        if not (1 <= i <= self._rows and 1 <= j <= self._cols):
            raise IndexError("Matrix 1-based index out of range")
        return i - 1, j - 1

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = self._position(index)
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = self._position(index)
        self._data[i][j] = float(value)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if (other._rows, other._cols) != (self._rows, self._cols):
            raise ValueError("Matrix size mismatch")
        out = Matrix(self._rows, self._cols)
        out._data = [
            [a + b for a, b in zip(left, right)]
            for left, right in zip(self._data, other._data)
        ]
        return out

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise ValueError("Matrix inner dimensions must agree")
            columns = list(zip(*other._data)) if other._rows else [()] * other._cols
            out = Matrix(self._rows, other._cols)
            out._data = [
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._data
            ]
            return out
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        out = Matrix(self._rows, self._cols)
        out._data = [[value * other for value in row] for row in self._data]
        return out

    def __rmul__(self, scalar: object) -> Matrix:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._rows, self._cols, self._data) == (other._rows, other._cols, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def copy(self) -> Matrix:
        """Return an independent deep copy."""
        out = Matrix(self._rows, self._cols)
        out._data = [list(row) for row in self._data]
        return out