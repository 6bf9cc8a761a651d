"""Fixed-size vector of floats with bounds-checked indexing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _check_int(index: object) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Vector indices must be integers, not {type(index).__name__}")
    return index


class _OneBasedView:
    """Index a vector starting from 1 instead of 0."""

    __slots__ = ("_vector",)

    def __init__(self, vector: Vector) -> None:
        self._vector = vector

    def _position(self, index: object) -> int:
        index = _check_int(index)
        if not 1 <= index <= self._vector.size:
            raise IndexError("Vector 1-based index out of range")
        return index - 1

    def __len__(self) -> int:
        return self._vector.size

    def __getitem__(self, index: int) -> float:
        return self._vector[self._position(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._vector[self._position(index)] = value


class Vector:
    """Dense vector of floats, zero-initialised, with a fixed size."""

    __slots__ = ("_data",)

    def __init__(self, size: int) -> None:
        size = _check_int(size)
        if size < 0:
            raise ValueError("Vector size must be non-negative")
        self._data = [0.0] * size

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Vector:
        """Build a vector holding the given values."""
        vector = cls(0)
        vector._data = [float(value) for value in values]
        return vector

    @property
    def size(self) -> int:
        return len(self._data)

    def one_based(self) -> _OneBasedView:
        """Return a view of this vector indexed from 1."""
        return _OneBasedView(self)

    def _position(self, index: object) -> int:
        index = _check_int(index)
        if not 0 <= index < len(self._data):
            raise IndexError("Vector index out of range")
        return index

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[self._position(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._position(index)] = float(value)

    def __pos__(self) -> Vector:
        return self.copy()

    def __neg__(self) -> Vector:
        return Vector.from_values(-value for value in self._data)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        if other.size != self.size:
            raise ValueError("Vector size mismatch in addition")
        return Vector.from_values(a + b for a, b in zip(self._data, other._data))

    def __mul__(self, scalar: object) -> Vector:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector.from_values(value * scalar for value in self._data)

    def __rmul__(self, scalar: object) -> Vector:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector.from_values({self._data!r})"

    def copy(self) -> Vector:
        """Return an independent copy."""
        return Vector.from_values(self._data)