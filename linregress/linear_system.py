"""Solvers for square linear systems ``A x = b``."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .matrix import Matrix
from .vector import Vector

_PIVOT_TOLERANCE = 1e-12
_CG_TOLERANCE = 1e-6
_CG_MAX_ITERATIONS = 1000


class SingularMatrixError(ArithmeticError):
    """Raised when a system has no unique solution that can be computed."""


def _dot(left: Sequence[float], right: Sequence[float]) -> float:
    return sum(a * b for a, b in zip(left, right))


class LinearSystem:
    """Square system solved by Gaussian elimination with partial pivoting."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.rows != a.cols:
            raise ValueError("Matrix A must be square")
        if a.rows != b.size:
            raise ValueError("Size mismatch between A and b")
        self._a = a.copy()
        self._b = b.copy()

    @property
    def size(self) -> int:
        return self._b.size

    def _matrix_rows(self) -> list[list[float]]:
        n = self.size
        return [[self._a[i, j] for j in range(1, n + 1)] for i in range(1, n + 1)]

    def solve(self) -> Vector:
        """Return the solution vector x."""
        n = self.size
        a = self._matrix_rows()
        b = list(self._b)

        for k in range(n):
            pivot = max(range(k, n), key=lambda i: abs(a[i][k]))
            if abs(a[pivot][k]) < _PIVOT_TOLERANCE:
                raise SingularMatrixError("Matrix is singular or nearly singular")
            if pivot != k:
                a[k], a[pivot] = a[pivot], a[k]
                b[k], b[pivot] = b[pivot], b[k]
            pivot_row = a[k]
            for i in range(k + 1, n):
                factor = a[i][k] / pivot_row[k]
                a[i][k:] = [aij - factor * akj for aij, akj in zip(a[i][k:], pivot_row[k:])]
                b[i] -= factor * b[k]

        x = [0.0] * n
        for i in reversed(range(n)):
            total = b[i] - _dot(a[i][i + 1:], x[i + 1:])
            x[i] = total / a[i][i]
        return Vector.from_values(x)


class PosSymLinSystem(LinearSystem):
    """Symmetric positive-definite system solved by conjugate gradients."""

    def solve(self) -> Vector:
        """Return the solution vector x, starting from a zero guess."""
        n = self.size
        a = self._matrix_rows()
        x = [0.0] * n
        r = list(self._b)
        p = list(r)
        rs_old = _dot(r, r)
        if rs_old == 0.0:
            return Vector.from_values(x)

        for _ in range(min(n, _CG_MAX_ITERATIONS)):
            ap = [_dot(row, p) for row in a]
            p_ap = _dot(p, ap)
            if p_ap == 0.0:
                raise SingularMatrixError("Matrix is not positive definite")
            alpha = rs_old / p_ap
            x = [xi + alpha * pi for xi, pi in zip(x, p)]
            r = [ri - alpha * api for ri, api in zip(r, ap)]

            rs_new = _dot(r, r)
            if math.sqrt(rs_new) < _CG_TOLERANCE:
                break

            beta = rs_new / rs_old
            p = [ri + beta * pi for ri, pi in zip(r, p)]
            rs_old = rs_new

        return Vector.from_values(x)