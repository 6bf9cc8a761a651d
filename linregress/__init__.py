"""Vectors, matrices, linear-system solvers and least-squares regression."""

__version__ = "1.0.0"
__all__ = ["vector", "matrix", "linear_system", "regression"]