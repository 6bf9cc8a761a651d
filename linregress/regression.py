"""Least-squares regression on the CPU performance data set."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike

from .linear_system import PosSymLinSystem
from .matrix import Matrix
from .vector import Vector

_USAGE = "Usage: RegressionDemo --data <path> --train-split <0-1> --seed <int>"
_FEATURE_COUNT = 6


@dataclass(frozen=True)
class Dataset:
    """Feature rows and the target value belonging to each."""

    features: tuple[tuple[float, ...], ...]
    targets: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.features) != len(self.targets):
            raise ValueError("features and targets must have the same length")

    def __len__(self) -> int:
        return len(self.targets)


@dataclass(frozen=True)
class RegressionResult:
    """Fitted coefficients and error measures of one regression run."""

    n_samples: int
    n_train: int
    n_test: int
    coefficients: tuple[float, ...]
    train_rmse: float
    test_rmse: float


def load_machine_data(path: str | PathLike[str]) -> Dataset:
    """Read vendor, model, six features, PRP and ERP from a comma-separated file."""
    features: list[tuple[float, ...]] = []
    targets: list[float] = []
    with open(path, encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, 1):
            line = line.rstrip("\r\n")
            if not line:
                continue
            fields = line.split(",")
            if len(fields) < 3 + _FEATURE_COUNT:
                raise ValueError(
                    f"line {line_number}: expected at least {3 + _FEATURE_COUNT} fields, "
                    f"got {len(fields)}"
                )
            try:
                row = tuple(float(field) for field in fields[2:2 + _FEATURE_COUNT])
                prp = float(fields[2 + _FEATURE_COUNT])
            except ValueError as exc:
                raise ValueError(f"line {line_number}: {exc}") from None
            features.append(row)
            targets.append(prp)
    return Dataset(tuple(features), tuple(targets))


def normalize(features: Iterable[Sequence[float]]) -> list[tuple[float, ...]]:
    """Scale each column to mean 0 and population standard deviation 1.

    A constant column is only centred.
    """
    rows = [tuple(float(value) for value in row) for row in features]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("All feature rows must have the same length")
    count = len(rows)
    columns = list(zip(*rows))
    means = [sum(column) / count for column in columns]
    stddevs = [
        math.sqrt(sum((value - mean) ** 2 for value in column) / count) or 1.0
        for column, mean in zip(columns, means)
    ]
    return [
        tuple((value - mean) / std for value, mean, std in zip(row, means, stddevs))
        for row in rows
    ]


def build_design_matrix(
    features: Sequence[Sequence[float]],
    targets: Sequence[float],
    indices: Iterable[int],
) -> tuple[Matrix, Vector]:
    """Select rows by index and append an intercept column of ones."""
    indices = list(indices)
    width = (len(features[0]) if features else 0) + 1
    x = Matrix(len(indices), width)
    y = Vector(len(indices))
    for row_number, index in enumerate(indices, 1):
        for col_number, value in enumerate(features[index], 1):
            x[row_number, col_number] = value
        x[row_number, width] = 1.0
        y[row_number - 1] = targets[index]
    return x, y


def fit(x: Matrix, y: Vector) -> Vector:
    """Solve the normal equations XᵀX c = Xᵀy by conjugate gradients."""
    if x.rows != y.size:
        raise ValueError("X and y must have the same number of rows")
    width = x.cols
    columns = [[x[k, j] for k in range(1, x.rows + 1)] for j in range(1, width + 1)]
    gram = Matrix(width, width)
    rhs = Vector(width)
    for i, left in enumerate(columns, 1):
        for j, right in enumerate(columns, 1):
            gram[i, j] = sum(a * b for a, b in zip(left, right))
        rhs[i - 1] = sum(a * b for a, b in zip(left, y))
    return PosSymLinSystem(gram, rhs).solve()


def rmse(x: Matrix, y: Vector, coefficients: Iterable[float]) -> float:
    """Root-mean-square error of the predictions X c against y; NaN when empty."""
    coefficients = list(coefficients)
    if len(coefficients) != x.cols:
        raise ValueError("Coefficient count must equal the number of columns")
    if y.size != x.rows:
        raise ValueError("X and y must have the same number of rows")
    if x.rows == 0:
        return math.nan
    rss = 0.0
    for i in range(1, x.rows + 1):
        prediction = sum(x[i, j] * c for j, c in enumerate(coefficients, 1))
        rss += (prediction - y[i - 1]) ** 2
    return math.sqrt(rss / x.rows)


def run(dataset: Dataset, train_split: float = 0.8, seed: int = 42) -> RegressionResult:
    """Normalise, shuffle, split, fit and evaluate."""
    if not 0.0 < train_split < 1.0:
        raise ValueError("train_split must lie strictly between 0 and 1")
    count = len(dataset)
    if count == 0:
        raise ValueError("dataset is empty")
    features = normalize(dataset.features)
    n_train = int(train_split * count)

    order = list(range(count))
    random.Random(seed).shuffle(order)

    x_train, y_train = build_design_matrix(features, dataset.targets, order[:n_train])
    x_test, y_test = build_design_matrix(features, dataset.targets, order[n_train:])

    coefficients = fit(x_train, y_train)
    return RegressionResult(
        n_samples=count,
        n_train=n_train,
        n_test=count - n_train,
        coefficients=tuple(coefficients),
        train_rmse=rmse(x_train, y_train, coefficients),
        test_rmse=rmse(x_test, y_test, coefficients),
    )


def format_report(result: RegressionResult) -> str:
    """Render a result as the command's text report."""
    count = len(result.coefficients)
    lines = [
        "RegressionDemo v1.0",
        f"Loaded {result.n_samples} samples ({result.n_train} train / {result.n_test} test)",
        "",
        f"Coefficients (x1..x{count}):",
    ]
    lines += [f"  x{i} = {value:.6f}" for i, value in enumerate(result.coefficients, 1)]
    lines += [
        "",
        f"Train RMSE: {result.train_rmse:.6f}",
        f"Test  RMSE: {result.test_rmse:.6f}",
    ]
    return "\n".join(lines) + "\n"


def _parse_args(args: Sequence[str]) -> tuple[str, float, int] | None:
    data_file = ""
    train_split = 0.8
    seed = 42
    remaining = iter(args)
    for option in remaining:
        value = next(remaining, None)
        if value is None:
            return None
        try:
            if option == "--data":
                data_file = value
            elif option == "--train-split":
                train_split = float(value)
            elif option == "--seed":
                seed = int(value) % 2**32
            else:
                return None
        except ValueError:
            return None
    if not data_file or not 0.0 < train_split < 1.0:
        return None
    return data_file, train_split, seed


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    options = _parse_args(args)
    if options is None:
        print(_USAGE)
        return 1
    data_file, train_split, seed = options

    try:
        dataset = load_machine_data(data_file)
    except OSError:
        print(f"Error: cannot open data file: {data_file}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        result = run(dataset, train_split, seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_report(result))
    return 0