# linregress

A small, dependency-free linear algebra toolkit and a least-squares
regression command built on it.

## What is in it

- `linregress.vector.Vector`: a fixed-size, zero-initialised vector of
  floats. It has ordinary 0-based indexing with bounds checks, `len()`,
  iteration, unary `+` and `-`, addition of equally sized vectors,
  multiplication by a number on either side, `==`, `copy()`, the `size`
  property and `Vector.from_values(iterable)`. `v.one_based()` returns a
  view of the same data indexed from 1.
- `linregress.matrix.Matrix`: a dense, zero-initialised matrix addressed
  with 1-based indices, `m[row, col]`. It supports addition, matrix
  multiplication, multiplication by a number on either side, `==` and
  `copy()`, and has the `rows` and `cols` properties and
  `Matrix.from_rows(rows)`.
- `linregress.linear_system`:
  - `LinearSystem(a, b)` checks that `a` is square and matches `b`, and
    `solve()` returns `x` by Gaussian elimination with partial pivoting. A
    pivot smaller than 1e-12 raises `SingularMatrixError`.
  - `PosSymLinSystem(a, b)` solves symmetric positive-definite systems by
    conjugate gradients from a zero start, stopping when the residual norm
    drops below 1e-6 or after `min(n, 1000)` iterations. It raises
    `SingularMatrixError` when a search direction gives zero curvature.
- `linregress.regression`: helpers for the CPU performance ("machine")
  data set — `load_machine_data`, `normalize`, `build_design_matrix`,
  `fit`, `rmse`, `run` and `format_report`, with the `Dataset` and
  `RegressionResult` records — and the `main` entry point of the command.

Out-of-range indices raise `IndexError`, non-integer indices `TypeError`,
and mismatched shapes `ValueError`.

## Installation

```
pip install .
```

Install `.[test]` to also get the test dependencies, then run `pytest`.

## Library use

```python
from linregress.matrix import Matrix
from linregress.vector import Vector
from linregress.linear_system import LinearSystem, PosSymLinSystem

a = Matrix.from_rows([[3.0, 1.0], [1.0, 2.0]])
b = Vector.from_values([5.0, 5.0])

print(list(LinearSystem(a, b).solve()))      # about [1.0, 2.0]
print(list(PosSymLinSystem(a, b).solve()))   # about [1.0, 2.0]
```

A full regression run from Python:

```python
from linregress.regression import load_machine_data, run, format_report

result = run(load_machine_data("machine.data"), train_split=0.8, seed=42)
print(format_report(result))
```

`run` standardises each feature column to mean 0 and population standard
deviation 1, shuffles the sample order with `random.Random(seed)`, takes
the first `int(train_split * n)` samples for training, fits the
coefficients through the normal equations with `PosSymLinSystem`, and
reports the training and test RMSE (NaN for an empty set).

## Command line

```
linregress --data machine.data --train-split 0.8 --seed 42
```

- `--data`: path to the comma-separated data file (required). Each line
  holds vendor, model, six numeric features, the published performance
  (the target) and an estimated performance (ignored). Empty lines are
  skipped.
- `--train-split`: fraction of samples used for training, strictly
  between 0 and 1 (default 0.8).
- `--seed`: seed for the shuffle that splits the data (default 42).

The command prints the sample counts, the seven fitted coefficients (six
features followed by the intercept) and the training and test RMSE to six
decimal places. On bad arguments it prints a usage line and exits with
status 1; an unreadable or malformed data file prints an error to
standard error and also exits with status 1.

## What it does not do

- No data file ships with the package; supply your own copy of the
  machine data set.
- `Matrix` has no determinant, inverse or pseudo-inverse.