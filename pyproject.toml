[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linregress"
version = "1.0.0"
description = "Small dense linear algebra with Gaussian elimination and conjugate-gradient solvers, plus a least-squares regression command"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "regression", "least squares", "conjugate gradient", "gaussian elimination"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linregress = "linregress.regression:main"

[tool.hatch.build.targets.wheel]
packages = ["linregress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
