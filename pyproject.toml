[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigutil"
version = "0.1.0"
description = "Small numeric containers, interpolation, path and timing utilities for signal work"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "vector",
    "matrix",
    "interpolation",
    "spline",
    "signal processing",
    "argument parsing",
    "stopwatch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sigutil"]

[tool.hatch.build.targets.sdist]
include = ["sigutil", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
