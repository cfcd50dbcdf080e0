"""Vectors, matrices, interpolation, spline helpers, argument parsing, path splitting and timing."""

__version__ = "0.1.0"

__all__ = ["argparser", "interp", "matrix", "nodepath", "numerics", "timing", "vector"]