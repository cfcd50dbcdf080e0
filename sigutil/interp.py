"""Resampling of uniformly spaced samples by linear or cubic spline interpolation."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from sigutil.matrix import Matrix
from sigutil.vector import Vector

_ZERO_THRESHOLD = 1.0e-10


class InterpolationError(ValueError):
    """Raised when a sequence cannot be interpolated as requested."""


def _prepare(samples: Iterable[float], sample_count: int, minimum: int) -> list[float]:
    if sample_count <= 0:
        raise InterpolationError(f"sample count must be positive: {sample_count}")
    values = [float(v) for v in samples]
    if len(values) < minimum:
        raise InterpolationError(
            f"at least {minimum} samples are needed, got {len(values)}"
        )
    return values


def _resample(
    values: list[float],
    sample_count: int,
    segment: Callable[[int, float], float],
) -> Vector:
    """Spread ``sample_count`` points evenly over ``values``.

    Both ends are copied from the input; every inner point is evaluated by
    ``segment(index, fraction)`` for the interval it falls into.
    """
    output = Vector.zeros(sample_count)
    last = len(values) - 1
    output[0] = values[0]
    output[sample_count - 1] = values[last]
    if sample_count > 2:
        step = last / (sample_count - 1)
        for k in range(1, sample_count - 1):
            position = k * step
            index = int(position)
            output[k] = segment(index, position - index)
    return output


def linear(samples: Iterable[float], sample_count: int) -> Vector:
    """Resample ``samples`` to ``sample_count`` points by linear interpolation."""
    values = _prepare(samples, sample_count, minimum=1)
    if len(values) == 1:
        return Vector([values[0]] * sample_count)

    def segment(index: int, fraction: float) -> float:
        return (values[index + 1] - values[index]) * fraction + values[index]

    return _resample(values, sample_count, segment)


def _spline_moments(values: list[float]) -> list[float]:
    """Second derivatives of the natural cubic spline through unit-spaced values."""
    n = len(values)
    size = n - 2
    system = Matrix(size, size + 1)
    for r, row in enumerate(system):
        if r > 0:
            row[r - 1] = 1.0
        row[r] = 4.0
        if r + 1 < size:
            row[r + 1] = 1.0
        row[size] = 6.0 * (values[r + 2] - 2.0 * values[r + 1] + values[r])

    rows = list(system)
    for row in rows:
        row /= row.maximum_absolute()

    # Gauss-Jordan elimination with partial pivoting.
    for r in range(size):
        candidates = [r, *range(r + 1, size - 1)]
        pivot = max(candidates, key=lambda k: abs(rows[k][r]))
        if abs(rows[pivot][r]) < _ZERO_THRESHOLD:
            raise InterpolationError(f"the spline system is singular at row {r}")
        rows[r], rows[pivot] = rows[pivot], rows[r]
        rows[r] /= rows[r][r]
        for m in range(size):
            if m != r:
                rows[m] -= rows[r] * rows[m][r]

    return [0.0, *(row[size] for row in rows), 0.0]


def spline(samples: Iterable[float], sample_count: int) -> Vector:
    """Resample ``samples`` to ``sample_count`` points by a natural cubic spline."""
    values = _prepare(samples, sample_count, minimum=3)
    u = _spline_moments(values)
    segments = len(values) - 1
    a = [(u[k + 1] - u[k]) / 6.0 for k in range(segments)]
    b = [u[k] / 2.0 for k in range(segments)]
    c = [
        (values[k + 1] - values[k]) - (2.0 * u[k] + u[k + 1]) / 6.0
        for k in range(segments)
    ]
    d = values[:segments]

    def segment(index: int, fraction: float) -> float:
        f2 = fraction * fraction
        return a[index] * f2 * fraction + b[index] * f2 + c[index] * fraction + d[index]

    return _resample(values, sample_count, segment)


def root_square_error(data: Iterable[float], reference: Iterable[float]) -> float:
    """Square root of the summed squared differences over the shorter length."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(data, reference)))