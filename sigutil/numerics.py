"""Small numerical routines: natural splines on arbitrary knots, sorting and Kaiser parameters."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence


def natural_spline_moments(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Second derivatives at the knots of the natural cubic spline through (x, y).

    ``x`` must be strictly increasing; the end moments are zero.
    """
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    if len(x) < 3:
        raise ValueError("at least three knots are needed")
    n = len(x) - 1
    size = n - 1

    matrix = [[0.0] * size for _ in range(size)]
    rhs = [0.0] * size
    for r in range(size):
        i = r + 1
        if r > 0:
            matrix[r][r - 1] = x[i] - x[i - 1]
        matrix[r][r] = 2.0 * (x[i + 1] - x[i - 1])
        if r + 1 < size:
            matrix[r][r + 1] = x[i + 1] - x[i]
        rhs[r] = 6.0 * (
            (y[i + 1] - y[i]) / (x[i + 1] - x[i]) - (y[i] - y[i - 1]) / (x[i] - x[i - 1])
        )

    # Plain Gauss-Jordan elimination without pivoting.
    for p in range(size):
        inv_pivot = 1.0 / matrix[p][p]
        matrix[p] = [v * inv_pivot for v in matrix[p]]
        rhs[p] *= inv_pivot
        for i in range(size):
            if i != p:
                factor = matrix[i][p]
                matrix[i] = [a - factor * b for a, b in zip(matrix[i], matrix[p])]
                rhs[i] -= factor * rhs[p]

    return [0.0, *rhs, 0.0]


def natural_spline_value(
    x: Sequence[float], y: Sequence[float], moments: Sequence[float], xx: float
) -> float:
    """Evaluate the cubic spline given by its knots and moments at ``xx``.

    Points outside the knots are extrapolated from the nearest interval.
    """
    n = len(x) - 1
    if n < 1 or len(y) != len(x) or len(moments) != len(x):
        raise ValueError("x, y and moments must have the same length of at least 2")
    lo = bisect_right(x, xx, 1, n) - 1
    hi = lo + 1
    width = x[hi] - x[lo]
    a = (moments[hi] - moments[lo]) / (6.0 * width)
    b = moments[lo] / 2.0
    c = (y[hi] - y[lo]) / width - width * (2.0 * moments[lo] + moments[hi]) / 6.0
    d = y[lo]
    h = xx - x[lo]
    return ((a * h + b) * h + c) * h + d


def bubble_sort(values: Iterable[float]) -> list[float]:
    """Return the values in ascending order, sorted by bubble sort."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for k in range(n - i - 1):
            if items[k] > items[k + 1]:
                items[k], items[k + 1] = items[k + 1], items[k]
    return items


def kaiser_alpha(attenuation: float) -> float:
    """Kaiser window parameter for a stop-band attenuation in decibels."""
    if attenuation <= 21:
        return 0.0
    if attenuation < 50:
        return 0.5842 * (attenuation - 21) ** 0.4 + 0.07886 * (attenuation - 21)
    return 0.1102 * (attenuation - 8.7)