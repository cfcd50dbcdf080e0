"""A dense two-dimensional matrix of floats built from row vectors."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from numbers import Real
from typing import Union

from sigutil.vector import Vector

Operand = Union[float, int, "Matrix"]

_PIVOT_THRESHOLD = 1.0e-10


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix has no inverse."""


class Matrix:
    """A matrix stored as a list of equally long :class:`Vector` rows.

    Indexing with an integer yields the live row vector, so ``m[r][c]``
    reads and writes single elements.  Arithmetic with a scalar applies to
    every element; arithmetic with another matrix is element-wise over the
    rows and columns the two have in common, and the result keeps the shape
    of the left operand.
    """

    __slots__ = ("_rows", "_columns")

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        if (rows == 0) != (columns == 0):
            raise ValueError("either both dimensions are zero or neither is")
        self._columns = columns
        self._rows: list[Vector] = [Vector.zeros(columns) for _ in range(rows)]

    @classmethod
    def _blank(cls, rows: int, columns: int) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._columns = columns
        matrix._rows = [Vector.zeros(columns) for _ in range(rows)]
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        vectors = [Vector(row) for row in rows]
        if not vectors:
            return cls()
        columns = len(vectors[0])
        if any(len(v) != columns for v in vectors):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(vectors), columns)
        matrix._rows = vectors
        return matrix

    @classmethod
    def from_row(cls, vector: Iterable[float]) -> Matrix:
        """Return a one-row matrix holding ``vector``."""
        values = list(vector)
        return cls.from_rows([values]) if values else cls()

    @classmethod
    def from_column(cls, vector: Iterable[float]) -> Matrix:
        """Return a one-column matrix holding ``vector``."""
        return cls.from_rows([value] for value in vector)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the ``size`` by ``size`` identity matrix."""
        matrix = cls(size, size)
        for i, row in enumerate(matrix._rows):
            row[i] = 1.0
        return matrix

    # -- shape --------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return self._columns

    def is_null(self) -> bool:
        return not self._rows

    # -- container protocol -------------------------------------------------

    def __getitem__(self, index: int) -> Vector:
        return self._rows[index]

    def __setitem__(self, index: int, row: Iterable[float]) -> None:
        values = list(row)
        if len(values) != self._columns:
            raise ValueError(
                f"row has {len(values)} elements, expected {self._columns}"
            )
        self._rows[index].copy_from(values)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._columns == other._columns
            and len(self._rows) == len(other._rows)
            and all(a == b for a, b in zip(self._rows, other._rows))
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({[list(row) for row in self._rows]!r})"

    def _copy(self) -> Matrix:
        matrix = self._blank(0, self._columns)
        matrix._rows = [Vector(row) for row in self._rows]
        return matrix

    def fill(self, value: float) -> Matrix:
        """Set every element to ``value``."""
        for row in self._rows:
            row.fill(value)
        return self

    # -- arithmetic ---------------------------------------------------------

    def _apply(self, other: Operand, op: Callable[[Vector, object], Vector]) -> None:
        if isinstance(other, Matrix):
            for mine, theirs in zip(self._rows, other._rows):
                op(mine, theirs)
        elif isinstance(other, Real):
            scalar = float(other)
            for row in self._rows:
                op(row, scalar)
        else:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def _binary(self, other: Operand, op: Callable[[Vector, object], Vector]) -> Matrix:
        if not isinstance(other, (Matrix, Real)):
            return NotImplemented
        result = self._copy()
        result._apply(other, op)
        return result

    def __add__(self, other: Operand) -> Matrix:
        return self._binary(other, operator.iadd)

    def __sub__(self, other: Operand) -> Matrix:
        return self._binary(other, operator.isub)

    def __mul__(self, other: Operand) -> Matrix:
        """Element-wise product; use :meth:`multiply` for the matrix product."""
        return self._binary(other, operator.imul)

    def __truediv__(self, other: Operand) -> Matrix:
        return self._binary(other, operator.itruediv)

    def __iadd__(self, other: Operand) -> Matrix:
        self._apply(other, operator.iadd)
        return self

    def __isub__(self, other: Operand) -> Matrix:
        self._apply(other, operator.isub)
        return self

    def __imul__(self, other: Operand) -> Matrix:
        self._apply(other, operator.imul)
        return self

    def __itruediv__(self, other: Operand) -> Matrix:
        self._apply(other, operator.itruediv)
        return self

    # -- linear algebra -----------------------------------------------------

    def transpose(self) -> Matrix:
        result = self._blank(self._columns, len(self._rows))
        for i, row in enumerate(self._rows):
            for j, value in enumerate(row):
                result._rows[j][i] = value
        return result

    def multiply(self, other: Matrix) -> Matrix:
        """Return the matrix product ``self · other``."""
        if self._columns != other.row_count:
            raise ValueError(
                f"cannot multiply {self.row_count}x{self._columns} "
                f"by {other.row_count}x{other.column_count}"
            )
        columns = list(zip(*other._rows)) if other._rows else []
        result = self._blank(len(self._rows), other.column_count)
        for row, out in zip(self._rows, result._rows):
            for c, column in enumerate(columns):
                out[c] = sum(a * b for a, b in zip(row, column))
        return result

    def _require_square(self) -> None:
        if len(self._rows) != self._columns:
            raise ValueError(
                f"matrix is not square: {len(self._rows)}x{self._columns}"
            )

    def determinant(self) -> float:
        """Determinant, by Sarrus' rule up to 3x3 and cofactor expansion beyond."""
        self._require_square()
        m = self._rows
        n = len(m)
        if n == 3:
            return (
                m[0][0] * m[1][1] * m[2][2]
                + m[0][1] * m[1][2] * m[2][0]
                + m[0][2] * m[1][0] * m[2][1]
                - m[0][2] * m[1][1] * m[2][0]
                - m[0][1] * m[1][0] * m[2][2]
                - m[0][0] * m[1][2] * m[2][1]
            )
        if n == 2:
            return m[0][0] * m[1][1] - m[0][1] * m[1][0]
        if n == 1:
            return m[0][0]
        return sum((self.cofactor(r, 0) * m[r][0] for r in range(n)), 0.0)

    def cofactor_matrix(self, row: int, column: int) -> Matrix:
        """Return the minor with ``row`` and ``column`` removed."""
        if not 0 <= row < len(self._rows) or not 0 <= column < self._columns:
            raise IndexError(f"position ({row}, {column}) is out of range")
        result = self._blank(len(self._rows) - 1, self._columns - 1)
        result._rows = [
            Vector(v for ci, v in enumerate(r) if ci != column)
            for ri, r in enumerate(self._rows)
            if ri != row
        ]
        return result

    def cofactor(self, row: int, column: int) -> float:
        sign = -1.0 if (row + column) % 2 else 1.0
        return sign * self.cofactor_matrix(row, column).determinant()

    def inverse(self) -> Matrix:
        """Return the inverse, computed by Gauss-Jordan elimination."""
        self._require_square()
        if self.determinant() == 0:
            raise SingularMatrixError("determinant is zero")
        n = len(self._rows)
        work = [
            Vector(list(row) + [1.0 if i == j else 0.0 for j in range(n)])
            for i, row in enumerate(self._rows)
        ]
        for it in range(n):
            pivot = next(
                (i for i in range(it, n) if abs(work[i][it]) > _PIVOT_THRESHOLD),
                None,
            )
            if pivot is None:
                raise SingularMatrixError(f"no usable pivot in column {it}")
            chosen = work[pivot]
            work[pivot] = work[it]
            work[it] = chosen / chosen[it]
            for i in range(n):
                if i != it:
                    work[i] -= work[it] * work[i][it]
        return Matrix.from_rows(row[n:] for row in work)

    # -- initialisation and size ---------------------------------------------

    def initialize(self, initializer: Callable[[int, int, int, int], float]) -> Matrix:
        """Set element (r, c) to ``initializer(r, rows, c, columns)``."""
        rows, columns = len(self._rows), self._columns
        for r, row in enumerate(self._rows):
            for c in range(columns):
                row[c] = initializer(r, rows, c, columns)
        return self

    def resize(self, rows: int, columns: int) -> bool:
        """Change the shape.

        Rows that remain are kept when the column count is unchanged; a new
        column count leaves every row filled with zeros.
        """
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        if rows != len(self._rows):
            kept = self._rows[:rows]
            kept.extend(Vector.zeros(columns) for _ in range(rows - len(kept)))
            self._rows = kept
        self._columns = columns
        for row in self._rows:
            row.resize(columns)
        return True

    def submatrix(
        self, row_begin: int, row_end: int, column_begin: int, column_end: int
    ) -> Matrix:
        """Return a copy of rows ``[row_begin, row_end)`` and columns
        ``[column_begin, column_end)``."""
        if not 0 <= row_begin <= row_end <= len(self._rows):
            raise IndexError(f"row range [{row_begin}, {row_end}) is out of range")
        if not 0 <= column_begin <= column_end <= self._columns:
            raise IndexError(
                f"column range [{column_begin}, {column_end}) is out of range"
            )
        result = self._blank(0, column_end - column_begin)
        result._rows = [
            row[column_begin:column_end] for row in self._rows[row_begin:row_end]
        ]
        return result