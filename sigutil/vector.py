"""A one-dimensional vector of floats with element-wise arithmetic."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from numbers import Real
from typing import Union, overload

Operand = Union[float, int, "Vector"]


class Vector:
    """A fixed-length sequence of floats.

    Arithmetic with a scalar applies to every element.  Arithmetic with
    another vector applies element-wise over the shorter of the two
    lengths; the result always keeps the length of the left operand and
    elements beyond the other vector's length are left unchanged.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._data: list[float] = [float(v) for v in values]

    @classmethod
    def zeros(cls, length: int) -> Vector:
        """Return a vector of ``length`` zeros."""
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        return cls([0.0] * length)

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> Vector: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._data == other._data
        if isinstance(other, (list, tuple)):
            return self._data == [float(v) for v in other]
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    # -- copying and slicing ----------------------------------------------

    def copy_from(self, other: Iterable[float]) -> Vector:
        """Copy as many leading elements of ``other`` as fit, without resizing."""
        for i, value in zip(range(len(self._data)), other):
            self._data[i] = float(value)
        return self

    def carve(self, offset: int, length: int) -> Vector:
        """Return up to ``length`` elements starting at ``offset``.

        An offset at or past the end yields an empty vector.
        """
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        if offset >= len(self._data):
            return Vector()
        return Vector(self._data[offset:offset + length])

    def fifo(self, value: float) -> float:
        """Shift every element one place towards the front, append ``value``
        at the back and return the element that fell off the front."""
        if not self._data:
            raise IndexError("fifo on an empty vector")
        dropped = self._data.pop(0)
        self._data.append(float(value))
        return dropped

    def unshift(self, value: float) -> float:
        """Shift every element one place towards the back, insert ``value``
        at the front and return the element that fell off the back."""
        if not self._data:
            raise IndexError("unshift on an empty vector")
        dropped = self._data.pop()
        self._data.insert(0, float(value))
        return dropped

    def fill(self, value: float) -> Vector:
        """Set every element to ``value``."""
        self._data = [float(value)] * len(self._data)
        return self

    # -- arithmetic ---------------------------------------------------------

    def _apply(self, other: Operand, op: Callable[[float, float], float]) -> None:
        if isinstance(other, Vector):
            for i, value in zip(range(len(self._data)), other._data):
                self._data[i] = op(self._data[i], value)
        elif isinstance(other, Real):
            scalar = float(other)
            self._data = [op(x, scalar) for x in self._data]
        else:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def _binary(self, other: Operand, op: Callable[[float, float], float]) -> Vector:
        if not isinstance(other, (Vector, Real)):
            return NotImplemented
        result = Vector(self._data)
        result._apply(other, op)
        return result

    def __add__(self, other: Operand) -> Vector:
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other: Operand) -> Vector:
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other: Operand) -> Vector:
        return self._binary(other, lambda a, b: a * b)

    def __truediv__(self, other: Operand) -> Vector:
        return self._binary(other, lambda a, b: a / b)

    def __radd__(self, other: Operand) -> Vector:
        return self.__add__(other)

    def __rmul__(self, other: Operand) -> Vector:
        return self.__mul__(other)

    def __iadd__(self, other: Operand) -> Vector:
        self._apply(other, lambda a, b: a + b)
        return self

    def __isub__(self, other: Operand) -> Vector:
        self._apply(other, lambda a, b: a - b)
        return self

    def __imul__(self, other: Operand) -> Vector:
        self._apply(other, lambda a, b: a * b)
        return self

    def __itruediv__(self, other: Operand) -> Vector:
        self._apply(other, lambda a, b: a / b)
        return self

    # -- initialisation -----------------------------------------------------

    def initialize(self, offset: float = 0, step: float = 1) -> Vector:
        """Fill with the arithmetic progression ``offset + step * k``."""
        self._data = [float(offset + step * k) for k in range(len(self._data))]
        return self

    def initialize_with(self, initializer: Callable[[int, int], float]) -> Vector:
        """Fill element ``k`` with ``initializer(k, len(self))``."""
        n = len(self._data)
        self._data = [float(initializer(k, n)) for k in range(n)]
        return self

    # -- reductions ---------------------------------------------------------

    def _require_data(self, what: str) -> None:
        if not self._data:
            raise ValueError(f"{what} of an empty vector")

    def maximum(self) -> float:
        self._require_data("maximum")
        return max(self._data)

    def maximum_absolute(self) -> float:
        self._require_data("maximum")
        return max(abs(x) for x in self._data)

    def minimum(self) -> float:
        self._require_data("minimum")
        return min(self._data)

    def minimum_absolute(self) -> float:
        self._require_data("minimum")
        return min(abs(x) for x in self._data)

    def sum(self) -> float:
        return math.fsum(self._data) if self._data else 0.0

    def average(self) -> float:
        self._require_data("average")
        return self.sum() / len(self._data)

    def norm(self) -> float:
        return math.sqrt(sum(x * x for x in self._data))

    def dot(self, other: Vector | Iterable[float]) -> float:
        """Dot product over this vector's length; ``other`` must be at least as long."""
        values = list(other)
        if len(values) < len(self._data):
            raise ValueError("the other vector is shorter than this one")
        return sum(a * b for a, b in zip(self._data, values))

    # -- size ---------------------------------------------------------------

    def resize(self, length: int) -> bool:
        """Change the length.

        Resizing to the current length keeps the contents; any other length
        discards them and leaves zeros.
        """
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        if length != len(self._data):
            self._data = [0.0] * length
        return True

    def is_null(self) -> bool:
        return not self._data