import math

import pytest

from sigutil.vector import Vector


def test_construct_and_index():
    v = Vector([1, 2.5, -3])
    assert len(v) == 3
    assert v[1] == 2.5
    assert list(v) == [1.0, 2.5, -3.0]


def test_zeros_and_is_null():
    z = Vector.zeros(4)
    assert list(z) == [0.0, 0.0, 0.0, 0.0]
    assert not z.is_null()
    assert Vector().is_null()
    with pytest.raises(ValueError):
        Vector.zeros(-1)


def test_setitem_and_out_of_range():
    v = Vector.zeros(2)
    v[0] = 7
    assert v[0] == 7.0
    with pytest.raises(IndexError):
        v[5] = 1.0


def test_equality_with_sequences():
    assert Vector([1, 2]) == Vector([1.0, 2.0])
    assert Vector([1, 2]) == [1, 2]
    assert not (Vector([1, 2]) == Vector([2, 1]))


def test_copy_from_keeps_length():
    v = Vector([9, 9, 9])
    v.copy_from(Vector([1, 2]))
    assert v == [1, 2, 9]
    w = Vector([0, 0])
    w.copy_from([5, 6, 7, 8])
    assert w == [5, 6]


def test_carve():
    v = Vector([10, 20, 30, 40])
    assert v.carve(1, 2) == [20, 30]
    assert v.carve(2, 100) == [30, 40]
    assert v.carve(4, 1).is_null()
    assert v.carve(10, 1).is_null()


def test_fifo_pushes_from_back():
    v = Vector([1, 2, 3])
    dropped = v.fifo(4)
    assert dropped == 1.0
    assert v == [2, 3, 4]
    assert len(v) == 3


def test_unshift_pushes_from_front():
    v = Vector([1, 2, 3])
    dropped = v.unshift(0)
    assert dropped == 3.0
    assert v == [0, 1, 2]


def test_fifo_on_empty_raises():
    with pytest.raises(IndexError):
        Vector().fifo(1.0)
    with pytest.raises(IndexError):
        Vector().unshift(1.0)


def test_fill():
    v = Vector([1, 2, 3]).fill(5)
    assert v == [5, 5, 5]


def test_scalar_round_trips():
    v = Vector([1, -2, 4])
    assert (v + 3) - 3 == v
    assert (v * 4) / 4 == v
    assert 3 + v == v + 3
    assert 2 * v == v * 2
    assert v == [1, -2, 4]


def test_vector_ops_use_shorter_length():
    a = Vector([1, 2, 3, 4])
    b = Vector([10, 20])
    s = a + b
    assert len(s) == len(a)
    assert s[2:] == a[2:]
    assert (s - b) == a
    p = a * b
    assert p[2:] == a[2:]
    assert p / b == a


def test_longer_right_operand_is_truncated():
    a = Vector([2, 4])
    b = Vector([2, 2, 2, 2])
    assert len(a / b) == 2
    assert (a / b) * b == a


def test_in_place_operations():
    v = Vector([1, 2, 3])
    original = Vector(v)
    v += 5
    v -= 5
    assert v == original
    v *= Vector([2, 2])
    assert v[2] == original[2]
    v /= Vector([2, 2])
    assert v == original


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector([1.0]) / 0


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Vector([1.0]) + "x"


def test_initialize_progression():
    v = Vector.zeros(5).initialize(2, 3)
    assert v[0] == 2.0
    assert all(b - a == 3.0 for a, b in zip(v, list(v)[1:]))
    w = Vector.zeros(4).initialize()
    assert w == [0, 1, 2, 3]


def test_initialize_with_receives_index_and_length():
    seen = []

    def init(k, n):
        seen.append((k, n))
        return n - k

    v = Vector.zeros(3).initialize_with(init)
    assert seen == [(0, 3), (1, 3), (2, 3)]
    assert v == [3, 2, 1]


def test_extrema():
    v = Vector([3, -7, 5, -1])
    assert v.maximum() == 5.0
    assert v.minimum() == -7.0
    assert v.maximum_absolute() == 7.0
    assert v.minimum_absolute() == 1.0


def test_extrema_of_empty_raise():
    with pytest.raises(ValueError):
        Vector().maximum()
    with pytest.raises(ValueError):
        Vector().minimum_absolute()
    with pytest.raises(ValueError):
        Vector().average()


def test_sum_average_norm_dot_invariants():
    values = [1.5, -2.0, 4.0, 0.5]
    v = Vector(values)
    assert v.sum() == pytest.approx(sum(values))
    assert v.average() * len(v) == pytest.approx(v.sum())
    assert v.norm() == pytest.approx(math.sqrt(v.dot(v)))
    assert Vector().sum() == 0.0


def test_dot_with_shorter_raises():
    with pytest.raises(ValueError):
        Vector([1, 2, 3]).dot(Vector([1, 2]))


def test_resize():
    v = Vector([1, 2, 3])
    assert v.resize(3)
    assert v == [1, 2, 3]
    assert v.resize(5)
    assert len(v) == 5
    assert v.resize(0)
    assert v.is_null()
    with pytest.raises(ValueError):
        v.resize(-2)


def test_slice_returns_vector():
    v = Vector([1, 2, 3, 4])
    part = v[1:3]
    assert isinstance(part, Vector)
    assert part == [2, 3]