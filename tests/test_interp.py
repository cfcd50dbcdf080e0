import pytest

from sigutil.interp import InterpolationError, linear, root_square_error, spline


def cubic(k):
    return (k - 10) * (k - 40) * (k - 80) * 1.0e-4


@pytest.fixture
def coarse():
    return [cubic(k) for k in range(0, 101, 10)]


@pytest.fixture
def dense():
    return [cubic(k) for k in range(101)]


@pytest.mark.parametrize("func", [linear, spline])
@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_is_rejected(func, count):
    with pytest.raises(InterpolationError):
        func([1.0, 2.0, 3.0, 4.0], count)


def test_linear_rejects_empty_input():
    with pytest.raises(InterpolationError):
        linear([], 5)


@pytest.mark.parametrize("samples", [[], [1.0], [1.0, 2.0]])
def test_spline_needs_three_samples(samples):
    with pytest.raises(InterpolationError):
        spline(samples, 5)


def test_interpolation_error_is_value_error():
    with pytest.raises(ValueError):
        linear([1.0], 0)


def test_linear_on_a_ramp():
    out = linear([0.0, 10.0], 11)
    assert list(out) == pytest.approx([float(k) for k in range(11)])


def test_linear_keeps_endpoints_and_length(coarse):
    out = linear(coarse, 101)
    assert len(out) == 101
    assert out[0] == coarse[0]
    assert out[100] == coarse[-1]


def test_linear_single_output_takes_last_sample():
    assert list(linear([1.0, 2.0, 3.0], 1)) == [3.0]


def test_linear_single_sample_is_constant():
    assert list(linear([7.0], 4)) == [7.0, 7.0, 7.0, 7.0]


def test_linear_same_length_is_identity(coarse):
    out = linear(coarse, len(coarse))
    assert list(out) == pytest.approx(coarse)


def test_spline_on_linear_data_matches_linear():
    samples = [2.0 * k + 1.0 for k in range(6)]
    assert list(spline(samples, 26)) == pytest.approx(list(linear(samples, 26)))


def test_spline_passes_through_knots(coarse):
    out = spline(coarse, 101)
    for j, value in enumerate(coarse):
        assert out[10 * j] == pytest.approx(value, abs=1e-9)


def test_spline_beats_linear_on_cubic_data(coarse, dense):
    lin = linear(coarse, 101)
    spl = spline(coarse, 101)
    assert root_square_error(spl, dense) < root_square_error(lin, dense)


def test_root_square_error_uses_shorter_length():
    assert root_square_error([3.0, 4.0, 100.0], [0.0, 0.0]) == pytest.approx(5.0)


def test_root_square_error_of_identical_data_is_zero(dense):
    assert root_square_error(dense, dense) == 0.0