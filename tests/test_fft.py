import pytest

from contestlib.fft import fft, multiply


def _evaluate(coeffs, x):
    return sum(c * x**i for i, c in enumerate(coeffs))


def test_round_trip_restores_input():
    values = [1.5, -2.0, 3.25, 0.0, 7.0, -1.0, 2.5, 4.0]
    back = fft(fft(values), inverse=True)
    assert back == pytest.approx([complex(v) for v in values], abs=1e-9)


def test_impulse_transforms_to_ones():
    assert fft([1, 0, 0, 0]) == pytest.approx([1, 1, 1, 1], abs=1e-12)


def test_constant_transforms_to_spike():
    assert fft([1, 1, 1, 1]) == pytest.approx([4, 0, 0, 0], abs=1e-12)


def test_transform_is_linear():
    a = [1.0, 2.0, -3.0, 4.0]
    b = [0.5, -1.0, 2.0, 8.0]
    summed = fft([x + y for x, y in zip(a, b)])
    separate = [x + y for x, y in zip(fft(a), fft(b))]
    assert summed == pytest.approx(separate, abs=1e-9)


def test_multiply_small_product():
    assert multiply([1, 2], [3, 4]) == pytest.approx([3, 10, 8], abs=1e-9)


@pytest.mark.parametrize("x", [0.5, 2.0, -1.0, 3.0])
def test_multiply_matches_evaluation(x):
    p = [1.0, 2.0, 3.0, -4.0]
    q = [4.0, 5.0, 0.5]
    r = multiply(p, q)
    assert len(r) == len(p) + len(q) - 1
    assert _evaluate(r, x) == pytest.approx(_evaluate(p, x) * _evaluate(q, x), abs=1e-6)


def test_multiply_with_empty_is_empty():
    assert multiply([], [1.0, 2.0]) == []


@pytest.mark.parametrize("values", [[], [1, 2, 3], [1] * 6])
def test_length_must_be_power_of_two(values):
    with pytest.raises(ValueError):
        fft(values)