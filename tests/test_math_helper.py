import math
import warnings

import numpy as np
import pytest

from gamekit.math_helper import barycentric


def test_barycentric_midpoint():
    assert barycentric(0, 1, 0, 0.5, 0.5) == 0.5


def test_barycentric_returns_float32():
    assert isinstance(barycentric(1, 2, 3, 0.25, 0.25), np.float32)


@pytest.mark.parametrize("amount1, amount2, expected", [
    (0, 0, 10),
    (1, 0, 20),
    (0, 1, 40),
    (0.5, 0, 15),
    (0, 0.5, 25),
    (2, 0, 30),
    (-1, 0, 0),
])
def test_barycentric_blend(amount1, amount2, expected):
    assert barycentric(10, 20, 40, amount1, amount2) == expected


def test_barycentric_in_single_precision():
    a, b, c = np.float32(0.1), np.float32(0.7), np.float32(0.3)
    t, u = np.float32(0.3), np.float32(0.2)
    assert barycentric(0.1, 0.7, 0.3, 0.3, 0.2) == a + (b - a) * t + (c - a) * u


def test_barycentric_overflow_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isinf(barycentric(1e300, 0, 0, 0, 0))
