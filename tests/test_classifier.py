import numpy as np
import pytest

from newton.classifier import classify, distance, nearest_root
from newton.config import DEFAULT_ROOTS
from newton.polynomial import Polynomial

UNIT_ROOTS = np.array([1, -1, 1j, -1j], dtype=np.complex128)


def _setup(roots, dtype=np.complex128):
    roots = np.asarray(roots, dtype=dtype)
    poly = Polynomial.from_roots(roots, dtype=dtype)
    return poly, poly.derivative(), roots


@pytest.mark.parametrize("index", range(len(UNIT_ROOTS)))
def test_start_on_a_root_returns_it_in_one_step(index):
    poly, derivative, roots = _setup(UNIT_ROOTS)
    assert classify(poly, derivative, roots, roots[index], max_steps=1) == index


@pytest.mark.parametrize("start, expected", [
    (1.1 + 0.05j, 0),
    (-0.9 - 0.1j, 1),
    (0.1 + 1.2j, 2),
    (-0.05 - 0.8j, 3),
])
def test_points_near_a_root_converge_to_it(start, expected):
    poly, derivative, roots = _setup(UNIT_ROOTS)
    assert classify(poly, derivative, roots, start, max_steps=20) == expected


def test_stall_on_zero_derivative_breaks_ties_towards_first_root():
    poly, derivative, roots = _setup([1, -1])
    assert derivative(0) == 0
    assert classify(poly, derivative, roots, 0j, max_steps=20) == 0


def test_equidistant_iterate_breaks_ties_towards_first_root():
    # Newton's method for x**2 - 1 never leaves the imaginary axis.
    poly, derivative, roots = _setup([1, -1])
    assert classify(poly, derivative, roots, 5j, max_steps=20) == 0
    assert classify(poly, derivative, roots, -3j, max_steps=20) == 0


def test_classify_is_total():
    poly, derivative, roots = _setup(DEFAULT_ROOTS)
    starts = [complex(x, y) for x in np.linspace(-4, 4, 17) for y in np.linspace(-3, 3, 13)]
    starts += [1e200 + 1e200j, -1e300j, 1e-300]
    for start in starts:
        index = classify(poly, derivative, roots, start, max_steps=20)
        assert 0 <= index < len(roots)


def test_nan_start_falls_back_to_first_root():
    poly, derivative, roots = _setup(DEFAULT_ROOTS)
    assert classify(poly, derivative, roots, complex(np.nan, 0.0), max_steps=20) == 0


def test_zero_steps_uses_nearest_root():
    poly, derivative, roots = _setup(UNIT_ROOTS)
    assert classify(poly, derivative, roots, -0.4 + 0.1j, max_steps=0) == 1


def test_single_precision_classification():
    poly, derivative, roots = _setup(UNIT_ROOTS, dtype=np.complex64)
    assert classify(poly, derivative, roots, 0.1 + 1.2j, max_steps=20) == 2


def test_distance_is_euclidean():
    assert distance(3 + 4j, 0j) == 5.0
    assert distance(1 + 1j, 1 + 1j) == 0.0


def test_nearest_root():
    roots = np.array([0, 2, 2], dtype=np.complex128)
    assert nearest_root(roots, 1 + 0j) == 0
    assert nearest_root(roots, 1.5 + 0j) == 1
    assert nearest_root(roots, 10 + 10j) == 1
