"""Newton iteration and root classification for a single sample point."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .polynomial import Polynomial


def distance(a: complex, b: complex) -> float:
    """Euclidean distance between two points of the complex plane."""

    d = b - a
    return np.sqrt(d.real * d.real + d.imag * d.imag)


def nearest_root(roots: Sequence[complex], point: complex) -> int:
    """Index of the root closest to ``point``; the earliest root wins ties."""

    index = 0
    best = distance(point, roots[0])
    for i in range(1, len(roots)):
        d = distance(point, roots[i])
        if d < best:
            best = d
            index = i
    return index


def classify(
    polynomial: Polynomial,
    derivative: Polynomial,
    roots: Sequence[complex],
    start: complex,
    max_steps: int,
) -> int:
    """Return the index of the root that Newton's method from ``start`` reaches.

    The iteration stops early when a step lands exactly on one of ``roots``
    (exact floating point equality, no tolerance). It also stops when the
    derivative vanishes or the iterate becomes NaN. Otherwise it runs
    ``max_steps`` times. Whatever the outcome, the final iterate is assigned
    to its nearest root, so the result is always a valid index.
    """

    scalar = polynomial.dtype.type
    current = scalar(start)
    with np.errstate(all="ignore"):
        for _ in range(max_steps):
            y_value = polynomial.evaluate(current)
            y_derivative = derivative.evaluate(current)
            if y_derivative == 0 or np.isnan(current):
                break
            candidate = current - y_value / y_derivative
            for i, root in enumerate(roots):
                if root == candidate:
                    return i
            current = candidate
        return nearest_root(roots, current)
