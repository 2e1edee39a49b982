"""Complex polynomials built from their roots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

DEFAULT_DTYPE = np.complex128


@dataclass(frozen=True, eq=False)
class Polynomial:
    """Polynomial with complex coefficients in ascending power order.

    ``coefficients[k]`` multiplies ``x ** k``. Instances are never mutated;
    arithmetic returns new polynomials.
    """

    coefficients: np.ndarray

    def __post_init__(self) -> None:
        coefficients = np.array(self.coefficients, copy=True)
        if coefficients.ndim != 1 or coefficients.size == 0:
            raise ValueError("a polynomial needs at least one coefficient")
        if not np.iscomplexobj(coefficients):
            coefficients = coefficients.astype(DEFAULT_DTYPE)
        coefficients.setflags(write=False)
        object.__setattr__(self, "coefficients", coefficients)

    @classmethod
    def constant(cls, value: complex = 1.0, dtype=DEFAULT_DTYPE) -> Polynomial:
        return cls(np.array([value], dtype=dtype))

    @classmethod
    def from_root(cls, root: complex, dtype=DEFAULT_DTYPE) -> Polynomial:
        """The monic linear factor ``x - root``."""

        return cls(np.array([-root, 1.0], dtype=dtype))

    @classmethod
    def from_roots(cls, roots: Iterable[complex], dtype=DEFAULT_DTYPE) -> Polynomial:
        """Multiply ``(x - r)`` for every root, in order, starting from ``1``."""

        polynomial = cls.constant(1.0, dtype=dtype)
        for root in roots:
            polynomial = multiply(polynomial, cls.from_root(root, dtype=dtype))
        return polynomial

    @property
    def dtype(self) -> np.dtype:
        return self.coefficients.dtype

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return multiply(self, other)

    def __call__(self, point: complex) -> np.complexfloating:
        return self.evaluate(point)

    def __str__(self) -> str:
        return format_polynomial(self)

    def derivative(self) -> Polynomial:
        if self.degree == 0:
            raise ValueError("the derivative of a constant polynomial has no coefficients")
        coefficients = self.coefficients
        scale = self.dtype.type
        derived = np.array(
            [scale(i + 1) * coefficients[i + 1] for i in range(self.degree)],
            dtype=self.dtype,
        )
        return Polynomial(derived)

    def evaluate(self, point: complex) -> np.complexfloating:
        """Sum ``c[i] * point ** i`` term by term (no Horner scheme)."""

        scalar = self.dtype.type
        point = scalar(point)
        total = scalar(0)
        for i, coefficient in enumerate(self.coefficients):
            total += coefficient * powu(point, i)
        return total


def multiply(a: Polynomial, b: Polynomial) -> Polynomial:
    """Return the product of ``a`` and ``b`` as a new polynomial."""

    dtype = np.result_type(a.dtype, b.dtype)
    result = np.zeros(len(a) + len(b) - 1, dtype=dtype)
    for i, left in enumerate(a.coefficients):
        for j, right in enumerate(b.coefficients):
            result[i + j] += left * right
    return Polynomial(result)


def powu(base: np.complexfloating, exponent: int) -> np.complexfloating:
    """Raise ``base`` to a non-negative integer power by repeated squaring."""

    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return type(base)(1)
    while exponent & 1 == 0:
        base = base * base
        exponent >>= 1
    result = base
    while exponent > 1:
        exponent >>= 1
        base = base * base
        if exponent & 1:
            result = result * base
    return result


def _format_real(value) -> str:
    # Shortest round-trip digits for the value's own precision, never exponent form.
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, unique=True, trim="-")


def format_complex(value: complex) -> str:
    """Render ``value`` as ``re+imi`` / ``re-imi``."""

    real = _format_real(value.real)
    imag = value.imag
    if imag < 0:
        return f"{real}-{_format_real(-imag)}i"
    return f"{real}+{_format_real(imag)}i"


def format_polynomial(polynomial: Polynomial) -> str:
    """``"<degree>: (<coefficient>) "`` tokens, highest degree first."""

    return "".join(
        f"{i}: ({format_complex(polynomial.coefficients[i])}) "
        for i in range(polynomial.degree, -1, -1)
    )
