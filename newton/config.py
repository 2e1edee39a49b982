"""Run configuration for a Newton fractal render."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass

import numpy as np

from .palette import DEFAULT_PALETTE

DEFAULT_PIXELS_PER_UNIT = 100
DEFAULT_MAX_STEPS = 20

DEFAULT_ROOTS = (
    complex(-1.0, 0.0),
    cmath.rect(1.0, math.pi / 6.0),
    cmath.rect(1.0, math.pi / 6.0).conjugate(),
    complex(0.0, 1.0),
    complex(0.0, -1.0),
)

PRECISIONS = {
    "single": np.complex64,
    "double": np.complex128,
}


class ConfigurationError(ValueError):
    """Raised when a configuration cannot be rendered."""


@dataclass(frozen=True)
class FractalConfig:
    """Everything a render needs, fixed once at startup."""

    pixels_per_unit: int = DEFAULT_PIXELS_PER_UNIT
    x_res: int = 8 * DEFAULT_PIXELS_PER_UNIT
    y_res: int = 6 * DEFAULT_PIXELS_PER_UNIT
    max_steps: int = DEFAULT_MAX_STEPS
    roots: tuple[complex, ...] = DEFAULT_ROOTS
    palette: tuple[int, ...] = DEFAULT_PALETTE
    precision: str = "double"

    @property
    def complex_dtype(self):
        return PRECISIONS[self.precision]

    @property
    def half_extent(self) -> tuple[float, float]:
        """Largest visible ``|re|`` and ``|im|``."""

        return (
            self.x_res / (2 * self.pixels_per_unit),
            self.y_res / (2 * self.pixels_per_unit),
        )


def parse_root(text: str) -> complex:
    """Parse ``"-1"``, ``"0.5+0.866i"`` or ``"1j"`` into a complex number."""

    value = text.strip().replace(" ", "")
    if value.endswith("i"):
        value = value[:-1] + "j"
    try:
        return complex(value)
    except ValueError as exc:
        raise ValueError(f"invalid root {text!r}") from exc


def validate_config(config: FractalConfig) -> FractalConfig:
    if config.precision not in PRECISIONS:
        raise ConfigurationError(
            f"unknown precision {config.precision!r}; choose from {', '.join(sorted(PRECISIONS))}"
        )
    if config.pixels_per_unit <= 0:
        raise ConfigurationError("pixels per unit must be positive")
    if config.x_res <= 0 or config.y_res <= 0:
        raise ConfigurationError(f"image size {config.x_res}x{config.y_res} must be positive")
    if config.max_steps <= 0:
        raise ConfigurationError("max steps must be positive")
    if not config.roots:
        raise ConfigurationError("at least one root is required")
    if len(config.palette) < len(config.roots):
        raise ConfigurationError(
            f"{len(config.roots)} roots need at least as many colors, got {len(config.palette)}"
        )

    max_re, max_im = config.half_extent
    for root in config.roots:
        if not (abs(root.real) <= max_re and abs(root.imag) <= max_im):
            raise ConfigurationError(
                f"root {root} lies outside the visible window |re| <= {max_re:g}, |im| <= {max_im:g}"
            )
    return config
