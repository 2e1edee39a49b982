"""Rasterization of Newton fractal frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

import numpy as np

from .classifier import classify
from .config import FractalConfig
from .polynomial import Polynomial


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe the sampling grid of a single render."""

    x_res: int
    y_res: int
    pixels_per_unit: int
    max_steps: int

    @classmethod
    def from_config(cls, config: FractalConfig) -> RenderParameters:
        return cls(
            x_res=config.x_res,
            y_res=config.y_res,
            pixels_per_unit=config.pixels_per_unit,
            max_steps=config.max_steps,
        )


@dataclass(frozen=True)
class RenderResult:
    """Container for the output of a Newton fractal render."""

    pixels: np.ndarray
    root_indices: np.ndarray
    params: RenderParameters


def pixel_coordinates(width: int, height: int) -> Iterator[tuple[int, int]]:
    """Yield every ``(x, y)`` pixel of a ``width`` x ``height`` raster, row by row."""

    for y in range(height):
        for x in range(width):
            yield x, y


def pixel_to_complex(params: RenderParameters, x: int, y: int, dtype=np.complex128) -> np.complexfloating:
    # Floor-divided centre: odd sizes put the origin half a pixel off the midpoint.
    component = np.finfo(dtype).dtype.type
    scale = component(params.pixels_per_unit)
    re = component(x - params.x_res // 2) / scale
    im = component(y - params.y_res // 2) / scale
    return np.dtype(dtype).type(complex(re, im))


def render_frame(
    polynomial: Polynomial,
    derivative: Polynomial,
    roots: Sequence[complex],
    palette: Sequence[int],
    params: RenderParameters,
    *,
    dtype=None,
    on_row: Optional[Callable[[int, int], None]] = None,
) -> RenderResult:
    """Classify every pixel and paint it with the color of its root."""

    dtype = dtype if dtype is not None else polynomial.dtype
    roots = np.asarray(roots, dtype=dtype)
    colors = np.asarray(palette, dtype=np.uint32)

    width, height = params.x_res, params.y_res
    indices = np.zeros((height, width), dtype=np.int64)

    for x, y in pixel_coordinates(width, height):
        point = pixel_to_complex(params, x, y, dtype)
        indices[y, x] = classify(polynomial, derivative, roots, point, params.max_steps)
        if on_row is not None and x == width - 1:
            on_row(y, height)

    return RenderResult(
        pixels=colors[indices],
        root_indices=indices,
        params=params,
    )
