"""Packed RGB colors and palettes."""

from __future__ import annotations

import numpy as np
from matplotlib import colormaps

DEFAULT_PALETTE = (
    0x4A0B58,
    0x39538E,
    0x1FA0CF,
    0x56B861,
    0x19858F,
)


def to_rgb(pixel: int) -> tuple[int, int, int]:
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF


def unpack_rgb(pixels: np.ndarray) -> np.ndarray:
    """Split packed ``0xRRGGBB`` values into a trailing uint8 channel axis."""

    packed = np.asarray(pixels, dtype=np.uint32)
    return np.stack(
        ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF),
        axis=-1,
    ).astype(np.uint8)


def parse_hex_color(text: str) -> int:
    value = text.strip()
    if value.startswith("#"):
        value = value[1:]
    elif value.lower().startswith("0x"):
        value = value[2:]
    if len(value) != 6:
        raise ValueError(f"color {text!r} must be in the form #RRGGBB.")
    try:
        return int(value, 16)
    except ValueError as exc:
        raise ValueError(f"color {text!r} must contain only hexadecimal digits.") from exc


def palette_from_colormap(name: str, count: int) -> tuple[int, ...]:
    """Sample ``count`` evenly spaced colors from a matplotlib colormap."""

    try:
        cmap = colormaps[name]
    except KeyError as exc:
        raise ValueError(f"unknown colormap {name!r}") from exc

    positions = np.linspace(0.0, 1.0, count) if count > 1 else np.array([0.0])
    rgba = np.uint8(np.clip(np.asarray(cmap(positions)) * 255, 0, 255))
    return tuple(int(r) << 16 | int(g) << 8 | int(b) for r, g, b, _ in rgba)
