"""Public API for Newton fractal rendering utilities."""

from .classifier import classify, distance, nearest_root
from .config import (
    DEFAULT_ROOTS,
    ConfigurationError,
    FractalConfig,
    parse_root,
    validate_config,
)
from .encoder import encode_ppm, save_ppm, to_image, write_ppm, write_single_image
from .palette import DEFAULT_PALETTE, palette_from_colormap, parse_hex_color, to_rgb
from .polynomial import Polynomial, format_complex, format_polynomial, multiply
from .renderer import (
    RenderParameters,
    RenderResult,
    pixel_coordinates,
    pixel_to_complex,
    render_frame,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_PALETTE",
    "DEFAULT_ROOTS",
    "FractalConfig",
    "Polynomial",
    "RenderParameters",
    "RenderResult",
    "classify",
    "distance",
    "encode_ppm",
    "format_complex",
    "format_polynomial",
    "multiply",
    "nearest_root",
    "palette_from_colormap",
    "parse_hex_color",
    "parse_root",
    "pixel_coordinates",
    "pixel_to_complex",
    "render_frame",
    "save_ppm",
    "to_image",
    "to_rgb",
    "validate_config",
    "write_ppm",
    "write_single_image",
]
