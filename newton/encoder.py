"""Serialization of pixel buffers to image files."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

import numpy as np
import PIL.Image

from .palette import unpack_rgb


def _check_buffer(pixels: np.ndarray) -> np.ndarray:
    pixels = np.asarray(pixels)
    if pixels.ndim != 2:
        raise ValueError(f"expected a (height, width) pixel buffer, got shape {pixels.shape}")
    return pixels


def write_ppm(stream: BinaryIO, pixels: np.ndarray) -> None:
    """Write ``pixels`` to ``stream`` as a binary (P6) PPM image."""

    pixels = _check_buffer(pixels)
    height, width = pixels.shape
    stream.write(b"P6\n")
    stream.write(b"%d %d\n" % (width, height))
    stream.write(b"255\n")
    for row in unpack_rgb(pixels):
        stream.write(row.tobytes())


def encode_ppm(pixels: np.ndarray) -> bytes:
    buffer = io.BytesIO()
    write_ppm(buffer, pixels)
    return buffer.getvalue()


def save_ppm(path: Path, pixels: np.ndarray) -> None:
    with open(path, "wb") as stream:
        write_ppm(stream, pixels)


def to_image(pixels: np.ndarray) -> PIL.Image.Image:
    return PIL.Image.fromarray(unpack_rgb(_check_buffer(pixels)))


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def write_single_image(pixels: np.ndarray, output_path: Path, image_format: str) -> None:
    """Write ``pixels`` to ``output_path`` in ``image_format``."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if image_format.lower() == "ppm":
        save_ppm(output_path, pixels)
        return
    to_image(pixels).save(str(output_path), format=_pil_format_name(image_format))
