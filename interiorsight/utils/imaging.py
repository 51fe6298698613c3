"""Pixel helpers — image decoding, downsampling, HSV saturation. No engine imports."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

ImageSource = Union[Image.Image, str, Path, bytes]


def load_image(source: ImageSource) -> Image.Image:
    """Decode an image source into a PIL image.

    Accepts an already-decoded image (returned as is), a filesystem path, or
    encoded bytes. Raises whatever PIL raises for unreadable data.
    """
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, (bytes, bytearray)):
        img = Image.open(io.BytesIO(source))
    else:
        img = Image.open(Path(source))
    img.load()
    return img


def downsample(image: Image.Image, factor: int) -> Image.Image:
    """Shrink both axes by ``factor`` (at least 1 px each), RGB output."""
    w, h = image.size
    size = (max(1, w // factor), max(1, h // factor))
    return image.convert("RGB").resize(size, Image.Resampling.BILINEAR)


def rgb_array(image: Image.Image) -> NDArray[np.float64]:
    """HxWx3 float array with channels scaled to [0, 1]."""
    return np.asarray(image.convert("RGB"), dtype=np.float64) / 255.0


def saturation(pixels: NDArray[np.float64]) -> NDArray[np.float64]:
    """HSV saturation per pixel: (max - min) / max, 0 where max is 0."""
    max_c = pixels.max(axis=-1)
    min_c = pixels.min(axis=-1)
    out = np.zeros_like(max_c)
    np.divide(max_c - min_c, max_c, out=out, where=max_c > 0)
    return out
