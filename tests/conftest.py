"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from interiorsight.engine.types import Detection


def det(label: str, confidence: float, x: float, y: float, w: float, h: float) -> Detection:
    return Detection.from_box(label, confidence, x, y, w, h)


def colorful_image(width: int = 640, height: int = 480) -> Image.Image:
    """Left half saturated red, right half neutral gray: saturation std ~0.5."""
    arr = np.full((height, width, 3), 128, dtype=np.uint8)
    arr[:, : width // 2] = (220, 30, 30)
    return Image.fromarray(arr)


def gray_image(width: int = 640, height: int = 480) -> Image.Image:
    """Uniform gray: zero saturation everywhere."""
    return Image.new("RGB", (width, height), (120, 120, 120))


def png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


# A plausible living room: two separated, centred pieces of furniture.
# coverage = 0.16 + 0.075 = 0.235, no overlap.
ROOM_DETECTIONS = [
    det("couch", 0.91, 0.10, 0.40, 0.40, 0.40),
    det("chair", 0.78, 0.60, 0.45, 0.25, 0.30),
]

# Tableware on the couch; must not change any arithmetic.
TABLEWARE_DETECTIONS = [
    det("Bowl", 0.95, 0.15, 0.45, 0.10, 0.10),
    det("cup", 0.88, 0.62, 0.50, 0.05, 0.05),
]


@pytest.fixture
def room_image() -> Image.Image:
    return colorful_image()


@pytest.fixture
def dull_image() -> Image.Image:
    return gray_image()


@pytest.fixture
def room_detections() -> list[Detection]:
    return list(ROOM_DETECTIONS)
