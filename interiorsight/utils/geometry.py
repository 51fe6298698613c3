"""Leaf-node geometry helpers for normalized bounding boxes. No engine imports.

Boxes are in image-fraction units with the origin at the top-left. Degenerate
boxes (zero or negative extent) have zero area and never overlap anything.
"""

from __future__ import annotations

import math
from typing import Protocol


class RectLike(Protocol):
    x: float
    y: float
    width: float
    height: float


def area(rect: RectLike) -> float:
    """width * height, floored at 0 for degenerate boxes."""
    if rect.width <= 0 or rect.height <= 0:
        return 0.0
    return float(rect.width * rect.height)


def center(rect: RectLike) -> tuple[float, float]:
    return (rect.x + rect.width / 2, rect.y + rect.height / 2)


def intersection_area(a: RectLike, b: RectLike) -> float:
    """Area of the intersection rectangle of two boxes, 0 if they do not overlap."""
    x1 = max(a.x, b.x)
    y1 = max(a.y, b.y)
    x2 = min(a.x + a.width, b.x + b.width)
    y2 = min(a.y + a.height, b.y + b.height)

    if x2 < x1 or y2 < y1:
        return 0.0
    return float((x2 - x1) * (y2 - y1))


def overlap_ratio(a: RectLike, b: RectLike) -> float | None:
    """Intersection over the smaller box's area. None when the smaller area is 0."""
    min_area = min(area(a), area(b))
    if min_area <= 0:
        return None
    return intersection_area(a, b) / min_area


def distance(p: tuple[float, float], q: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p[0] - q[0], p[1] - q[1])
