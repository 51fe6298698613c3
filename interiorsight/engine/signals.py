"""Signal extractors — continuous [0, 1] measurements the filter chain gates on.

spread_score          pairwise bounding-box overlap, inverted
normalize_coverage    triangular score peaking at the optimal coverage
composition_score     how close furniture sits to the frame centre
color_variance_score  spread of HSV saturation over a downsampled image
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import combinations

import numpy as np
from PIL import Image

from interiorsight.engine.config import DEFAULT_CONFIG, VerificationConfig
from interiorsight.engine.types import Detection
from interiorsight.utils.geometry import distance, overlap_ratio
from interiorsight.utils.imaging import downsample, rgb_array, saturation

logger = logging.getLogger(__name__)

IMAGE_CENTER = (0.5, 0.5)


def total_coverage(detections: Sequence[Detection]) -> float:
    """Summed area fraction of a group of detections."""
    return float(sum(d.area_fraction for d in detections))


def spread_score(detections: Sequence[Detection]) -> float:
    """1 - mean(overlap / smaller area) over every pair. 1.0 for fewer than two boxes.

    Pairs where the smaller box has no area are skipped.
    """
    if len(detections) <= 1:
        return 1.0

    total_overlap = 0.0
    comparisons = 0
    for a, b in combinations(detections, 2):
        ratio = overlap_ratio(a.bounding_box, b.bounding_box)
        if ratio is None:
            continue
        total_overlap += ratio
        comparisons += 1

    avg_overlap = total_overlap / comparisons if comparisons else 0.0
    return max(0.0, 1.0 - avg_overlap)


def normalize_coverage(coverage: float, config: VerificationConfig = DEFAULT_CONFIG) -> float:
    optimal = config.optimal_furniture_coverage
    return max(0.0, 1.0 - abs(coverage - optimal) / optimal)


def composition_score(
    furniture: Sequence[Detection],
    config: VerificationConfig = DEFAULT_CONFIG,
) -> float:
    """Centre-proximity score for furniture boxes.

    Averages the distance of each box centre to the frame centre. Averages
    within the radius get stepped up to at least the boost base; the jump at
    the radius is deliberate.
    """
    if not furniture:
        return 0.0

    dists = [distance(d.bounding_box.center, IMAGE_CENTER) for d in furniture]
    avg = sum(dists) / len(dists)

    radius = config.composition_center_radius
    if avg <= radius:
        return min(1.0, config.composition_boost_base + (radius - avg))
    return max(0.0, 1.0 - avg)


def color_variance_score(
    image: Image.Image,
    config: VerificationConfig = DEFAULT_CONFIG,
) -> float:
    """Normalized std-dev of HSV saturation over a downsampled copy.

    Falls back to a neutral score when the pixels cannot be read.
    """
    try:
        small = downsample(image, config.color_downsample_factor)
        pixels = rgb_array(small)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Color variance fallback: %s", e)
        return config.color_fallback_score

    sat = saturation(pixels).ravel()
    if sat.size == 0:
        return config.color_fallback_score

    mean = float(np.mean(sat))
    variance = max(0.0, float(np.mean(sat * sat)) - mean * mean)
    std = variance ** 0.5
    return min(1.0, std / config.color_std_normalizer)
