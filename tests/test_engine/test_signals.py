"""Tests for the signal extractors."""

from __future__ import annotations

import math

import numpy as np
import pytest
from PIL import Image

from interiorsight.engine.signals import (
    color_variance_score,
    composition_score,
    normalize_coverage,
    spread_score,
    total_coverage,
)
from tests.conftest import ROOM_DETECTIONS, colorful_image, det, gray_image


class TestSpreadScore:
    def test_empty_is_one(self):
        assert spread_score([]) == 1.0

    def test_single_is_one(self):
        assert spread_score([det("chair", 0.9, 0.1, 0.1, 0.3, 0.3)]) == 1.0

    def test_identical_boxes_are_fully_clumped(self):
        a = det("chair", 0.9, 0.2, 0.2, 0.3, 0.3)
        b = det("couch", 0.9, 0.2, 0.2, 0.3, 0.3)
        assert spread_score([a, b]) == 0.0

    def test_disjoint_boxes_score_one(self):
        assert spread_score(ROOM_DETECTIONS) == 1.0

    def test_partial_overlap(self):
        # Overlap 0.02 over the smaller area 0.04 -> ratio 0.5
        a = det("chair", 0.9, 0.0, 0.0, 0.2, 0.2)
        b = det("couch", 0.9, 0.1, 0.0, 0.4, 0.4)
        assert spread_score([a, b]) == pytest.approx(0.5)

    def test_average_over_pairs(self):
        a = det("chair", 0.9, 0.0, 0.0, 0.2, 0.2)
        b = det("chair", 0.9, 0.0, 0.0, 0.2, 0.2)
        c = det("bed", 0.9, 0.6, 0.6, 0.2, 0.2)
        # Pairs: (a,b)=1, (a,c)=0, (b,c)=0
        assert spread_score([a, b, c]) == pytest.approx(1 - 1 / 3)

    def test_zero_area_pairs_are_skipped(self):
        a = det("chair", 0.9, 0.2, 0.2, 0.0, 0.3)
        b = det("couch", 0.9, 0.2, 0.2, 0.3, 0.3)
        assert spread_score([a, b]) == 1.0


class TestNormalizeCoverage:
    def test_peak_at_optimal(self):
        assert normalize_coverage(0.40) == 1.0

    def test_zero_at_bounds(self):
        assert normalize_coverage(0.0) == 0.0
        assert normalize_coverage(0.80) == pytest.approx(0.0)

    @pytest.mark.parametrize("offset", [0.05, 0.1, 0.2, 0.3])
    def test_symmetric(self, offset):
        assert normalize_coverage(0.40 - offset) == pytest.approx(normalize_coverage(0.40 + offset))

    def test_saturates_outside_range(self):
        assert normalize_coverage(0.95) == 0.0
        assert normalize_coverage(-0.1) == 0.0


class TestCompositionScore:
    def test_empty_is_zero(self):
        assert composition_score([]) == 0.0

    def test_centred_box_is_one(self):
        assert composition_score([det("bed", 0.9, 0.4, 0.4, 0.2, 0.2)]) == 1.0

    def test_boost_within_radius(self):
        # Centre (0.5, 0.75): distance 0.25 -> 0.8 + 0.10
        score = composition_score([det("bed", 0.9, 0.4, 0.7, 0.2, 0.1)])
        assert score == pytest.approx(0.9)

    def test_linear_outside_radius(self):
        # Centre (0, 0): distance sqrt(0.5)
        score = composition_score([det("bed", 0.9, -0.05, -0.05, 0.1, 0.1)])
        assert score == pytest.approx(1.0 - math.sqrt(0.5))

    def test_step_at_radius(self):
        # Distances 0.34 and 0.36 straddle the radius
        inside = composition_score([det("bed", 0.9, 0.45, 0.79, 0.1, 0.1)])
        outside = composition_score([det("bed", 0.9, 0.45, 0.81, 0.1, 0.1)])
        assert inside == pytest.approx(0.81)
        assert outside == pytest.approx(0.64)
        assert inside - outside > 0.1

    def test_averages_distances(self):
        left = det("chair", 0.9, 0.15, 0.45, 0.1, 0.1)   # centre (0.2, 0.5), d=0.3
        right = det("chair", 0.9, 0.75, 0.45, 0.1, 0.1)  # centre (0.8, 0.5), d=0.3
        assert composition_score([left, right]) == pytest.approx(0.85)


class TestColorVarianceScore:
    def test_gray_image_scores_zero(self):
        assert color_variance_score(gray_image()) == 0.0

    def test_colorful_image_saturates(self):
        assert color_variance_score(colorful_image()) == pytest.approx(1.0)

    def test_uniformly_saturated_image_scores_zero(self):
        assert color_variance_score(Image.new("RGB", (64, 64), (0, 0, 255))) == pytest.approx(0.0)

    def test_moderate_variance(self):
        # Two flat regions with saturation 0.5 and 0.4: std 0.05 -> 0.05 / 0.3
        arr = np.zeros((80, 80, 3), dtype=np.uint8)
        arr[:, :40] = (200, 100, 100)
        arr[:, 40:] = (200, 120, 120)
        score = color_variance_score(Image.fromarray(arr))
        # Resampling blends the boundary columns a little
        assert score == pytest.approx(0.05 / 0.3, abs=0.03)

    def test_unreadable_image_falls_back(self):
        assert color_variance_score(object()) == 0.5

    def test_tiny_image_still_scored(self):
        assert color_variance_score(Image.new("RGB", (3, 3), (90, 90, 90))) == 0.0


def test_total_coverage():
    assert total_coverage(ROOM_DETECTIONS) == pytest.approx(0.235)
    assert total_coverage([]) == 0.0
