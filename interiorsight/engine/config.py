"""Verification configuration — fixed gate thresholds and scoring weights."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoreWeights:
    """Fixed weights of the composite score. They sum to 1.0."""

    furniture_coverage: float = 0.40
    spread: float = 0.25
    composition: float = 0.25
    color: float = 0.10

    @property
    def total(self) -> float:
        return self.furniture_coverage + self.spread + self.composition + self.color


@dataclass(frozen=True)
class VerificationConfig:
    """Thresholds for every gate in the filter chain."""

    # Object Confidence: strictly greater than
    min_confidence: float = 0.60

    # Person Coverage: summed area fraction, inclusive upper bound
    max_person_coverage: float = 0.20

    # Furniture Coverage: inclusive range
    min_furniture_coverage: float = 0.03
    max_furniture_coverage: float = 0.85

    # Object Spread
    min_spread_score: float = 0.03

    # Clutter
    max_furniture_count: int = 25

    # Aspect Ratio (width / height), inclusive range
    min_aspect_ratio: float = 0.5
    max_aspect_ratio: float = 2.0

    # Color Variance
    min_color_score: float = 0.015
    color_downsample_factor: int = 8
    color_std_normalizer: float = 0.3  # saturation std of a varied photo
    color_fallback_score: float = 0.5

    # Coverage normalization peaks here
    optimal_furniture_coverage: float = 0.40

    # Composition: avg centre distance at or below the radius gets boosted
    composition_center_radius: float = 0.35
    composition_boost_base: float = 0.8

    weights: ScoreWeights = field(default_factory=ScoreWeights)


DEFAULT_CONFIG = VerificationConfig()
