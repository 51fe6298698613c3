"""Score combiner — fixed-weight linear blend of the four sub-scores."""

from __future__ import annotations

from interiorsight.engine.config import ScoreWeights
from interiorsight.engine.types import ScoreBreakdown

DEFAULT_WEIGHTS = ScoreWeights()


def combine_scores(
    furniture_coverage: float,
    spread: float,
    composition: float,
    color: float,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> float:
    return (
        weights.furniture_coverage * furniture_coverage
        + weights.spread * spread
        + weights.composition * composition
        + weights.color * color
    )


def build_breakdown(
    furniture_coverage: float,
    spread: float,
    composition: float,
    color: float,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> ScoreBreakdown:
    return ScoreBreakdown(
        furniture_coverage_score=furniture_coverage,
        spread_score=spread,
        composition_score=composition,
        color_score=color,
        final_score=combine_scores(furniture_coverage, spread, composition, color, weights),
        weights=weights,
    )
