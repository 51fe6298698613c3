"""InteriorSight scene verification and ranking engine."""

from interiorsight.engine.registry import stage, StageVerdict, get_registry
from interiorsight.engine.context import VerificationContext
from interiorsight.engine.types import (
    Detection,
    Detector,
    FilterOutcome,
    ImageInput,
    NormalizedRect,
    RankedItem,
    ScoreBreakdown,
    StaticDetector,
    VerificationResult,
)
from interiorsight.engine.pipeline import InteriorVerifier, create_verifier
from interiorsight.engine.ranker import BatchRanker

__all__ = [
    "stage",
    "StageVerdict",
    "get_registry",
    "VerificationContext",
    "Detection",
    "Detector",
    "FilterOutcome",
    "ImageInput",
    "NormalizedRect",
    "RankedItem",
    "ScoreBreakdown",
    "StaticDetector",
    "VerificationResult",
    "InteriorVerifier",
    "create_verifier",
    "BatchRanker",
]
