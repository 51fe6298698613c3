"""Engine value types — detections in, verdicts out.

All types here are immutable once built. ``VerificationContext`` (context.py)
is the only mutable state, and it lives for a single verification call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from interiorsight.engine.config import ScoreWeights
from interiorsight.utils import geometry


@dataclass(frozen=True)
class NormalizedRect:
    """Bounding box in image-fraction units, origin top-left."""

    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return geometry.area(self)

    @property
    def center(self) -> tuple[float, float]:
        return geometry.center(self)


@dataclass(frozen=True)
class Detection:
    """One object instance reported by the external detector."""

    label: str
    confidence: float
    bounding_box: NormalizedRect
    area_fraction: float

    @classmethod
    def from_box(
        cls,
        label: str,
        confidence: float,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> Detection:
        box = NormalizedRect(x=x, y=y, width=width, height=height)
        return cls(label=label, confidence=confidence, bounding_box=box, area_fraction=width * height)

    @property
    def normalized_label(self) -> str:
        return self.label.lower()

    @property
    def confidence_percentage(self) -> str:
        return f"{self.confidence * 100:.1f}%"

    @property
    def area_percentage(self) -> str:
        return f"{self.area_fraction * 100:.2f}%"


@dataclass(frozen=True)
class FilterOutcome:
    """Record of one executed stage."""

    name: str
    passed: bool
    message: str
    value: str
    latency_ms: float = 0.0

    @property
    def status(self) -> str:
        return "passed" if self.passed else "failed"


@dataclass(frozen=True)
class ScoreBreakdown:
    furniture_coverage_score: float
    spread_score: float
    composition_score: float
    color_score: float
    final_score: float
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    @property
    def furniture_coverage_weight(self) -> float:
        return self.weights.furniture_coverage

    @property
    def spread_weight(self) -> float:
        return self.weights.spread

    @property
    def composition_weight(self) -> float:
        return self.weights.composition

    @property
    def color_weight(self) -> float:
        return self.weights.color


@dataclass(frozen=True)
class VerificationResult:
    is_valid: bool = False
    score: float = 0.0
    # Every detection, excluded categories included, for display
    detections: tuple[Detection, ...] = ()
    filter_outcomes: tuple[FilterOutcome, ...] = ()
    score_breakdown: ScoreBreakdown | None = None
    total_latency_ms: float = 0.0

    @property
    def status(self) -> str:
        return "Valid Interior Image" if self.is_valid else "Invalid Image"

    @property
    def failed_stage(self) -> str | None:
        for outcome in self.filter_outcomes:
            if not outcome.passed:
                return outcome.name
        return None


@dataclass(frozen=True)
class RankedItem:
    """A verdict paired with its position in the batch input."""

    source_index: int
    result: VerificationResult


@dataclass(frozen=True)
class ImageInput:
    """An image source with detections computed ahead of time.

    ``image`` is anything ``utils.imaging.load_image`` accepts. When
    ``detections`` is None the verifier's detector is consulted instead.
    """

    image: Any
    detections: tuple[Detection, ...] | list[Detection] | None = None


@runtime_checkable
class Detector(Protocol):
    """External object detector. Returns None when it produced no result."""

    def detect(self, image: Any) -> list[Detection] | None: ...


class StaticDetector:
    """Detector that reports the same detections for every image."""

    def __init__(self, detections: list[Detection] | None) -> None:
        self._detections = None if detections is None else list(detections)

    def detect(self, image: Any) -> list[Detection] | None:
        if self._detections is None:
            return None
        return list(self._detections)
