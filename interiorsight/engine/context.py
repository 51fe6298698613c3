"""VerificationContext — the single mutable state object flowing through all stages.

Detection partitions are filled by ``partition()`` before the first gate;
each stage stores the measurement it computed so later stages and the score
combiner can reuse it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from interiorsight.engine import categories
from interiorsight.engine.config import DEFAULT_CONFIG, VerificationConfig
from interiorsight.engine.types import Detection, Detector, FilterOutcome


@dataclass
class VerificationContext:
    """Shared state for one verification run."""

    # Decoded source image (PIL)
    image: Any = None
    # Detector output; None means the detector produced no result
    detections: list[Detection] | None = None
    config: VerificationConfig = DEFAULT_CONFIG
    # Consulted by the Object Detection stage when detections is None
    detector: Detector | None = None

    # --- Partitions (populated by partition()) ---
    relevant: list[Detection] = field(default_factory=list)
    excluded: list[Detection] = field(default_factory=list)
    persons: list[Detection] = field(default_factory=list)
    furniture: list[Detection] = field(default_factory=list)

    # --- Measurements (populated by stages) ---
    high_confidence: list[Detection] = field(default_factory=list)
    person_coverage: float = 0.0
    furniture_coverage: float = 0.0
    spread_score: float = 0.0
    aspect_ratio: float = 0.0
    color_score: float = 0.0
    composition_score: float = 0.0

    # --- Run metadata ---
    outcomes: list[FilterOutcome] = field(default_factory=list)

    def partition(self) -> None:
        """Split detections into relevant/excluded, then persons/furniture."""
        dets = self.detections or []
        self.relevant = [d for d in dets if not categories.is_excluded(d.normalized_label)]
        self.excluded = [d for d in dets if categories.is_excluded(d.normalized_label)]
        self.persons = [d for d in self.relevant if categories.is_person(d.normalized_label)]
        self.furniture = [d for d in self.relevant if categories.is_furniture(d.normalized_label)]

    @property
    def image_size(self) -> tuple[int, int]:
        if self.image is None:
            return (0, 0)
        return self.image.size
