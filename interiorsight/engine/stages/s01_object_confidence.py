"""S01 — Object Confidence.

At least one relevant detection must clear the confidence bar.
"""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage
from interiorsight.engine.types import Detection


def _labels(detections: list[Detection]) -> str:
    return ", ".join(f"{d.label} ({d.confidence * 100:.0f}%)" for d in detections)


@stage(
    id="S01",
    name="Object Confidence",
    dependencies=["S00"],
    description="Require a high-confidence relevant detection",
)
def object_confidence(ctx: VerificationContext) -> StageVerdict:
    threshold = ctx.config.min_confidence
    ctx.high_confidence = [d for d in ctx.relevant if d.confidence > threshold]

    if not ctx.high_confidence:
        return StageVerdict(
            False,
            f"No objects detected with confidence > {threshold * 100:.0f}%",
            _labels(ctx.relevant) or "None",
        )

    return StageVerdict(True, "High confidence objects detected", _labels(ctx.high_confidence))
