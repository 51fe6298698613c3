"""S00 — Object Detection.

Runs the external detector when no detections were supplied, then splits the
result into relevant and excluded detections for every later stage. An empty
or missing detector result stops the chain here.
"""

from __future__ import annotations

import logging

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage

logger = logging.getLogger(__name__)


@stage(
    id="S00",
    name="Object Detection",
    description="Obtain detector output and drop incidental categories",
)
def object_detection(ctx: VerificationContext) -> StageVerdict:
    if ctx.detections is None and ctx.detector is not None:
        ctx.detections = ctx.detector.detect(ctx.image)

    if not ctx.detections:
        return StageVerdict(False, "Failed to detect objects", "Error")

    ctx.partition()

    logger.debug("Detected %d object(s):", len(ctx.detections))
    for d in ctx.detections:
        logger.debug("   - %s: %s confidence", d.label, d.confidence_percentage)
    if ctx.excluded:
        logger.debug("Excluded %d item(s) from verification calculations:", len(ctx.excluded))
        for d in ctx.excluded:
            logger.debug("   - %s: %s confidence", d.label, d.confidence_percentage)

    return StageVerdict(
        True,
        "Objects detected",
        f"{len(ctx.detections)} object(s), {len(ctx.excluded)} excluded",
    )
