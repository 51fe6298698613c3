"""S06 — Clutter Filter."""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage


@stage(
    id="S06",
    name="Clutter Filter",
    dependencies=["S05"],
    description="Cap the number of furniture detections",
)
def clutter(ctx: VerificationContext) -> StageVerdict:
    count = len(ctx.furniture)
    limit = ctx.config.max_furniture_count

    if count > limit:
        return StageVerdict(
            False, f"Too many furniture objects detected (> {limit})", f"{count} objects"
        )
    return StageVerdict(True, "Acceptable number of furniture objects", f"{count} objects")
