"""S05 — Object Spread. Heavily overlapping furniture boxes mean a clumped shot."""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage
from interiorsight.engine.signals import spread_score


@stage(
    id="S05",
    name="Object Spread",
    dependencies=["S04"],
    description="Reject clumped furniture",
)
def object_spread(ctx: VerificationContext) -> StageVerdict:
    ctx.spread_score = spread_score(ctx.furniture)
    threshold = ctx.config.min_spread_score

    if ctx.spread_score < threshold:
        return StageVerdict(
            False,
            "Furniture is too clumped together",
            f"Score: {ctx.spread_score:.2f} (< {threshold})",
        )
    return StageVerdict(True, "Good furniture distribution", f"Score: {ctx.spread_score:.2f}")
