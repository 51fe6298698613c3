"""S09 — Composition. Informational only: records centre proximity, never fails."""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage
from interiorsight.engine.signals import composition_score


@stage(
    id="S09",
    name="Composition",
    dependencies=["S08"],
    gating=False,
    description="Score how centred the furniture is",
)
def composition(ctx: VerificationContext) -> StageVerdict:
    ctx.composition_score = composition_score(ctx.furniture, ctx.config)
    return StageVerdict(
        True,
        "Furniture center proximity evaluated",
        f"Score: {ctx.composition_score:.2f}",
    )
