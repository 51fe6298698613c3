"""S02 — Room Detection. A person or a piece of furniture is room evidence."""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage


@stage(
    id="S02",
    name="Room Detection",
    dependencies=["S01"],
    description="Require a person or furniture detection",
)
def room_detection(ctx: VerificationContext) -> StageVerdict:
    if not ctx.persons and not ctx.furniture:
        return StageVerdict(False, "Not a room image", "No person or furniture detected")

    return StageVerdict(
        True,
        "Room image detected",
        f"{len(ctx.persons)} person(s), {len(ctx.furniture)} furniture",
    )
