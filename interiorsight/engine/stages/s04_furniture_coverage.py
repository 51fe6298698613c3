"""S04 — Furniture Coverage.

Too little furniture area means the objects are far away or tiny; too much
means the shot is a close-up rather than a room.
"""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage
from interiorsight.engine.signals import total_coverage


@stage(
    id="S04",
    name="Furniture Coverage",
    dependencies=["S03"],
    description="Keep furniture area within a plausible room range",
)
def furniture_coverage(ctx: VerificationContext) -> StageVerdict:
    ctx.furniture_coverage = total_coverage(ctx.furniture)
    low = ctx.config.min_furniture_coverage
    high = ctx.config.max_furniture_coverage
    value = f"{ctx.furniture_coverage * 100:.1f}%"

    if ctx.furniture_coverage < low:
        return StageVerdict(
            False, f"Too little furniture (< {low * 100:.0f}%) - objects too far/small", value
        )
    if ctx.furniture_coverage > high:
        return StageVerdict(
            False, f"Too much furniture (> {high * 100:.0f}%) - objects too close/zoomed", value
        )
    return StageVerdict(
        True, f"Good furniture coverage ({low * 100:.0f}-{high * 100:.0f}%)", value
    )
