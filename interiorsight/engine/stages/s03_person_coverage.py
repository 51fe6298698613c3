"""S03 — Person Coverage.

Portraits and crowd shots are rejected: people may cover at most a fixed
fraction of the frame.
"""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage
from interiorsight.engine.signals import total_coverage


@stage(
    id="S03",
    name="Person Coverage",
    dependencies=["S02"],
    description="Cap the image area covered by people",
)
def person_coverage(ctx: VerificationContext) -> StageVerdict:
    ctx.person_coverage = total_coverage(ctx.persons)
    limit = ctx.config.max_person_coverage
    value = f"{ctx.person_coverage * 100:.1f}%"

    if ctx.person_coverage > limit:
        return StageVerdict(False, f"Too much person coverage (> {limit * 100:.0f}%)", value)
    return StageVerdict(True, f"Acceptable person coverage (≤ {limit * 100:.0f}%)", value)
