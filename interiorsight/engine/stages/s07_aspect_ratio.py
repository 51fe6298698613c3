"""S07 — Aspect Ratio. Panoramas and tall strips are not usable room shots."""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage


@stage(
    id="S07",
    name="Aspect Ratio",
    dependencies=["S06"],
    description="Keep width/height within range",
)
def aspect_ratio(ctx: VerificationContext) -> StageVerdict:
    width, height = ctx.image_size
    ctx.aspect_ratio = width / height if height > 0 else 0.0
    low = ctx.config.min_aspect_ratio
    high = ctx.config.max_aspect_ratio

    if ctx.aspect_ratio < low or ctx.aspect_ratio > high:
        orientation = "too tall" if ctx.aspect_ratio < low else "too wide"
        return StageVerdict(
            False,
            f"Image aspect ratio is {orientation}",
            f"{ctx.aspect_ratio:.2f} (valid: {low}-{high})",
        )
    return StageVerdict(True, "Good aspect ratio", f"{ctx.aspect_ratio:.2f}")
