"""S08 — Color Variance.

Flat, gray or badly lit frames have almost uniform saturation. The score is
the normalized saturation std-dev of a downsampled copy of the image.
"""

from __future__ import annotations

from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageVerdict, stage
from interiorsight.engine.signals import color_variance_score


@stage(
    id="S08",
    name="Color Variance",
    dependencies=["S07"],
    description="Reject dull or poorly lit images",
)
def color_variance(ctx: VerificationContext) -> StageVerdict:
    ctx.color_score = color_variance_score(ctx.image, ctx.config)
    threshold = ctx.config.min_color_score

    if ctx.color_score < threshold:
        return StageVerdict(
            False,
            "Image is too dull/gray or has poor lighting",
            f"Score: {ctx.color_score:.3f} (< {threshold})",
        )
    return StageVerdict(True, "Good color variance and lighting", f"Score: {ctx.color_score:.2f}")
