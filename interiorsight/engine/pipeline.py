"""Filter chain orchestrator — runs stages in order and stops at the first failed gate."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from interiorsight.engine.config import DEFAULT_CONFIG, VerificationConfig
from interiorsight.engine.context import VerificationContext
from interiorsight.engine.registry import StageRegistry, StageVerdict, get_registry
from interiorsight.engine.scoring import build_breakdown
from interiorsight.engine.signals import normalize_coverage
from interiorsight.engine.stages import register_stages
from interiorsight.engine.types import (
    Detection,
    Detector,
    FilterOutcome,
    ScoreBreakdown,
    VerificationResult,
)
from interiorsight.utils.imaging import load_image

logger = logging.getLogger(__name__)

LOAD_STAGE_NAME = "Object Detection"


class InteriorVerifier:
    """Verifies one image at a time. Holds no per-call state, safe to share across threads."""

    def __init__(
        self,
        detector: Detector | None = None,
        config: VerificationConfig | None = None,
        registry: StageRegistry | None = None,
    ) -> None:
        if registry is None:
            register_stages()
            registry = get_registry()
        self.registry = registry
        self.config = config or DEFAULT_CONFIG
        self.detector = detector

    def verify(
        self,
        image: Any,
        detections: Iterable[Detection] | None = None,
    ) -> VerificationResult:
        """Run the full chain on one image. Never raises.

        ``detections`` bypasses the detector. With neither detections nor a
        detector the chain stops at Object Detection.
        """
        start = time.perf_counter()

        try:
            decoded = load_image(image)
        except Exception as e:
            logger.warning("Could not load image: %s", e)
            outcome = FilterOutcome(LOAD_STAGE_NAME, False, "Failed to load image", str(e))
            return VerificationResult(
                filter_outcomes=(outcome,),
                total_latency_ms=(time.perf_counter() - start) * 1000,
            )

        ctx = VerificationContext(
            image=decoded,
            detections=None if detections is None else list(detections),
            config=self.config,
            detector=self.detector,
        )
        completed = self.run(ctx)

        breakdown = self._score(ctx) if completed else None
        total = (time.perf_counter() - start) * 1000

        result = VerificationResult(
            is_valid=breakdown is not None,
            score=breakdown.final_score if breakdown else 0.0,
            detections=tuple(ctx.detections or ()),
            filter_outcomes=tuple(ctx.outcomes),
            score_breakdown=breakdown,
            total_latency_ms=total,
        )

        if result.is_valid:
            logger.info("Verification passed: score %.3f in %.0fms", result.score, total)
        else:
            logger.info("Verification stopped at %s in %.0fms", result.failed_stage, total)
        return result

    def run(self, ctx: VerificationContext) -> bool:
        """Run every stage in dependency order. True if the chain reached its end."""
        ordered = self.registry.resolve_order()

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                verdict = spec.fn(ctx)
            except Exception as e:
                logger.warning("  %s FAILED: %s", spec.id, e)
                verdict = StageVerdict(False, f"Stage error: {e}", "Error")
            elapsed = (time.perf_counter() - t0) * 1000

            passed = verdict.passed or not spec.gating
            ctx.outcomes.append(
                FilterOutcome(
                    name=spec.name,
                    passed=passed,
                    message=verdict.message,
                    value=verdict.value,
                    latency_ms=elapsed,
                )
            )
            logger.debug("  %s %s in %.1fms: %s", spec.id, "passed" if passed else "failed",
                         elapsed, verdict.value)

            if not passed:
                return False

        return bool(ordered)

    def _score(self, ctx: VerificationContext) -> ScoreBreakdown:
        coverage_score = normalize_coverage(ctx.furniture_coverage, self.config)
        return build_breakdown(
            furniture_coverage=coverage_score,
            spread=ctx.spread_score,
            composition=ctx.composition_score,
            color=ctx.color_score,
            weights=self.config.weights,
        )


def create_verifier(
    detector: Detector | None = None,
    config: VerificationConfig | None = None,
) -> InteriorVerifier:
    """Factory function for a verifier over the registered stages."""
    return InteriorVerifier(detector=detector, config=config)
