"""InteriorSight — interior room photo verification and ranking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from interiorsight.engine import (
    BatchRanker,
    Detection,
    Detector,
    InteriorVerifier,
    RankedItem,
    VerificationResult,
    create_verifier,
)
from interiorsight.engine.ranker import DEFAULT_LIMIT, DEFAULT_MAX_CONCURRENT

__version__ = "0.1.0"


def verify(
    image: Any,
    detections: Iterable[Detection] | None = None,
    detector: Detector | None = None,
) -> VerificationResult:
    """Verify one image with the default thresholds."""
    return create_verifier(detector=detector).verify(image, detections)


def rank(
    images: Sequence[Any],
    detector: Detector | None = None,
    limit: int = DEFAULT_LIMIT,
    max_concurrent: int = DEFAULT_MAX_CONCURRENT,
) -> list[RankedItem]:
    """Rank a batch of images (sources or ImageInput) with the default thresholds."""
    ranker = BatchRanker(create_verifier(detector=detector))
    return ranker.rank(images, limit=limit, max_concurrent=max_concurrent)


__all__ = ["verify", "rank", "InteriorVerifier", "BatchRanker", "__version__"]
