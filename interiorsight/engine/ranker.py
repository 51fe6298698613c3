"""Batch ranker — verifies many images on a bounded worker pool and keeps the best.

Each worker decodes its own image, so at most ``max_concurrent`` pixel
buffers are alive at once regardless of batch size. Completions land in a
lock-guarded list; sorting starts only after the pool has been joined.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from interiorsight.engine.pipeline import LOAD_STAGE_NAME, InteriorVerifier
from interiorsight.engine.types import FilterOutcome, ImageInput, RankedItem, VerificationResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 15
DEFAULT_MAX_CONCURRENT = 3


class BatchRanker:
    def __init__(self, verifier: InteriorVerifier) -> None:
        self.verifier = verifier

    def rank(
        self,
        images: Sequence[Any],
        limit: int = DEFAULT_LIMIT,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> list[RankedItem]:
        """Top ``limit`` valid images by final score, best first.

        Invalid images are dropped silently. Equal scores keep input order.
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        completed = self.verify_batch(images, max_concurrent=max_concurrent)
        valid = [
            item for item in completed
            if item.result.is_valid and item.result.score_breakdown is not None
        ]
        valid.sort(key=lambda item: (-item.result.score_breakdown.final_score, item.source_index))

        logger.info(
            "Ranked %d/%d valid images, returning top %d",
            len(valid),
            len(images),
            min(limit, len(valid)),
        )
        return valid[:limit]

    def verify_batch(
        self,
        images: Sequence[Any],
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> list[RankedItem]:
        """Verify every image, valid or not, ordered by input position."""
        if not images:
            return []
        if max_concurrent < 1:
            raise ValueError(f"max_concurrent must be >= 1, got {max_concurrent}")

        start = time.perf_counter()
        results: list[RankedItem] = []
        lock = threading.Lock()

        def _work(index: int, source: Any) -> None:
            item = RankedItem(source_index=index, result=self._verify_one(source))
            with lock:
                results.append(item)

        with ThreadPoolExecutor(max_workers=max_concurrent) as executor:
            futures = [executor.submit(_work, i, src) for i, src in enumerate(images)]
            # Leaving the block joins the pool; workers never raise
            for future in futures:
                future.result()

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Batch complete: %d images, %d workers in %.0fms",
            len(images),
            max_concurrent,
            elapsed,
        )
        return sorted(results, key=lambda item: item.source_index)

    def _verify_one(self, source: Any) -> VerificationResult:
        try:
            if isinstance(source, ImageInput):
                return self.verifier.verify(source.image, source.detections)
            return self.verifier.verify(source)
        except Exception as e:
            logger.warning("Verification crashed: %s", e)
            outcome = FilterOutcome(LOAD_STAGE_NAME, False, f"Stage error: {e}", "Error")
            return VerificationResult(filter_outcomes=(outcome,))


def rank(
    images: Sequence[Any],
    verifier: InteriorVerifier,
    limit: int = DEFAULT_LIMIT,
    max_concurrent: int = DEFAULT_MAX_CONCURRENT,
) -> list[RankedItem]:
    return BatchRanker(verifier).rank(images, limit=limit, max_concurrent=max_concurrent)
