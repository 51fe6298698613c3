"""Tests for the batch ranker."""

from __future__ import annotations

import inspect
import threading
import time

import pytest
from PIL import Image

from interiorsight import rank
from interiorsight.engine import ranker as ranker_module
from interiorsight.engine.pipeline import InteriorVerifier, create_verifier
from interiorsight.engine.ranker import DEFAULT_LIMIT, DEFAULT_MAX_CONCURRENT, BatchRanker
from interiorsight.engine.types import ImageInput
from tests.conftest import ROOM_DETECTIONS, colorful_image, det, gray_image, png_bytes


def _room(width: float) -> list:
    """A couch of varying width plus a chair; wider couch -> closer to optimal coverage."""
    return [
        det("couch", 0.9, 0.05, 0.30, width, 0.40),
        det("chair", 0.8, 0.70, 0.40, 0.20, 0.20),
    ]


class _CountingDetector:
    """Tracks how many detect() calls overlap in time."""

    def __init__(self, delay: float = 0.02) -> None:
        self.delay = delay
        self.active = 0
        self.max_active = 0
        self.calls = 0
        self._lock = threading.Lock()

    def detect(self, image):
        with self._lock:
            self.active += 1
            self.calls += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(self.delay)
        with self._lock:
            self.active -= 1
        return list(ROOM_DETECTIONS)


@pytest.fixture
def ranker() -> BatchRanker:
    return BatchRanker(create_verifier())


class TestRank:
    def test_top_15_of_20_sorted(self, ranker):
        image = colorful_image()
        inputs = [ImageInput(image, _room(0.10 + 0.02 * i)) for i in range(20)]

        ranked = ranker.rank(inputs, limit=15)

        assert len(ranked) == 15
        scores = [item.result.score_breakdown.final_score for item in ranked]
        assert scores == sorted(scores, reverse=True)
        assert len({item.source_index for item in ranked}) == 15
        for item in ranked:
            assert item.result.is_valid

    def test_default_limit_is_15(self, ranker):
        image = colorful_image()
        ranked = ranker.rank([ImageInput(image, ROOM_DETECTIONS)] * 20)
        assert len(ranked) == 15

    def test_all_invalid_returns_empty(self, ranker):
        inputs = [ImageInput(gray_image(), ROOM_DETECTIONS) for _ in range(5)]
        assert ranker.rank(inputs) == []

    def test_empty_batch_schedules_nothing(self, ranker, monkeypatch):
        def _no_pool(*args, **kwargs):
            raise AssertionError("executor should not be created")

        monkeypatch.setattr(ranker_module, "ThreadPoolExecutor", _no_pool)
        assert ranker.rank([]) == []
        assert ranker.rank([], max_concurrent=0) == []

    def test_source_index_survives_sorting(self, ranker):
        image = colorful_image()
        inputs = [
            ImageInput(image, None),                # invalid: no detections
            ImageInput(image, _room(0.20)),
            ImageInput(gray_image(), ROOM_DETECTIONS),  # invalid: dull
            ImageInput(image, _room(0.60)),
        ]
        ranked = ranker.rank(inputs)
        assert sorted(item.source_index for item in ranked) == [1, 3]
        by_index = {item.source_index: item for item in ranked}
        assert by_index[3].result.detections[0].bounding_box.width == pytest.approx(0.60)

    def test_ties_keep_input_order(self, ranker):
        image = colorful_image()
        inputs = [ImageInput(image, ROOM_DETECTIONS) for _ in range(6)]
        ranked = ranker.rank(inputs, limit=6, max_concurrent=3)
        assert [item.source_index for item in ranked] == [0, 1, 2, 3, 4, 5]

    def test_limit_zero(self, ranker):
        assert ranker.rank([ImageInput(colorful_image(), ROOM_DETECTIONS)], limit=0) == []

    def test_rejects_bad_parameters(self, ranker):
        with pytest.raises(ValueError):
            ranker.rank([colorful_image()], max_concurrent=0)
        with pytest.raises(ValueError):
            ranker.rank([colorful_image()], limit=-1)

    def test_module_level_defaults(self):
        defaults = inspect.signature(rank).parameters
        assert defaults["limit"].default == DEFAULT_LIMIT
        assert defaults["max_concurrent"].default == DEFAULT_MAX_CONCURRENT

    def test_module_level_rank(self):
        inputs = [ImageInput(colorful_image(), ROOM_DETECTIONS)] * 3
        assert len(rank(inputs, limit=2)) == 2


class TestConcurrency:
    def test_at_most_max_concurrent_running(self):
        detector = _CountingDetector()
        ranker = BatchRanker(create_verifier(detector=detector))
        images = [colorful_image(160, 120) for _ in range(10)]

        ranked = ranker.rank(images, limit=15, max_concurrent=3)

        assert detector.calls == 10
        assert 1 <= detector.max_active <= 3
        assert len(ranked) == 10

    def test_single_worker_is_sequential(self):
        detector = _CountingDetector(delay=0.005)
        ranker = BatchRanker(create_verifier(detector=detector))
        ranker.rank([colorful_image(64, 48) for _ in range(4)], max_concurrent=1)
        assert detector.max_active == 1


class TestVerifyBatch:
    def test_returns_every_result_in_input_order(self, ranker):
        inputs = [
            ImageInput(colorful_image(), ROOM_DETECTIONS),
            ImageInput(gray_image(), ROOM_DETECTIONS),
            ImageInput(colorful_image(), [det("chair", 0.2, 0.3, 0.3, 0.3, 0.3)]),
        ]
        results = ranker.verify_batch(inputs)
        assert [item.source_index for item in results] == [0, 1, 2]
        assert [item.result.is_valid for item in results] == [True, False, False]
        assert results[1].result.failed_stage == "Color Variance"
        assert results[2].result.failed_stage == "Object Confidence"

    def test_bad_image_does_not_fail_batch(self, ranker):
        inputs = [
            ImageInput(b"corrupt", ROOM_DETECTIONS),
            ImageInput(colorful_image(), ROOM_DETECTIONS),
        ]
        results = ranker.verify_batch(inputs)
        assert not results[0].result.is_valid
        assert results[0].result.filter_outcomes[0].message == "Failed to load image"
        assert results[1].result.is_valid
        assert [item.source_index for item in ranker.rank(inputs)] == [1]

    def test_oversized_image_does_not_fail_batch(self, ranker, monkeypatch):
        good = colorful_image(20, 20)
        oversized = png_bytes(colorful_image())
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        ranked = ranker.rank([ImageInput(oversized, ROOM_DETECTIONS), ImageInput(good, ROOM_DETECTIONS)])
        assert [item.source_index for item in ranked] == [1]

    def test_crashing_verifier_yields_invalid_result(self):
        class _Crashing(InteriorVerifier):
            def verify(self, image, detections=None):
                if detections is None:
                    raise RuntimeError("boom")
                return super().verify(image, detections)

        ranker = BatchRanker(_Crashing())
        results = ranker.verify_batch([colorful_image(), ImageInput(colorful_image(), ROOM_DETECTIONS)])
        assert not results[0].result.is_valid
        assert "boom" in results[0].result.filter_outcomes[0].message
        assert results[1].result.is_valid
