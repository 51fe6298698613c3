"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from interiorsight.config import settings
from interiorsight.engine.pipeline import InteriorVerifier, create_verifier
from interiorsight.engine.ranker import BatchRanker


def get_settings():
    return settings


@lru_cache
def get_verifier() -> InteriorVerifier:
    # Detections arrive with each request, so no detector is configured
    return create_verifier()


def get_ranker() -> BatchRanker:
    return BatchRanker(get_verifier())
