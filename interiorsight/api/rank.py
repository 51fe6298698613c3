"""POST /api/rank — verify a batch and return the top-K valid images."""

from __future__ import annotations

import asyncio
import time
from functools import partial

from fastapi import APIRouter, Depends

from interiorsight.api.verify import decode_image
from interiorsight.config import settings
from interiorsight.dependencies import get_ranker
from interiorsight.engine.ranker import BatchRanker
from interiorsight.engine.types import ImageInput
from interiorsight.models.requests import RankRequest
from interiorsight.models.responses import RankedItemModel, RankResponse

router = APIRouter()


@router.post("/rank", response_model=RankResponse)
async def rank(
    req: RankRequest,
    ranker: BatchRanker = Depends(get_ranker),
) -> RankResponse:
    start = time.perf_counter()

    # Images stay encoded here; each worker decodes its own
    inputs = [
        ImageInput(image=decode_image(item.image_base64), detections=item.to_detections())
        for item in req.images
    ]
    limit = req.limit if req.limit is not None else settings.rank_limit
    max_concurrent = req.max_concurrent or settings.rank_max_concurrent

    loop = asyncio.get_running_loop()
    ranked = await loop.run_in_executor(
        None,
        partial(ranker.rank, inputs, limit=limit, max_concurrent=max_concurrent),
    )

    elapsed = (time.perf_counter() - start) * 1000
    return RankResponse(
        items=[RankedItemModel.from_item(item) for item in ranked],
        images_received=len(inputs),
        processing_time_ms=round(elapsed, 1),
    )
