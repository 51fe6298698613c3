"""POST /api/verify — run the filter chain on one image."""

from __future__ import annotations

import asyncio
import base64
import binascii

from fastapi import APIRouter, Depends, HTTPException

from interiorsight.config import settings
from interiorsight.dependencies import get_verifier
from interiorsight.engine.pipeline import InteriorVerifier
from interiorsight.models.requests import VerifyRequest
from interiorsight.models.responses import VerificationResponse

router = APIRouter()


def decode_image(image_base64: str) -> bytes:
    """Base64 payload to encoded image bytes. 400 on bad input, 413 when too large."""
    try:
        data = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid base64 image: {e}") from e
    if not data:
        raise HTTPException(status_code=400, detail="Empty image payload")
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Image exceeds max_upload_bytes")
    return data


@router.post("/verify", response_model=VerificationResponse)
async def verify(
    req: VerifyRequest,
    verifier: InteriorVerifier = Depends(get_verifier),
) -> VerificationResponse:
    data = decode_image(req.image_base64)

    # Pixel work is CPU-bound; keep the event loop free
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, verifier.verify, data, req.to_detections())

    return VerificationResponse.from_result(result)
