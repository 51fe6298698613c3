"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from interiorsight.engine.types import Detection, NormalizedRect


class BoxPayload(BaseModel):
    x: float = Field(..., description="Left edge, image fraction")
    y: float = Field(..., description="Top edge, image fraction")
    width: float = Field(..., description="Width, image fraction")
    height: float = Field(..., description="Height, image fraction")


class DetectionPayload(BaseModel):
    label: str = Field(..., description="Detector class label")
    confidence: float = Field(..., ge=0.0, le=1.0)
    bounding_box: BoxPayload
    area_fraction: float | None = Field(
        default=None,
        description="Defaults to bounding_box.width * bounding_box.height",
    )

    def to_detection(self) -> Detection:
        box = self.bounding_box
        area = self.area_fraction if self.area_fraction is not None else box.width * box.height
        return Detection(
            label=self.label,
            confidence=self.confidence,
            bounding_box=NormalizedRect(x=box.x, y=box.y, width=box.width, height=box.height),
            area_fraction=area,
        )


class VerifyRequest(BaseModel):
    image_base64: str = Field(..., description="Encoded image (JPEG, PNG, ...) as base64")
    detections: list[DetectionPayload] | None = Field(
        default=None,
        description="Detector output for this image; null means the detector produced nothing",
    )

    def to_detections(self) -> list[Detection] | None:
        if self.detections is None:
            return None
        return [d.to_detection() for d in self.detections]


class RankRequest(BaseModel):
    images: list[VerifyRequest] = Field(..., description="Images to verify and rank")
    limit: int | None = Field(default=None, ge=0, description="Top-K to return")
    max_concurrent: int | None = Field(default=None, ge=1, le=16)
