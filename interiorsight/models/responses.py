"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from interiorsight.engine.types import RankedItem, ScoreBreakdown, VerificationResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class DetectionModel(BaseModel):
    label: str
    confidence: float
    bounding_box: tuple[float, float, float, float]  # x, y, width, height
    area_fraction: float


class FilterOutcomeModel(BaseModel):
    name: str
    passed: bool
    message: str
    value: str
    latency_ms: float = 0.0


class ScoreBreakdownModel(BaseModel):
    furniture_coverage_score: float
    spread_score: float
    composition_score: float
    color_score: float
    final_score: float
    weights: dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_breakdown(cls, b: ScoreBreakdown) -> ScoreBreakdownModel:
        return cls(
            furniture_coverage_score=b.furniture_coverage_score,
            spread_score=b.spread_score,
            composition_score=b.composition_score,
            color_score=b.color_score,
            final_score=b.final_score,
            weights={
                "furniture_coverage": b.furniture_coverage_weight,
                "spread": b.spread_weight,
                "composition": b.composition_weight,
                "color": b.color_weight,
            },
        )


class VerificationResponse(BaseModel):
    is_valid: bool
    status: str
    score: float = 0.0
    detections: list[DetectionModel] = Field(default_factory=list)
    filter_outcomes: list[FilterOutcomeModel] = Field(default_factory=list)
    score_breakdown: ScoreBreakdownModel | None = None
    total_latency_ms: float = 0.0

    @classmethod
    def from_result(cls, result: VerificationResult) -> VerificationResponse:
        return cls(
            is_valid=result.is_valid,
            status=result.status,
            score=result.score,
            detections=[
                DetectionModel(
                    label=d.label,
                    confidence=d.confidence,
                    bounding_box=(
                        d.bounding_box.x,
                        d.bounding_box.y,
                        d.bounding_box.width,
                        d.bounding_box.height,
                    ),
                    area_fraction=d.area_fraction,
                )
                for d in result.detections
            ],
            filter_outcomes=[
                FilterOutcomeModel(
                    name=o.name,
                    passed=o.passed,
                    message=o.message,
                    value=o.value,
                    latency_ms=round(o.latency_ms, 3),
                )
                for o in result.filter_outcomes
            ],
            score_breakdown=(
                ScoreBreakdownModel.from_breakdown(result.score_breakdown)
                if result.score_breakdown
                else None
            ),
            total_latency_ms=round(result.total_latency_ms, 3),
        )


class RankedItemModel(BaseModel):
    source_index: int
    result: VerificationResponse

    @classmethod
    def from_item(cls, item: RankedItem) -> RankedItemModel:
        return cls(source_index=item.source_index, result=VerificationResponse.from_result(item.result))


class RankResponse(BaseModel):
    items: list[RankedItemModel] = Field(default_factory=list)
    images_received: int = 0
    processing_time_ms: float = 0.0
