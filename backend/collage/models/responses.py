"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from collage.engine.items import LayoutItem, LayoutResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    engine: str = "justified"


class BoxModel(BaseModel):
    aspect_ratio: float
    top: float
    left: float
    width: float
    height: float
    forced_aspect_ratio: bool = False

    @classmethod
    def from_item(cls, item: LayoutItem) -> BoxModel:
        return cls(
            aspect_ratio=item.aspect_ratio,
            top=item.top,
            left=item.left,
            width=item.width,
            height=item.height,
            forced_aspect_ratio=item.forced_aspect_ratio,
        )


class LayoutResponse(BaseModel):
    container_height: float
    widow_count: int = 0
    boxes: list[BoxModel] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: LayoutResult) -> LayoutResponse:
        return cls(
            container_height=result.container_height,
            widow_count=result.widow_count,
            boxes=[BoxModel.from_item(item) for item in result.boxes],
        )
