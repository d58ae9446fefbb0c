"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from collage.engine.config import LayoutConfig, Padding, Spacing, WidowLayoutStyle


class PaddingModel(BaseModel):
    top: float = 10.0
    right: float = 10.0
    bottom: float = 10.0
    left: float = 10.0


class SpacingModel(BaseModel):
    horizontal: float = 10.0
    vertical: float = 10.0


class LayoutConfigModel(BaseModel):
    container_width: float = Field(default=1060.0, gt=0)
    container_padding: PaddingModel = Field(default_factory=PaddingModel)
    box_spacing: SpacingModel = Field(default_factory=SpacingModel)
    target_row_height: list[float] = Field(
        default_factory=lambda: [320.0],
        min_length=1,
        description="Target row heights, cycled across rows",
    )
    target_row_height_tolerance: float = Field(default=0.25, ge=0)
    edge_case_min_row_height_factor: float = Field(default=0.5, gt=0)
    edge_case_max_row_height_factor: float = Field(default=2.0, gt=0)
    max_num_rows: int | None = Field(default=None, ge=0)
    force_aspect_ratio: float | None = Field(default=None, gt=0)
    show_widows: bool = True
    full_width_breakout_row_cadence: int = Field(default=0, ge=0)
    widow_layout_style: WidowLayoutStyle = WidowLayoutStyle.LEFT

    def to_config(self) -> LayoutConfig:
        return LayoutConfig(
            container_width=self.container_width,
            container_padding=Padding(**self.container_padding.model_dump()),
            box_spacing=Spacing(**self.box_spacing.model_dump()),
            target_row_height=list(self.target_row_height),
            target_row_height_tolerance=self.target_row_height_tolerance,
            edge_case_min_row_height_factor=self.edge_case_min_row_height_factor,
            edge_case_max_row_height_factor=self.edge_case_max_row_height_factor,
            max_num_rows=self.max_num_rows,
            force_aspect_ratio=self.force_aspect_ratio,
            show_widows=self.show_widows,
            full_width_breakout_row_cadence=self.full_width_breakout_row_cadence,
            widow_layout_style=self.widow_layout_style,
        )


class LayoutRequest(BaseModel):
    aspect_ratios: list[float] = Field(..., description="Item aspect ratios (width / height)")
    config: LayoutConfigModel = Field(default_factory=LayoutConfigModel)

    @field_validator("aspect_ratios")
    @classmethod
    def _positive_ratios(cls, values: list[float]) -> list[float]:
        # NaN fails every comparison and reaches the engine, which reports it
        for i, value in enumerate(values):
            if value <= 0:
                raise ValueError(f"Item {i} has a non-positive aspect ratio")
        return values


class CompositeRequest(BaseModel):
    images: list[str] = Field(..., min_length=1, description="Base64-encoded images")
    config: LayoutConfigModel | None = Field(
        default=None,
        description="Layout config; the composite preset is used when omitted",
    )
    quality: int | None = Field(default=None, ge=1, le=95, description="JPEG quality")
