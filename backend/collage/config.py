"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from collage.engine.config import LayoutConfig


class Settings(BaseSettings):
    collage_env: str = "development"
    collage_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Composite preset (ten-image collage)
    composite_container_width: float = 1300.0
    composite_target_row_heights: list[float] = [440.0, 500.0]
    composite_tolerance: float = 0.1
    composite_min_row_height_factor: float = 0.8
    composite_max_row_height_factor: float = 1.5
    composite_jpeg_quality: int = 60
    composite_max_images: int = 50

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def composite_layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            container_width=self.composite_container_width,
            target_row_height=list(self.composite_target_row_heights),
            target_row_height_tolerance=self.composite_tolerance,
            edge_case_min_row_height_factor=self.composite_min_row_height_factor,
            edge_case_max_row_height_factor=self.composite_max_row_height_factor,
        )


settings = Settings()
