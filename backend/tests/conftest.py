"""Shared test fixtures."""

from __future__ import annotations

import base64
import io

import pytest
from PIL import Image

from collage.engine.config import LayoutConfig

RED = (220, 30, 30)
GREEN = (30, 200, 60)
BLUE = (40, 60, 210)


def solid_image(width: int, height: int, color: tuple[int, int, int]) -> Image.Image:
    return Image.new("RGB", (width, height), color)


def png_base64(img: Image.Image) -> str:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def default_config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def three_images() -> list[Image.Image]:
    # Aspect ratios 1.5, 1.0, 2.0
    return [
        solid_image(300, 200, RED),
        solid_image(200, 200, GREEN),
        solid_image(400, 200, BLUE),
    ]
