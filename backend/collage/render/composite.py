"""Composite renderer: resize each image to its box and paste it onto one canvas.

The engine only computes geometry; this module is the collaborator that turns
a ``LayoutResult`` into pixels and a JPEG payload.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import math
import time
from collections.abc import Sequence

from PIL import Image

from collage.config import settings
from collage.engine.config import LayoutConfig
from collage.engine.items import LayoutResult
from collage.engine.layout import compute
from collage.utils.math_helpers import aspect_ratio, round_px

logger = logging.getLogger(__name__)


def decode_image(data: bytes | str) -> Image.Image:
    """Open an image from raw bytes, or from a base64 string / data URL."""
    if isinstance(data, str):
        if data.startswith("data:") and "," in data:
            data = data.split(",", 1)[1]
        try:
            data = base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 image payload: {e}") from e
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def aspect_ratios(images: Sequence[Image.Image]) -> list[float]:
    return [aspect_ratio(img.width, img.height) for img in images]


def render_canvas(
    images: Sequence[Image.Image],
    result: LayoutResult,
    container_width: float,
) -> Image.Image:
    """Paste every laid-out image onto a transparent RGBA canvas, in input order."""
    canvas = Image.new(
        "RGBA",
        (math.ceil(container_width), math.ceil(result.container_height)),
        (0, 0, 0, 0),
    )
    if len(images) > len(result.boxes):
        logger.warning(
            "Skipping %d images without a layout box", len(images) - len(result.boxes)
        )

    for img, box in zip(images, result.boxes):
        target_w = max(1, round_px(box.width))
        target_h = max(1, round_px(box.height))
        resized = img.convert("RGBA").resize((target_w, target_h), Image.Resampling.LANCZOS)
        canvas.paste(resized, (round_px(box.left), round_px(box.top)), resized)
    return canvas


def encode_jpeg(canvas: Image.Image, quality: int) -> bytes:
    buffer = io.BytesIO()
    canvas.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def compose(
    images: Sequence[Image.Image],
    config: LayoutConfig | None = None,
) -> tuple[Image.Image, LayoutResult]:
    """Lay out and render ``images``; returns the canvas and the geometry used."""
    config = config or settings.composite_layout_config()

    t0 = time.perf_counter()
    result = compute(aspect_ratios(images), config)
    logger.debug("Layout end: %d boxes in %.1fms", len(result.boxes), (time.perf_counter() - t0) * 1000)

    t0 = time.perf_counter()
    canvas = render_canvas(images, result, config.container_width)
    logger.debug("Composite end: %dx%d in %.1fms", *canvas.size, (time.perf_counter() - t0) * 1000)
    return canvas, result


def create_composite(
    images: Sequence[Image.Image],
    config: LayoutConfig | None = None,
    quality: int | None = None,
) -> bytes:
    """Render ``images`` into a justified grid and encode it as JPEG bytes."""
    canvas, _ = compose(images, config)
    return encode_jpeg(canvas, quality if quality is not None else settings.composite_jpeg_quality)
