"""POST /api/composite: render base64 images into one justified-grid JPEG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from PIL import UnidentifiedImageError

from collage.config import Settings
from collage.dependencies import get_settings
from collage.engine.errors import InvalidAspectRatio
from collage.models.requests import CompositeRequest
from collage.render.composite import compose, decode_image, encode_jpeg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/composite")
def composite(req: CompositeRequest, cfg: Settings = Depends(get_settings)) -> Response:
    if len(req.images) > cfg.composite_max_images:
        raise HTTPException(
            status_code=413,
            detail=f"At most {cfg.composite_max_images} images per composite",
        )

    try:
        images = [decode_image(data) for data in req.images]
    except (ValueError, UnidentifiedImageError) as e:
        raise HTTPException(status_code=400, detail=f"Could not decode image: {e}") from e

    layout_config = req.config.to_config() if req.config else cfg.composite_layout_config()
    quality = req.quality if req.quality is not None else cfg.composite_jpeg_quality

    try:
        canvas, result = compose(images, layout_config)
    except InvalidAspectRatio as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info(
        "Composite: %d images -> %dx%d canvas", len(images), canvas.width, canvas.height
    )
    return Response(
        content=encode_jpeg(canvas, quality),
        media_type="image/jpeg",
        headers={
            "X-Container-Height": f"{result.container_height:.1f}",
            "X-Widow-Count": str(result.widow_count),
        },
    )
