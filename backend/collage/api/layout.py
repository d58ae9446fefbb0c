"""POST /api/layout: compute box geometry for a list of aspect ratios."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from collage.engine.errors import InvalidAspectRatio
from collage.engine.layout import compute
from collage.models.requests import LayoutRequest
from collage.models.responses import LayoutResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/layout", response_model=LayoutResponse)
def layout(req: LayoutRequest) -> LayoutResponse:
    try:
        result = compute(req.aspect_ratios, req.config.to_config())
    except InvalidAspectRatio as e:
        logger.info("Rejected layout request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return LayoutResponse.from_result(result)
