"""POST /api/convert: LBRN2 project text in, SVG markup out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from lbrn2svg.config import Settings
from lbrn2svg.converter import convert as convert_project
from lbrn2svg.dependencies import get_settings
from lbrn2svg.lbrn.builder import ProjectParseError
from lbrn2svg.models.requests import ConvertRequest
from lbrn2svg.models.responses import ConvertResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    start = time.perf_counter()

    try:
        result = convert_project(req.lbrn2, config=settings.converter_config(req.stroke_width))
    except ProjectParseError as e:
        logger.info("Rejected LBRN2 upload: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return ConvertResponse(
        svg=result.svg,
        warnings=result.warnings,
        shape_count=result.shape_count,
        processing_time_ms=round(elapsed, 1),
    )
