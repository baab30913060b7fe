"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from lbrn2svg import __version__
from lbrn2svg.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
