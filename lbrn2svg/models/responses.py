"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ConvertResponse(BaseModel):
    svg: str
    warnings: list[str] = Field(default_factory=list)
    shape_count: int = 0
    processing_time_ms: float = 0.0
