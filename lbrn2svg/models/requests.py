"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    lbrn2: str = Field(..., description="Raw LBRN2 project XML")
    stroke_width: str | None = Field(
        default=None,
        description="Stroke width for layers without one (e.g. '0.1mm')",
    )
