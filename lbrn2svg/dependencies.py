"""FastAPI dependency injection."""

from __future__ import annotations

from lbrn2svg.config import Settings, settings


def get_settings() -> Settings:
    return settings
