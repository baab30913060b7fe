"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from lbrn2svg.engine.config import ConverterConfig


class Settings(BaseSettings):
    lbrn2svg_env: str = "development"
    lbrn2svg_log_level: str = "info"

    # Stroke width for shapes whose cut setting does not define one
    lbrn2svg_stroke_width: str = "0.050000mm"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def converter_config(self, stroke_width: str | None = None) -> ConverterConfig:
        return ConverterConfig(default_stroke_width=stroke_width or self.lbrn2svg_stroke_width)


settings = Settings()
