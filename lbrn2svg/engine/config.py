"""Converter configuration: numeric precision, sampling and style defaults."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PALETTE: tuple[str, ...] = (
    "#000000",
    "#FF0000",
    "#00AA00",
    "#0000FF",
    "#FF9900",
    "#9900FF",
    "#00AAAA",
    "#AAAA00",
)


@dataclass(frozen=True)
class ConverterConfig:
    """Controls number formatting, bounds sampling and fallback styling."""

    # Digits after the decimal point in every emitted number
    precision: int = 6

    # Ellipse perimeter samples used for bounds
    ellipse_samples: int = 32

    # Below this, a Bezier derivative coefficient is treated as zero
    bezier_epsilon: float = 1e-8

    # Style fallbacks when a cut setting is missing or incomplete
    default_stroke_width: str = "0.050000mm"
    palette: tuple[str, ...] = DEFAULT_PALETTE

    # Viewport used when no shape yields bounds: (min_x, min_y, max_x, max_y)
    fallback_viewbox: tuple[float, float, float, float] = (0.0, -100.0, 100.0, 0.0)

    # Canvas size (mm) of the placeholder document for projects without shapes
    empty_canvas_size: int = 100

    def fmt(self, value: float) -> str:
        # + 0.0 turns -0.0 into 0.0
        return f"{value + 0.0:.{self.precision}f}"


DEFAULT_CONFIG = ConverterConfig()
