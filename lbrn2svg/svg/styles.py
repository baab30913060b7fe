"""Cut-layer → SVG stroke style lookup."""

from __future__ import annotations

from dataclasses import dataclass

from lbrn2svg.engine.config import DEFAULT_CONFIG, ConverterConfig
from lbrn2svg.models.project import LayerStyle


@dataclass(frozen=True)
class ResolvedStyle:
    stroke: str
    stroke_width: str
    fill: str = "none"

    def to_css(self) -> str:
        return f"stroke:{self.stroke};stroke-width:{self.stroke_width};fill:{self.fill}"


def palette_color(index: int, config: ConverterConfig = DEFAULT_CONFIG) -> str:
    """Default color for a cut index: cycles the palette, negative indices get the first entry."""
    if index < 0:
        return config.palette[0]
    return config.palette[index % len(config.palette)]


def resolve_style(
    cut_index: int,
    layers: tuple[LayerStyle, ...] | list[LayerStyle] | None,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> ResolvedStyle:
    layer = None
    for candidate in layers or ():
        if candidate.index == cut_index:
            layer = candidate
            break

    color = layer.color if layer is not None and layer.color else palette_color(cut_index, config)
    width = (
        layer.stroke_width
        if layer is not None and layer.stroke_width
        else config.default_stroke_width
    )
    return ResolvedStyle(stroke=color, stroke_width=width)


def style_attribute(
    cut_index: int,
    layers: tuple[LayerStyle, ...] | list[LayerStyle] | None,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> str:
    return resolve_style(cut_index, layers, config).to_css()
