"""One-call LBRN2 → SVG conversion."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lbrn2svg.engine.config import ConverterConfig
from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.lbrn.builder import parse_project
from lbrn2svg.svg.serializer import render_svg

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    svg: str
    warnings: list[str] = field(default_factory=list)
    shape_count: int = 0


def convert(xml_text: str, config: ConverterConfig | None = None) -> ConversionResult:
    """Parse LBRN2 XML and render it as SVG. Raises ProjectParseError on unreadable input."""
    document = parse_project(xml_text)
    diagnostics = Diagnostics()
    svg = render_svg(document, config=config, diagnostics=diagnostics)
    return ConversionResult(
        svg=svg,
        warnings=list(diagnostics.warnings),
        shape_count=document.num_shapes,
    )
