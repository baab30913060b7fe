"""lbrn2svg: LightBurn project (.lbrn2) to SVG converter."""

__version__ = "0.1.0"

from lbrn2svg.converter import ConversionResult, convert
from lbrn2svg.engine.bounds import BoundingBox, document_bounds, shape_bounds
from lbrn2svg.engine.config import ConverterConfig
from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.engine.transform import compose
from lbrn2svg.lbrn.builder import ProjectParseError, parse_project
from lbrn2svg.svg.serializer import render_svg

__all__ = [
    "BoundingBox",
    "ConversionResult",
    "ConverterConfig",
    "Diagnostics",
    "ProjectParseError",
    "compose",
    "convert",
    "document_bounds",
    "parse_project",
    "render_svg",
    "shape_bounds",
]
