"""Geometry engine: transforms, bounds and per-conversion state."""

from lbrn2svg.engine.bounds import BoundingBox, document_bounds, shape_bounds
from lbrn2svg.engine.config import ConverterConfig
from lbrn2svg.engine.context import Diagnostics, GeometryCache
from lbrn2svg.engine.transform import compose

__all__ = [
    "BoundingBox",
    "ConverterConfig",
    "Diagnostics",
    "GeometryCache",
    "compose",
    "document_bounds",
    "shape_bounds",
]
