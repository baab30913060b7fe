"""Axis-aligned bounds of shapes in SVG document space.

Local points are mapped through the shape's full transform and then y is
negated, matching the ``matrix(a -b c -d e -f)`` the serializer emits.
Bezier segments contribute their true extrema, found from the roots of the
derivative, so curves that bulge past their control polygon's endpoints are
still enclosed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import numpy as np
from numpy.typing import NDArray

from lbrn2svg.engine.config import DEFAULT_CONFIG, ConverterConfig
from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.engine.transform import compose, to_document_space
from lbrn2svg.models.project import (
    BitmapShape,
    EllipseShape,
    GroupShape,
    PathShape,
    PrimitiveKind,
    PrimitiveMode,
    RectShape,
    Shape,
    Vertex,
)
from lbrn2svg.utils.geometry import as_points, bbox, ellipse_points, rect_corners
from lbrn2svg.utils.math_helpers import bezier_extrema_params, cubic_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite([self.min_x, self.min_y, self.max_x, self.max_y])))

    def union(self, other: BoundingBox) -> BoundingBox:
        return BoundingBox(
            min_x=min(self.min_x, other.min_x),
            min_y=min(self.min_y, other.min_y),
            max_x=max(self.max_x, other.max_x),
            max_y=max(self.max_y, other.max_y),
        )

    @classmethod
    def from_points(cls, points: NDArray[np.float64]) -> BoundingBox | None:
        if len(points) == 0:
            return None
        xmin, ymin, xmax, ymax = bbox(points)
        return cls(min_x=xmin, min_y=ymin, max_x=xmax, max_y=ymax)


def shape_bounds(
    shape: Shape,
    diagnostics: Diagnostics | None = None,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> BoundingBox | None:
    """Bounds of one shape under its own transform, or None when it has none."""
    if shape.transform is None:
        return None

    if isinstance(shape, GroupShape):
        return _group_bounds(shape, diagnostics, config)

    if isinstance(shape, RectShape):
        local = rect_corners(shape.width, shape.height)
    elif isinstance(shape, BitmapShape):
        local = rect_corners(shape.width, shape.height)
    elif isinstance(shape, EllipseShape):
        local = ellipse_points(shape.radius_x, shape.radius_y, config.ellipse_samples)
    elif isinstance(shape, PathShape):
        local = path_local_points(shape, diagnostics, config)
    else:
        logger.debug("No bounds for shape type %s", type(shape).__name__)
        return None

    return BoundingBox.from_points(to_document_space(shape.transform, local))


def document_bounds(
    shapes: tuple[Shape, ...] | list[Shape],
    diagnostics: Diagnostics | None = None,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> BoundingBox | None:
    """Union of the bounds of every shape that has any."""
    combined: BoundingBox | None = None
    for shape in shapes:
        b = shape_bounds(shape, diagnostics, config)
        if b is None:
            continue
        combined = b if combined is None else combined.union(b)
    return combined


def _group_bounds(
    group: GroupShape,
    diagnostics: Diagnostics | None,
    config: ConverterConfig,
) -> BoundingBox | None:
    combined: BoundingBox | None = None
    for child in group.children:
        if child.transform is None:
            continue
        placed = replace(child, transform=compose(group.transform, child.transform))
        b = shape_bounds(placed, diagnostics, config)
        if b is None:
            continue
        combined = b if combined is None else combined.union(b)
    return combined


def path_local_points(
    path: PathShape,
    diagnostics: Diagnostics | None = None,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> NDArray[np.float64]:
    """Every local point that can touch the path's bounding box."""
    vertices = [v for v in path.vertices if v is not None]
    if path.mode is PrimitiveMode.LINE_CLOSED:
        return as_points([(v.x, v.y) for v in vertices])

    points: list[tuple[float, float]] = []
    n = len(path.vertices)

    for prim in path.primitives:
        if not (0 <= prim.start < n and 0 <= prim.end < n):
            message = f"Bounds: primitive {prim.kind.value} {prim.start} {prim.end} out of range for {n} vertices"
            logger.debug(message)
            if diagnostics is not None:
                diagnostics.warn(message)
            continue
        p0 = path.vertices[prim.start]
        p1 = path.vertices[prim.end]
        if p0 is None or p1 is None:
            continue

        points.append((p0.x, p0.y))
        points.append((p1.x, p1.y))
        if prim.kind is PrimitiveKind.BEZIER:
            points.extend(_bezier_points(p0, p1, config.bezier_epsilon))

    if not points and vertices:
        return as_points([(v.x, v.y) for v in vertices])
    return as_points(points)


def _bezier_points(p0: Vertex, p1: Vertex, eps: float) -> list[tuple[float, float]]:
    c0 = p0.out_control
    c1 = p1.in_control
    points = [cp for cp in (c0, c1) if cp is not None]
    if c0 is None or c1 is None:
        return points

    start = (p0.x, p0.y)
    end = (p1.x, p1.y)
    for t in bezier_extrema_params(start, c0, c1, end, eps):
        points.append(cubic_point(start, c0, c1, end, t))
    return points
