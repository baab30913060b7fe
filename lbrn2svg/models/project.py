"""LBRN2 project model: shapes, geometry and cut settings after decoding.

Every type here is an immutable value. The builder constructs them once per
document; bounds and serialization only read them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Union

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class AffineTransform:
    """2D affine map (x, y) → (a·x + c·y + e, b·x + d·y + f)."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def as_matrix(self) -> NDArray[np.float64]:
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def from_matrix(cls, m: NDArray[np.float64]) -> AffineTransform:
        return cls(
            a=float(m[0, 0]),
            b=float(m[1, 0]),
            c=float(m[0, 1]),
            d=float(m[1, 1]),
            e=float(m[0, 2]),
            f=float(m[1, 2]),
        )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)


IDENTITY = AffineTransform()


@dataclass(frozen=True)
class Vertex:
    x: float
    y: float
    # Outgoing control point (curve leaving this vertex)
    c0x: float | None = None
    c0y: float | None = None
    # Incoming control point (curve arriving at this vertex)
    c1x: float | None = None
    c1y: float | None = None

    @property
    def out_control(self) -> tuple[float, float] | None:
        if self.c0x is None or self.c0y is None:
            return None
        return (self.c0x, self.c0y)

    @property
    def in_control(self) -> tuple[float, float] | None:
        if self.c1x is None or self.c1y is None:
            return None
        return (self.c1x, self.c1y)


class PrimitiveKind(str, enum.Enum):
    LINE = "L"
    BEZIER = "B"


@dataclass(frozen=True)
class PathPrimitive:
    kind: PrimitiveKind
    start: int
    end: int


class PrimitiveMode(enum.Enum):
    # Explicit primitive records ("L0 1 B1 2 ...")
    EXPLICIT = "explicit"
    # "LineClosed": connect every vertex in order, then close
    LINE_CLOSED = "LineClosed"


class ShapeKind(str, enum.Enum):
    RECT = "Rect"
    ELLIPSE = "Ellipse"
    PATH = "Path"
    BITMAP = "Bitmap"
    GROUP = "Group"
    TEXT = "Text"


@dataclass(frozen=True)
class RectShape:
    width: float
    height: float
    corner_radius: float = 0.0
    cut_index: int = 0
    transform: AffineTransform | None = None

    kind: ClassVar[ShapeKind] = ShapeKind.RECT


@dataclass(frozen=True)
class EllipseShape:
    radius_x: float
    radius_y: float
    cut_index: int = 0
    transform: AffineTransform | None = None

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE


@dataclass(frozen=True)
class PathShape:
    vertices: tuple[Vertex, ...] = ()
    primitives: tuple[PathPrimitive, ...] = ()
    mode: PrimitiveMode = PrimitiveMode.EXPLICIT
    # Geometry reuse identifiers
    vert_id: int | None = None
    prim_id: int | None = None
    cut_index: int = 0
    transform: AffineTransform | None = None

    kind: ClassVar[ShapeKind] = ShapeKind.PATH


@dataclass(frozen=True)
class BitmapShape:
    width: float
    height: float
    # Base64 image payload
    data: str = ""
    file: str | None = None
    cut_index: int = 0
    transform: AffineTransform | None = None

    kind: ClassVar[ShapeKind] = ShapeKind.BITMAP


@dataclass(frozen=True)
class GroupShape:
    children: tuple[Shape, ...] = ()
    cut_index: int = 0
    transform: AffineTransform | None = None

    kind: ClassVar[ShapeKind] = ShapeKind.GROUP


Shape = Union[RectShape, EllipseShape, PathShape, BitmapShape, GroupShape]


@dataclass(frozen=True)
class LayerStyle:
    """A <CutSetting> reduced to what styling needs."""

    index: int
    name: str = ""
    color: str | None = None
    stroke_width: str | None = None


@dataclass(frozen=True)
class ProjectDocument:
    shapes: tuple[Shape, ...] = ()
    layers: tuple[LayerStyle, ...] = ()
    app_version: str | None = None
    format_version: str | None = None
    # Non-fatal issues found while building
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def get_layer(self, index: int) -> LayerStyle | None:
        for layer in self.layers:
            if layer.index == index:
                return layer
        return None
