"""Path primitives → SVG path data (M/L/C/Z).

Primitives whose start differs from the previous primitive's end open a new
sub-path, so disconnected outlines in one LBRN2 path survive. Nothing here
raises: bad primitives are skipped and reported through ``diagnostics``.
"""

from __future__ import annotations

import logging

from lbrn2svg.engine.config import DEFAULT_CONFIG, ConverterConfig
from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.models.project import PathShape, PrimitiveKind, PrimitiveMode, Vertex

logger = logging.getLogger(__name__)


def path_data(
    path: PathShape,
    diagnostics: Diagnostics,
    config: ConverterConfig = DEFAULT_CONFIG,
) -> str:
    """Serialize a path's geometry. Returns "" when nothing drawable remains."""
    if not path.vertices:
        diagnostics.warn(
            f"Path {path.mode.value} (VertID={path.vert_id}, PrimID={path.prim_id}) "
            f"vertices/primitives missing/empty, skipping."
        )
        return ""

    if path.mode is PrimitiveMode.LINE_CLOSED:
        return _line_closed(path, diagnostics, config)
    return _explicit(path, diagnostics, config)


def _pt(v: Vertex, config: ConverterConfig) -> str:
    return f"{config.fmt(v.x)},{config.fmt(v.y)}"


def _line_closed(path: PathShape, diagnostics: Diagnostics, config: ConverterConfig) -> str:
    verts = path.vertices
    if verts[0] is None:
        diagnostics.warn("Path with 'LineClosed' has nullish first vertex, skipping.")
        return ""
    if len(verts) == 1:
        return f"M{_pt(verts[0], config)}Z"

    d = f"M{_pt(verts[0], config)}"
    for i, v in enumerate(verts[1:], start=1):
        if v is None:
            diagnostics.warn(
                f"Path with 'LineClosed' encountered a nullish vertex at index {i}, "
                f"stopping line generation for this path."
            )
            break
        d += f" L{_pt(v, config)}"
    return d + "Z"


def _explicit(path: PathShape, diagnostics: Diagnostics, config: ConverterConfig) -> str:
    verts = path.vertices
    n = len(verts)
    d = ""
    first_move: int | None = None
    current_end: int | None = None

    def move_if_needed(idx: int, v: Vertex) -> None:
        nonlocal d, first_move
        if first_move is None:
            d += f"M{_pt(v, config)}"
            first_move = idx
        elif current_end != idx:
            d += f" M{_pt(v, config)}"

    for prim in path.primitives:
        kind = getattr(prim.kind, "value", prim.kind)
        if prim.kind not in (PrimitiveKind.LINE, PrimitiveKind.BEZIER):
            diagnostics.warn(f"Unknown or unsupported path primitive type: {kind}")
            continue

        label = "Line" if prim.kind is PrimitiveKind.LINE else "Bezier"
        i0, i1 = prim.start, prim.end
        if i0 < 0 or i1 < 0:
            diagnostics.warn(f"Invalid indices for {label}: {i0}, {i1}")
            continue
        p0 = verts[i0] if i0 < n else None
        p1 = verts[i1] if i1 < n else None
        if p0 is None or p1 is None:
            diagnostics.warn(f"Invalid vertex index for {label} {i0} {i1}")
            continue

        move_if_needed(i0, p0)

        if prim.kind is PrimitiveKind.BEZIER:
            c0 = p0.out_control
            c1 = p1.in_control
            if c0 is None or c1 is None:
                diagnostics.warn(
                    f"Bezier primitive {i0} {i1} missing control points. "
                    f"P0: {p0}, P1: {p1}. Falling back to Line."
                )
                d += f" L{_pt(p1, config)}"
            else:
                d += (
                    f" C{config.fmt(c0[0])},{config.fmt(c0[1])}"
                    f" {config.fmt(c1[0])},{config.fmt(c1[1])}"
                    f" {_pt(p1, config)}"
                )
        else:
            d += f" L{_pt(p1, config)}"
        current_end = i1

    if first_move is not None and current_end == first_move and d:
        d += "Z"
    return d
