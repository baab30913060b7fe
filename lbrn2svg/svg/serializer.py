"""Write SVG output from a decoded LBRN2 project."""

from __future__ import annotations

import logging
from dataclasses import replace
from xml.sax.saxutils import quoteattr

from lbrn2svg.engine.bounds import document_bounds
from lbrn2svg.engine.config import DEFAULT_CONFIG, ConverterConfig
from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.engine.transform import compose, to_svg_group_matrix, to_svg_matrix
from lbrn2svg.models.project import (
    BitmapShape,
    EllipseShape,
    GroupShape,
    LayerStyle,
    PathShape,
    ProjectDocument,
    RectShape,
    Shape,
)
from lbrn2svg.svg.path_data import path_data
from lbrn2svg.svg.styles import style_attribute

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Base64 prefixes of common raster formats
_IMAGE_SIGNATURES = (
    ("iVBOR", "image/png"),
    ("/9j/", "image/jpeg"),
    ("R0lG", "image/gif"),
    ("Qk", "image/bmp"),
)


def empty_svg(config: ConverterConfig = DEFAULT_CONFIG) -> str:
    size = config.empty_canvas_size
    return (
        f'<svg xmlns="{SVG_NS}" width="{size}mm" height="{size}mm" '
        f'viewBox="0 0 {size} {size}"><text>No shapes found</text></svg>'
    )


def render_svg(
    document: ProjectDocument,
    config: ConverterConfig | None = None,
    diagnostics: Diagnostics | None = None,
) -> str:
    """Generate SVG markup for every shape in the document.

    Builder warnings carried on the document are copied into ``diagnostics``
    ahead of the ones raised while rendering.
    """
    config = config or DEFAULT_CONFIG
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    diagnostics.extend(document.warnings)

    if not document.shapes:
        logger.info("No shapes in project, writing placeholder SVG")
        return empty_svg(config)

    before = diagnostics.count
    elements: list[str] = []
    for shape in document.shapes:
        el = _shape_element(shape, document.layers, config, diagnostics)
        if el:
            elements.append(el)

    bounds = document_bounds(document.shapes, diagnostics, config)
    if bounds is None or not bounds.is_finite:
        min_x, min_y, max_x, max_y = config.fallback_viewbox
    else:
        min_x, min_y, max_x, max_y = bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y
    w = max_x - min_x
    h = max_y - min_y
    fmt = config.fmt

    if diagnostics.count > before:
        logger.warning("SVG conversion warnings: %d", diagnostics.count - before)

    lines = [
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>',
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}"'
        f' width="{fmt(w)}mm" height="{fmt(h)}mm"'
        f' viewBox="{fmt(min_x)} {fmt(min_y)} {fmt(w)} {fmt(h)}">',
    ]
    for el in elements:
        lines.append(_indent(el, "    "))
    lines.append("</svg>")

    logger.info("Rendered SVG: %d elements, %s×%s mm", len(elements), fmt(w), fmt(h))
    return "\n".join(lines)


def _indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def _shape_element(
    shape: Shape,
    layers: tuple[LayerStyle, ...],
    config: ConverterConfig,
    diagnostics: Diagnostics,
) -> str:
    if shape.transform is None:
        diagnostics.warn(f"Shape missing parsed XForm, skipping: {shape.kind.value}")
        return ""

    fmt = config.fmt
    transform = to_svg_matrix(shape.transform, config)
    style = style_attribute(shape.cut_index, layers, config)

    if isinstance(shape, RectShape):
        el = (
            f'<rect x="{fmt(-shape.width / 2)}" y="{fmt(-shape.height / 2)}"'
            f' width="{fmt(shape.width)}" height="{fmt(shape.height)}"'
        )
        if shape.corner_radius > 0:
            el += f' rx="{fmt(shape.corner_radius)}" ry="{fmt(shape.corner_radius)}"'
        return el + f' style="{style}" transform="{transform}"/>'

    if isinstance(shape, EllipseShape):
        if shape.radius_x == shape.radius_y:
            return (
                f'<circle cx="0" cy="0" r="{fmt(shape.radius_x)}"'
                f' style="{style}" transform="{transform}"/>'
            )
        return (
            f'<ellipse cx="0" cy="0" rx="{fmt(shape.radius_x)}" ry="{fmt(shape.radius_y)}"'
            f' style="{style}" transform="{transform}"/>'
        )

    if isinstance(shape, PathShape):
        d = path_data(shape, diagnostics, config)
        if not d:
            diagnostics.warn(
                f"Path shape with no valid primitives (VertID={shape.vert_id}, PrimID={shape.prim_id})"
            )
            return ""
        return f'<path d="{d}" style="{style}" transform="{transform}"/>'

    if isinstance(shape, BitmapShape):
        return _bitmap_element(shape, style, transform, config, diagnostics)

    if isinstance(shape, GroupShape):
        return _group_element(shape, layers, config, diagnostics)

    diagnostics.warn(f"Unsupported shape type: {type(shape).__name__}")
    return ""


def _group_element(
    group: GroupShape,
    layers: tuple[LayerStyle, ...],
    config: ConverterConfig,
    diagnostics: Diagnostics,
) -> str:
    if not group.children:
        diagnostics.warn("Group shape with no children")
        return ""

    # A single child absorbs the group's transform instead of being wrapped
    if len(group.children) == 1:
        child = group.children[0]
        if child.transform is not None:
            flattened = replace(child, transform=compose(group.transform, child.transform))
        else:
            flattened = replace(child, transform=group.transform)
        return _shape_element(flattened, layers, config, diagnostics)

    parts = [_shape_element(child, layers, config, diagnostics) for child in group.children]
    body = "\n".join(_indent(p, "    ") for p in parts if p)
    return f'<g transform="{to_svg_group_matrix(group.transform, config)}">\n{body}\n</g>'


def image_mime_type(data: str) -> str:
    for prefix, mime in _IMAGE_SIGNATURES:
        if data.startswith(prefix):
            return mime
    return "image/png"


def _bitmap_element(
    bitmap: BitmapShape,
    style: str,
    transform: str,
    config: ConverterConfig,
    diagnostics: Diagnostics,
) -> str:
    if not bitmap.data:
        diagnostics.warn(f"Bitmap shape without image data, skipping: {bitmap.file or 'unnamed'}")
        return ""
    fmt = config.fmt
    href = quoteattr(f"data:{image_mime_type(bitmap.data)};base64,{bitmap.data}")
    # scale(1,-1) keeps the raster upright under the y-flipping matrix
    return (
        f'<image x="{fmt(-bitmap.width / 2)}" y="{fmt(-bitmap.height / 2)}"'
        f' width="{fmt(bitmap.width)}" height="{fmt(bitmap.height)}"'
        f' preserveAspectRatio="none" xlink:href={href}'
        f' style="{style}" transform="{transform} scale(1,-1)"/>'
    )
