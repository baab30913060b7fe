"""LBRN2 parser: XML text → ProjectDocument.

Resolves shape-type specific fields, geometry reuse by (VertID, PrimID),
Text → backup-path substitution and group recursion. Shapes that cannot be
rendered are dropped with a warning; only malformed XML or a missing
<LightBurnProject> root raise.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from lbrn2svg.engine.context import Diagnostics, GeometryCache, PrimitiveData
from lbrn2svg.lbrn.decoders import parse_prim_list, parse_vert_list, parse_xform
from lbrn2svg.models.project import (
    IDENTITY,
    AffineTransform,
    BitmapShape,
    EllipseShape,
    GroupShape,
    LayerStyle,
    PathShape,
    PrimitiveMode,
    ProjectDocument,
    RectShape,
    Shape,
    ShapeKind,
)

logger = logging.getLogger(__name__)

ROOT_TAG = "LightBurnProject"


class ProjectParseError(ValueError):
    """The input cannot be read as an LBRN2 project at all."""


def parse_project(xml_text: str) -> ProjectDocument:
    """Parse LBRN2 XML into a ProjectDocument."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ProjectParseError(f"Invalid XML structure for LBRN2 file: {e}") from e

    if root.tag != ROOT_TAG:
        raise ProjectParseError(f"Root <{ROOT_TAG}> element not found (got <{root.tag}>)")

    builder = _ProjectBuilder()
    layers = tuple(builder.layer(el) for el in root.findall("CutSetting"))
    layers = tuple(layer for layer in layers if layer is not None)

    shapes: list[Shape] = []
    for el in root.findall("Shape"):
        shape = builder.shape(el)
        if shape is not None:
            shapes.append(shape)

    logger.info(
        "Parsed LBRN2: %d shapes, %d cut settings, %d warnings",
        len(shapes),
        len(layers),
        builder.diagnostics.count,
    )
    return ProjectDocument(
        shapes=tuple(shapes),
        layers=layers,
        app_version=root.get("AppVersion"),
        format_version=root.get("FormatVersion"),
        warnings=tuple(builder.diagnostics.warnings),
    )


# ── Field access ───────────────────────────────────────────────────────────


def _field(el: ET.Element, name: str) -> str | None:
    """Read a field stored either as an attribute, as <name Value="..."/>, or as <name>text</name>."""
    value = el.get(name)
    if value is not None:
        return value
    child = el.find(name)
    if child is None:
        return None
    if child.get("Value") is not None:
        return child.get("Value")
    return child.text or ""


def _describe(el: ET.Element) -> str:
    attrs = " ".join(f'{k}="{v}"' for k, v in el.attrib.items())
    return f"<{el.tag} {attrs}>" if attrs else f"<{el.tag}>"


@dataclass
class _RawPath:
    """Path fields pulled from a <Shape Type="Path"> or a Text's <BackupPath>."""

    cut_index: int
    xform_text: str | None
    vert_list: str | None
    prim_list: str | None
    vert_id: int | None
    prim_id: int | None


class _ProjectBuilder:
    def __init__(self) -> None:
        self.diagnostics = Diagnostics()
        self.cache = GeometryCache()

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.diagnostics.warn(message)

    # -- scalar helpers --

    def _float(self, el: ET.Element, name: str, default: float = 0.0) -> float:
        raw = _field(el, name)
        if raw is None or raw.strip() == "":
            return default
        try:
            return float(raw)
        except ValueError:
            self.warn(f"Invalid {name}={raw!r} on {_describe(el)}, using {default}")
            return default

    def _int(self, el: ET.Element, name: str, default: int | None = 0) -> int | None:
        raw = _field(el, name)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(float(raw))
        except (ValueError, OverflowError):
            self.warn(f"Invalid {name}={raw!r} on {_describe(el)}, using {default}")
            return default

    def _xform(self, xform_text: str | None) -> AffineTransform | None:
        if xform_text is None:
            return None
        return parse_xform(xform_text, self.diagnostics)

    # -- cut settings --

    def layer(self, el: ET.Element) -> LayerStyle | None:
        index = self._int(el, "index", default=None)
        if index is None:
            self.warn(f"CutSetting without index, skipping: {_describe(el)}")
            return None
        return LayerStyle(
            index=index,
            name=_field(el, "name") or "",
            color=_field(el, "color") or None,
            stroke_width=_field(el, "strokeWidth") or None,
        )

    # -- shapes --

    def shape(self, el: ET.Element) -> Shape | None:
        shape_type = el.get("Type", "")

        if shape_type == ShapeKind.TEXT.value:
            return self._text(el)
        if shape_type == ShapeKind.PATH.value:
            return self._path(self._raw_path(el))
        if shape_type == ShapeKind.GROUP.value:
            return self._group(el)

        transform = self._xform(_field(el, "XForm"))
        cut_index = self._int(el, "CutIndex")

        if shape_type == ShapeKind.RECT.value:
            shape: Shape = RectShape(
                width=self._float(el, "W"),
                height=self._float(el, "H"),
                corner_radius=self._float(el, "Cr"),
                cut_index=cut_index,
                transform=transform,
            )
        elif shape_type == ShapeKind.ELLIPSE.value:
            shape = EllipseShape(
                radius_x=self._float(el, "Rx"),
                radius_y=self._float(el, "Ry"),
                cut_index=cut_index,
                transform=transform,
            )
        elif shape_type == ShapeKind.BITMAP.value:
            shape = BitmapShape(
                width=self._float(el, "W"),
                height=self._float(el, "H"),
                data=(_field(el, "Data") or "").strip(),
                file=_field(el, "File"),
                cut_index=cut_index,
                transform=transform,
            )
        else:
            self.warn(f"Unsupported shape type {shape_type!r}, skipping: {_describe(el)}")
            return None

        if transform is None:
            self.warn(f"Shape type {shape_type} is missing XForm, skipping: {_describe(el)}")
            return None
        return shape

    def _raw_path(self, el: ET.Element, fallback: ET.Element | None = None) -> _RawPath:
        cut_index = self._int(el, "CutIndex", default=None)
        xform_text = _field(el, "XForm")
        if fallback is not None:
            if cut_index is None:
                cut_index = self._int(fallback, "CutIndex")
            if xform_text is None:
                xform_text = _field(fallback, "XForm")
        return _RawPath(
            cut_index=cut_index or 0,
            xform_text=xform_text,
            vert_list=_field(el, "VertList"),
            prim_list=_field(el, "PrimList"),
            vert_id=self._int(el, "VertID", default=None),
            prim_id=self._int(el, "PrimID", default=None),
        )

    def _text(self, el: ET.Element) -> Shape | None:
        backup = el.find("BackupPath")
        if el.get("HasBackupPath") == "1" and backup is not None:
            payload = backup.find("Shape")
            if payload is None:
                payload = backup
            if payload.get("Type") == ShapeKind.PATH.value:
                logger.debug("Substituting backup path for text shape %s", _describe(el))
                return self._path(self._raw_path(payload, fallback=el))
        self.warn(f"Text shape without a backup path, skipping: {_describe(el)}")
        return None

    def _path(self, raw: _RawPath) -> PathShape | None:
        vertices, prims = self._resolve_geometry(raw)

        if not vertices:
            self.warn(
                f"Path shape has no vertices after resolution, skipping "
                f"(VertID={raw.vert_id}, PrimID={raw.prim_id})"
            )
            return None

        transform = self._xform(raw.xform_text)
        if transform is None:
            self.warn(
                f"Shape type Path is missing XForm, skipping (VertID={raw.vert_id}, PrimID={raw.prim_id})"
            )
            return None

        return PathShape(
            vertices=vertices,
            primitives=prims.primitives,
            mode=prims.mode,
            vert_id=raw.vert_id,
            prim_id=raw.prim_id,
            cut_index=raw.cut_index,
            transform=transform,
        )

    def _resolve_geometry(self, raw: _RawPath) -> tuple[tuple, PrimitiveData]:
        vertices: tuple | None = None
        prims: PrimitiveData | None = None

        if raw.vert_list is not None:
            vertices = tuple(parse_vert_list(raw.vert_list, self.diagnostics))
            if raw.vert_id is not None:
                self.cache.store_vertices(raw.vert_id, vertices)

        if raw.prim_list is not None:
            mode, primitives = parse_prim_list(raw.prim_list, self.diagnostics)
            prims = PrimitiveData(mode=mode, primitives=tuple(primitives))
            if raw.prim_id is not None:
                self.cache.store_primitives(raw.prim_id, prims)

        if vertices is not None and prims is not None:
            self.cache.store_definition(raw.vert_id, raw.prim_id, vertices, prims)
            return vertices, prims

        definition = self.cache.lookup_definition(raw.vert_id, raw.prim_id)
        if definition is not None:
            cached_vertices, cached_prims = definition
            vertices = vertices if vertices is not None else cached_vertices
            prims = prims if prims is not None else cached_prims

        if vertices is None and raw.vert_id is not None:
            vertices = self.cache.lookup_vertices(raw.vert_id)
            if vertices is None:
                self.warn(
                    f"Vertex data for VertID={raw.vert_id} not found in cache. "
                    f"Path may be empty or invalid."
                )
        if prims is None and raw.prim_id is not None:
            prims = self.cache.lookup_primitives(raw.prim_id)
            if prims is None:
                self.warn(
                    f"Primitive data for PrimID={raw.prim_id} not found in cache. "
                    f"Path may be empty or invalid."
                )

        return (
            vertices if vertices is not None else (),
            prims if prims is not None else PrimitiveData(PrimitiveMode.EXPLICIT, ()),
        )

    def _group(self, el: ET.Element) -> GroupShape | None:
        children: list[Shape] = []
        for child_el in self._child_elements(el):
            child = self.shape(child_el)
            if child is not None:
                children.append(child)

        if not children:
            self.warn(f"Group has no renderable children, skipping: {_describe(el)}")
            return None

        transform = self._xform(_field(el, "XForm"))
        if transform is None:
            logger.debug("Group without XForm, using identity: %s", _describe(el))
            transform = IDENTITY

        return GroupShape(
            children=tuple(children),
            cut_index=self._int(el, "CutIndex"),
            transform=transform,
        )

    @staticmethod
    def _child_elements(el: ET.Element) -> list[ET.Element]:
        container = el.find("Children")
        if container is None:
            return []
        return container.findall("Shape")
