"""Decoders for the mini-languages embedded in LBRN2 text nodes.

- XForm:    "a b c d e f"
- VertList: "V<x> <y>[c0x<n>][c0y<n>][c1x<n>][c1y<n>]V..."
- PrimList: "L<i> <j>B<i> <j>..." or the literal "LineClosed"

Control-point fields have no separator between key and number or between
consecutive pairs, so the vertex and control-point decoders scan character by
character instead of splitting.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.models.project import (
    IDENTITY,
    AffineTransform,
    PathPrimitive,
    PrimitiveKind,
    PrimitiveMode,
    Vertex,
)

logger = logging.getLogger(__name__)

LINE_CLOSED = "LineClosed"

_NUMBER_CHARS = frozenset("+-0123456789.eE")
_DIGITS = frozenset("0123456789")
_CONTROL_KEYS = ("c0x", "c0y", "c1x", "c1y")
_MAX_PRIM_ARGS = 4

_PRIMITIVE_CODES = {
    "L": PrimitiveKind.LINE,
    "B": PrimitiveKind.BEZIER,
}


@dataclass
class PrimToken:
    type: str
    args: list[int] = field(default_factory=list)


def _warn(diagnostics: Diagnostics | None, message: str) -> None:
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.warn(message)


def _parse_float(text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def _scan_number(text: str, i: int) -> tuple[str, int]:
    start = i
    while i < len(text) and text[i] in _NUMBER_CHARS:
        i += 1
    return text[start:i], i


def _skip_whitespace(text: str, i: int) -> int:
    while i < len(text) and text[i].isspace():
        i += 1
    return i


# ── XForm ──────────────────────────────────────────────────────────────────


def parse_xform(text: str, diagnostics: Diagnostics | None = None) -> AffineTransform:
    """Decode "a b c d e f". Anything else decodes to the identity with a warning."""
    parts = text.split()
    values = [_parse_float(p) for p in parts]
    if len(values) != 6 or any(v is None or math.isinf(v) for v in values):
        _warn(diagnostics, f"Invalid XForm string, using identity: {text!r}")
        return IDENTITY
    a, b, c, d, e, f = values
    return AffineTransform(a=a, b=b, c=c, d=d, e=e, f=f)


# ── VertList ───────────────────────────────────────────────────────────────


def parse_control_points(text: str) -> dict[str, float]:
    """Decode a control-point suffix such as "c0x1c0y1c1x2c1y2".

    Malformed numbers are skipped, so a damaged suffix yields fewer fields
    rather than an error.
    """
    data: dict[str, float] = {}
    if not text or not text.startswith("c"):
        return data

    i = 0
    while i < len(text):
        key = text[i : i + 3]
        if key in _CONTROL_KEYS:
            num_str, i = _scan_number(text, i + 3)
            value = _parse_float(num_str)
            if value is not None:
                data[key] = value
        else:
            i += 1
    return data


def parse_vert_list(text: str, diagnostics: Diagnostics | None = None) -> list[Vertex]:
    """Decode a VertList into vertices, in order. Records with a bad X or Y are dropped."""
    vertices: list[Vertex] = []
    i = 0
    n = len(text)

    while i < n:
        i = _skip_whitespace(text, i)
        if i >= n:
            break
        if text[i] != "V":
            i += 1
            continue

        i = _skip_whitespace(text, i + 1)
        x_str, i = _scan_number(text, i)
        i = _skip_whitespace(text, i)
        y_str, i = _scan_number(text, i)

        suffix_start = i
        while i < n and text[i] != "V":
            i += 1
        controls = parse_control_points(text[suffix_start:i].strip())

        x = _parse_float(x_str)
        y = _parse_float(y_str)
        if x is None or y is None:
            _warn(
                diagnostics,
                f'Failed to parse vertex from X: "{x_str}", Y: "{y_str}" in VertList',
            )
            continue
        vertices.append(Vertex(x=x, y=y, **controls))

    return vertices


# ── PrimList ───────────────────────────────────────────────────────────────


def tokenize_prim_list(text: str) -> list[PrimToken]:
    """Split a PrimList into letter-coded tokens with up to four integer args."""
    tokens: list[PrimToken] = []
    i = 0
    n = len(text)

    def next_int() -> int | None:
        nonlocal i
        i = _skip_whitespace(text, i)
        start = i
        while i < n and text[i] in _DIGITS:
            i += 1
        return int(text[start:i]) if i > start else None

    while i < n:
        i = _skip_whitespace(text, i)
        if i >= n:
            break
        code = text[i]
        if not code.isalpha():
            i += 1
            continue
        i += 1
        args: list[int] = []
        while len(args) < _MAX_PRIM_ARGS:
            value = next_int()
            if value is None:
                break
            args.append(value)
        tokens.append(PrimToken(type=code, args=args))

    return tokens


def is_line_closed(text: str) -> bool:
    return text.strip() == LINE_CLOSED


def parse_prim_list(
    text: str, diagnostics: Diagnostics | None = None
) -> tuple[PrimitiveMode, list[PathPrimitive]]:
    """Decode a PrimList into its mode and explicit primitives.

    "LineClosed" maps to ``PrimitiveMode.LINE_CLOSED`` with no primitives.
    Unknown codes and short records are skipped with a warning.
    """
    if is_line_closed(text):
        return PrimitiveMode.LINE_CLOSED, []

    primitives: list[PathPrimitive] = []
    for token in tokenize_prim_list(text):
        kind = _PRIMITIVE_CODES.get(token.type)
        if kind is None:
            _warn(diagnostics, f"Unknown primitive type {token.type!r} in PrimList, skipping")
            continue
        if len(token.args) < 2:
            _warn(
                diagnostics,
                f"Primitive {token.type} expects 2 indices, got {len(token.args)}, skipping",
            )
            continue
        primitives.append(PathPrimitive(kind=kind, start=token.args[0], end=token.args[1]))

    return PrimitiveMode.EXPLICIT, primitives
