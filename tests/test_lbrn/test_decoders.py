"""Tests for the XForm / VertList / PrimList decoders."""

import pytest

from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.lbrn.decoders import (
    PrimToken,
    parse_control_points,
    parse_prim_list,
    parse_vert_list,
    parse_xform,
    tokenize_prim_list,
)
from lbrn2svg.models.project import (
    IDENTITY,
    AffineTransform,
    PathPrimitive,
    PrimitiveKind,
    PrimitiveMode,
    Vertex,
)


def test_xform_six_numbers():
    assert parse_xform("1 0 0 1 5.5 -3") == AffineTransform(1, 0, 0, 1, 5.5, -3)


def test_xform_extra_whitespace():
    assert parse_xform("  2\t0 0\n2 1e1 0 ") == AffineTransform(2, 0, 0, 2, 10, 0)


@pytest.mark.parametrize("text", ["", "1 0 0 1", "1 0 0 1 0 0 0", "1 0 0 1 0 x", "1 0 0 1 nan 0"])
def test_xform_malformed_falls_back_to_identity(text):
    diag = Diagnostics()
    assert parse_xform(text, diag) == IDENTITY
    assert diag.count == 1
    assert "identity" in diag.warnings[0]


def test_vertex_without_control_points():
    verts = parse_vert_list("V1 2")
    assert verts == [Vertex(x=1, y=2)]
    assert verts[0].out_control is None
    assert verts[0].in_control is None


def test_vertex_with_all_control_points():
    (v,) = parse_vert_list("V0 0c0x1c0y1c1x2c1y2")
    assert (v.x, v.y) == (0, 0)
    assert (v.c0x, v.c0y, v.c1x, v.c1y) == (1, 1, 2, 2)
    assert v.out_control == (1, 1)
    assert v.in_control == (2, 2)


def test_vertex_numbers_with_sign_and_exponent():
    verts = parse_vert_list("V-1.5 +2e1c0x-1E-1c0y.5V3 4")
    assert len(verts) == 2
    assert verts[0].x == -1.5
    assert verts[0].y == 20.0
    assert verts[0].c0x == pytest.approx(-0.1)
    assert verts[0].c0y == 0.5
    assert verts[0].c1x is None
    assert verts[1] == Vertex(x=3, y=4)


def test_vertex_order_preserved():
    verts = parse_vert_list("V0 0 V10 0\nV10 10 V0 10")
    assert [(v.x, v.y) for v in verts] == [(0, 0), (10, 0), (10, 10), (0, 10)]


def test_unparseable_vertex_dropped_with_warning():
    diag = Diagnostics()
    verts = parse_vert_list("Vfoo 1V2 3", diag)
    assert verts == [Vertex(x=2, y=3)]
    assert diag.count == 1
    assert "Failed to parse vertex" in diag.warnings[0]


def test_malformed_control_suffix_yields_fewer_fields():
    diag = Diagnostics()
    (v,) = parse_vert_list("V0 0c0x1c0yabc", diag)
    assert v.c0x == 1
    assert v.c0y is None
    assert v.out_control is None
    assert diag.count == 0


def test_control_points_ignore_non_control_text():
    assert parse_control_points("") == {}
    assert parse_control_points("x1y2") == {}
    assert parse_control_points("c1y3c0x4") == {"c1y": 3.0, "c0x": 4.0}


def test_tokenize_empty():
    assert tokenize_prim_list("") == []


def test_tokenize_ignores_invalid_characters():
    assert tokenize_prim_list(" 1 2 3 !@# ") == []


def test_tokenize_truncates_to_four_args():
    assert tokenize_prim_list("L1 2 3 4 5 6") == [PrimToken(type="L", args=[1, 2, 3, 4])]


def test_tokenize_mixed_whitespace():
    assert tokenize_prim_list("L  1\t2\n3 4") == [PrimToken(type="L", args=[1, 2, 3, 4])]


def test_tokenize_adjacent_records():
    assert tokenize_prim_list("L0 1B1 2") == [
        PrimToken(type="L", args=[0, 1]),
        PrimToken(type="B", args=[1, 2]),
    ]


def test_prim_list_lines_and_beziers():
    mode, prims = parse_prim_list("L0 1B1 2")
    assert mode is PrimitiveMode.EXPLICIT
    assert prims == [
        PathPrimitive(PrimitiveKind.LINE, 0, 1),
        PathPrimitive(PrimitiveKind.BEZIER, 1, 2),
    ]


def test_prim_list_line_closed_sentinel():
    assert parse_prim_list("LineClosed") == (PrimitiveMode.LINE_CLOSED, [])
    assert parse_prim_list("  LineClosed\n") == (PrimitiveMode.LINE_CLOSED, [])


def test_prim_list_unknown_code_skipped():
    diag = Diagnostics()
    mode, prims = parse_prim_list("Q0 1L1 2", diag)
    assert mode is PrimitiveMode.EXPLICIT
    assert prims == [PathPrimitive(PrimitiveKind.LINE, 1, 2)]
    assert diag.count == 1
    assert "Unknown primitive type" in diag.warnings[0]


def test_prim_list_short_record_skipped():
    diag = Diagnostics()
    _, prims = parse_prim_list("L0B0 1", diag)
    assert prims == [PathPrimitive(PrimitiveKind.BEZIER, 0, 1)]
    assert diag.count == 1


def test_prim_list_extra_args_ignored():
    _, prims = parse_prim_list("L0 1 2 3")
    assert prims == [PathPrimitive(PrimitiveKind.LINE, 0, 1)]
