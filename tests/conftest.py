"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Minimal LBRN2 projects, trimmed to the elements the converter reads

RECT_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1" MaterialHeight="0" MirrorX="False" MirrorY="False">
    <Shape Type="Rect" CutIndex="0" W="10" H="10" Cr="0">
        <XForm>1 0 0 1 0 0</XForm>
    </Shape>
</LightBurnProject>'''

CIRCLE_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <CutSetting type="Cut">
        <index Value="1"/>
        <name Value="C01"/>
    </CutSetting>
    <Shape Type="Ellipse" CutIndex="1" Rx="5" Ry="5">
        <XForm>1 0 0 1 20 20</XForm>
    </Shape>
</LightBurnProject>'''

SQUARE_PATH_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <Shape Type="Path" CutIndex="0">
        <XForm>1 0 0 1 0 0</XForm>
        <VertList>V0 0V10 0V10 10V0 10</VertList>
        <PrimList>L0 1L1 2L2 3L3 0</PrimList>
    </Shape>
</LightBurnProject>'''

BEZIER_PATH_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <Shape Type="Path" CutIndex="2">
        <XForm>1 0 0 1 0 0</XForm>
        <VertList>V0 0c0x0c0y10c1x0c1y0V10 0c0x10c0y0c1x10c1y10</VertList>
        <PrimList>B0 1B1 0</PrimList>
    </Shape>
</LightBurnProject>'''

REUSE_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <Shape Type="Path" CutIndex="0" VertID="7" PrimID="3">
        <XForm>1 0 0 1 50 0</XForm>
    </Shape>
    <Shape Type="Path" CutIndex="0" VertID="0" PrimID="0">
        <XForm>1 0 0 1 0 0</XForm>
        <VertList>V0 0V10 0V10 10</VertList>
        <PrimList>LineClosed</PrimList>
    </Shape>
    <Shape Type="Path" CutIndex="1" VertID="0" PrimID="0">
        <XForm>1 0 0 1 20 0</XForm>
    </Shape>
</LightBurnProject>'''

GROUP_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <Shape Type="Group">
        <XForm>1 0 0 1 5 0</XForm>
        <Children>
            <Shape Type="Rect" CutIndex="0" W="2" H="2" Cr="0">
                <XForm>1 0 0 1 0 3</XForm>
            </Shape>
            <Shape Type="Ellipse" CutIndex="1" Rx="1" Ry="2">
                <XForm>1 0 0 1 -3 0</XForm>
            </Shape>
        </Children>
    </Shape>
    <Shape Type="Group">
        <XForm>2 0 0 2 0 0</XForm>
        <Children>
            <Shape Type="Rect" CutIndex="0" W="4" H="2" Cr="0.5">
                <XForm>1 0 0 1 10 0</XForm>
            </Shape>
        </Children>
    </Shape>
</LightBurnProject>'''

TEXT_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <Shape Type="Text" CutIndex="2" Font="Arial" Str="Hi" HasBackupPath="1">
        <XForm>1 0 0 1 3 4</XForm>
        <BackupPath Type="Path" CutIndex="2">
            <XForm>1 0 0 1 3 4</XForm>
            <VertList>V0 0V1 0V1 1</VertList>
            <PrimList>L0 1L1 2L2 0</PrimList>
        </BackupPath>
    </Shape>
    <Shape Type="Text" CutIndex="0" Font="Arial" Str="Nope">
        <XForm>1 0 0 1 0 0</XForm>
    </Shape>
</LightBurnProject>'''

EMPTY_LBRN2 = '''<?xml version="1.0" encoding="UTF-8"?>
<LightBurnProject AppVersion="1.4.00" FormatVersion="1">
    <CutSetting type="Cut">
        <index Value="0"/>
        <name Value="C00"/>
    </CutSetting>
</LightBurnProject>'''


@pytest.fixture
def rect_lbrn2() -> str:
    return RECT_LBRN2


@pytest.fixture
def square_path_lbrn2() -> str:
    return SQUARE_PATH_LBRN2


@pytest.fixture
def bezier_path_lbrn2() -> str:
    return BEZIER_PATH_LBRN2


@pytest.fixture
def group_lbrn2() -> str:
    return GROUP_LBRN2
