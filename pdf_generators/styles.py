"""Style dictionary shared by all reports"""

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle

from .document import HEADER_FILL

ALIGNMENTS = {
    'left': TA_LEFT,
    'center': TA_CENTER,
    'right': TA_RIGHT,
    'justify': TA_JUSTIFY,
}


@dataclass(frozen=True)
class StyleSpec:
    font_size: float = 10
    bold: bool = False
    alignment: str = 'left'
    color: str = '#000000'
    fill_color: Optional[str] = None
    margin: Tuple[float, float, float, float] = (0, 0, 0, 0)  # left, top, right, bottom


BASE_STYLES = {
    'mainHeader': StyleSpec(font_size=12, bold=True, alignment='center', margin=(0, 10, 0, 10)),
    'header': StyleSpec(font_size=12, bold=True, alignment='justify', margin=(0, 0, 0, 10)),
    'text': StyleSpec(font_size=12, alignment='left', margin=(0, 0, 0, 10)),
    'tableHeader': StyleSpec(font_size=11, bold=True, alignment='center', color='#FFFFFF', fill_color=HEADER_FILL),
    'tableData': StyleSpec(font_size=10, alignment='center'),
    'tableDataName': StyleSpec(font_size=8, alignment='left'),
    'statisticsTitle': StyleSpec(font_size=12, bold=True),
    'statisticsText': StyleSpec(font_size=11),
}


def build_style_dictionary(**font_sizes):
    """
    Build the read-only style dictionary for one report type

    Args:
        **font_sizes: Style key -> font size overrides (e.g. tableData=9)

    Returns:
        Mapping[str, StyleSpec]: Immutable style dictionary
    """
    styles = dict(BASE_STYLES)
    for key, size in font_sizes.items():
        if key not in styles:
            raise KeyError(f"Unknown style key: {key}")
        styles[key] = replace(styles[key], font_size=size)
    return MappingProxyType(styles)


def to_paragraph_style(name, spec: StyleSpec, font_names, alignment=None):
    """Convert a StyleSpec into a ReportLab ParagraphStyle"""
    left, top, right, bottom = spec.margin
    return ParagraphStyle(
        name,
        fontName=font_names.bold if spec.bold else font_names.normal,
        fontSize=spec.font_size,
        leading=spec.font_size * 1.25,
        textColor=colors.HexColor(spec.color),
        alignment=ALIGNMENTS[alignment or spec.alignment],
        leftIndent=left,
        rightIndent=right,
        spaceBefore=top,
        spaceAfter=bottom,
    )
