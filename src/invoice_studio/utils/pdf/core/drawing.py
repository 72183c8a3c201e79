from __future__ import annotations

import unicodedata
from typing import Iterable, Sequence

from invoice_studio.utils.pdf.core.instructions import Box, Color, Line, TextRun

RTL_CLASSES = {"R", "AL"}


def _normalize_latin1(text: str) -> str:
    """Keep Latin-1 text for the built-in PDF fonts; other letters lose their accents or are dropped."""
    out: list[str] = []
    for ch in str(text):
        if ord(ch) < 256:
            out.append(ch)
        else:
            out.append(unicodedata.normalize("NFKD", ch).encode("latin-1", "ignore").decode("latin-1"))
    return "".join(out)


def text_direction(text: str, default: str = "ltr") -> str:
    """Direction of the first strong character (Unicode bidi class)."""
    for ch in str(text):
        bidi = unicodedata.bidirectional(ch)
        if bidi in RTL_CLASSES:
            return "rtl"
        if bidi == "L":
            return "ltr"
    return default


def is_rtl(text: str) -> bool:
    return text_direction(text) == "rtl"


def run_align(text: str, rtl_document: bool, align: str = "L") -> str:
    """
    Horizontal alignment for a run: RTL documents mirror left/right, and a run
    written in an RTL script is right-aligned even inside an LTR document.
    """
    if align == "C":
        return "C"
    if rtl_document:
        return "L" if align == "R" else "R"
    if is_rtl(text):
        return "R"
    return align


def _draw_text(
    lines: Iterable[str],
    x: float,
    y: float,
    w: float,
    size: float,
    bold: bool = False,
    leading: float | None = None,
    align: str = "L",
    color: Color = (0, 0, 0),
    rtl_document: bool = False,
) -> list[TextRun]:
    out: list[TextRun] = []
    spacing = leading or (size + 4)
    for line in lines:
        text = str(line)
        out.append(
            TextRun(
                text=text,
                x=x,
                y=y,
                w=w,
                h=spacing,
                size=size,
                bold=bold,
                align=run_align(text, rtl_document, align),
                color=color,
            )
        )
        y += spacing
    return out


def _draw_rect(x: float, y: float, w: float, h: float, stroke: Color | None = (0, 0, 0), fill: Color | None = None) -> Box:
    return Box(x=x, y=y, w=w, h=h, fill=fill, stroke=stroke)


def _draw_rule(x1: float, y: float, x2: float, width: float = 0.5, color: Color = (0, 0, 0)) -> Line:
    return Line(x1=x1, y1=y, x2=x2, y2=y, width=width, color=color)


def _draw_qr(matrix: Sequence[Sequence[bool]] | None, x: float, y: float, size: float) -> list[Box]:
    if not matrix:
        return []
    ops = []
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    for r in range(rows):
        for c in range(cols):
            if matrix[r][c]:
                ops.append(_draw_rect(x + c * size, y + r * size, size, size, stroke=None, fill=(0, 0, 0)))
    return ops


def mirror_x(x: float, w: float, page_left: float, page_right: float, rtl_document: bool) -> float:
    """Reflect a block's x position across the content area for RTL documents."""
    if not rtl_document:
        return x
    return page_left + (page_right - (x + w))
