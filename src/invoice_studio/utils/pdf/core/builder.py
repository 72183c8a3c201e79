"""
PDF builder: replays the composer's draw instructions through fpdf2.
"""

from __future__ import annotations

import io
import logging

from fpdf import FPDF
from fpdf.errors import FPDFException

from invoice_studio.core.errors import LogoError, RenderError
from invoice_studio.utils.pdf.core.drawing import _normalize_latin1
from invoice_studio.utils.pdf.core.fonts import FontSet, find_unicode_fonts, register_fonts
from invoice_studio.utils.pdf.core.instructions import Box, Document, Line, Picture, TableRow, TextRun
from invoice_studio.utils.pdf.core.layout_common import PAGE_H, PAGE_W

log = logging.getLogger(__name__)


class _Writer:
    def __init__(self, pdf: FPDF, fonts: FontSet):
        self.pdf = pdf
        self.fonts = fonts

    def text(self, value: str) -> str:
        if self.fonts.unicode:
            return value
        return _normalize_latin1(value)

    def font(self, size: float, bold: bool) -> None:
        self.pdf.set_font(self.fonts.family, "B" if bold else "", size)

    def text_run(self, run: TextRun) -> None:
        self.font(run.size, run.bold)
        self.pdf.set_text_color(*run.color)
        self.pdf.set_xy(run.x, run.y)
        self.pdf.cell(run.w, run.h, self.text(run.text), align=run.align)

    def table_row(self, row: TableRow) -> None:
        self.font(row.size, row.bold)
        self.pdf.set_text_color(*row.text_color)
        self.pdf.set_draw_color(*row.border)
        if row.fill is not None:
            self.pdf.set_fill_color(*row.fill)
        x = row.x
        for width, cell, align in zip(row.widths, row.cells, row.aligns):
            self.pdf.set_xy(x, row.y)
            self.pdf.cell(width, row.height, self.text(cell), border=1, align=align, fill=row.fill is not None)
            x += width

    def line(self, line: Line) -> None:
        self.pdf.set_draw_color(*line.color)
        self.pdf.set_line_width(line.width)
        self.pdf.line(line.x1, line.y1, line.x2, line.y2)

    def box(self, box: Box) -> None:
        if box.fill is None and box.stroke is None:
            return
        style = ""
        if box.stroke is not None:
            self.pdf.set_draw_color(*box.stroke)
            style += "D"
        if box.fill is not None:
            self.pdf.set_fill_color(*box.fill)
            style += "F"
        self.pdf.rect(box.x, box.y, box.w, box.h, style=style)

    def picture(self, picture: Picture) -> None:
        try:
            self.pdf.image(io.BytesIO(picture.data), x=picture.x, y=picture.y, w=picture.w, h=picture.h, keep_aspect_ratio=True)
        except Exception as exc:
            raise LogoError(f"Embedded image could not be drawn: {exc}") from exc


def build_pdf_bytes(document: Document, fonts: FontSet | None = None, compress: bool = True) -> bytes:
    """
    Serialize a composed document to PDF bytes.
    Page breaks were decided by the composer; auto page breaking stays off.
    """
    font_set = fonts or find_unicode_fonts()
    pdf = FPDF(unit="pt", format=(PAGE_W, PAGE_H))
    pdf.set_auto_page_break(False)
    pdf.compress = compress
    pdf.set_creator("invoice-studio")
    if document.title:
        pdf.set_title(document.title)
    pdf.set_lang(document.language)
    try:
        register_fonts(pdf, font_set)
        pdf.set_font(font_set.family, "", 10)
        if font_set.unicode:
            # HarfBuzz shaping with the Unicode bidi algorithm for RTL runs
            pdf.set_text_shaping(True)
        writer = _Writer(pdf, font_set)
        for page in document.pages:
            pdf.add_page()
            for ins in page.instructions:
                if isinstance(ins, TextRun):
                    writer.text_run(ins)
                elif isinstance(ins, TableRow):
                    writer.table_row(ins)
                elif isinstance(ins, Line):
                    writer.line(ins)
                elif isinstance(ins, Box):
                    writer.box(ins)
                elif isinstance(ins, Picture):
                    writer.picture(ins)
        return bytes(pdf.output())
    except (FPDFException, OSError, ValueError, RuntimeError) as exc:
        raise RenderError(f"PDF serialization failed: {exc}") from exc
