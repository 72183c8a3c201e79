"""
Invoice document composer.

`compose_invoice` lays the invoice out as pages of draw instructions without
touching fonts or files; `render_invoice_pdf` hands the result to the fpdf2
builder. Continuation pages repeat the table header under a caption, the
business block and title appear on the first page only, and the footer line
is drawn on every page.
"""

from __future__ import annotations

import base64
from typing import Sequence

from invoice_studio.core.models.invoice import Invoice, InvoiceSummary
from invoice_studio.core.models.line_item import ComputedLineItem
from invoice_studio.utils.pdf.core.builder import build_pdf_bytes
from invoice_studio.utils.pdf.core.drawing import _draw_text
from invoice_studio.utils.pdf.core.fonts import FontSet
from invoice_studio.utils.pdf.core.instructions import Document, Page
from invoice_studio.utils.pdf.core.labels import labels_for
from invoice_studio.utils.pdf.core.layout_common import (
    BODY_BOTTOM,
    CONTENT_W,
    FOOTER_SIZE,
    FOOTER_Y,
    LINE_HEIGHT,
    MARGIN,
    SECTION_BODY_SIZE,
    SECTION_GAP,
    SECTION_HEADER_SIZE,
    TITLE_SIZE,
    color,
)
from invoice_studio.utils.pdf.core.totals import format_currency
from invoice_studio.utils.pdf.sections.business import build_business_lines, decode_logo, render_business
from invoice_studio.utils.pdf.sections.client import build_client_lines, render_parties
from invoice_studio.utils.pdf.sections.details import build_detail_lines, format_issue_date
from invoice_studio.utils.pdf.sections.items_table import build_columns, render_items_table, table_height
from invoice_studio.utils.pdf.sections.notes import build_notes_lines
from invoice_studio.utils.pdf.sections.summary import build_summary_lines, render_summary, summary_height
from invoice_studio.utils.qr import build_qr_payload, make_qr_matrix


class _PageCursor:
    def __init__(self, document: Document):
        self.document = document
        self.page = Page()
        self.y = float(MARGIN)
        document.pages.append(self.page)

    def new_page(self) -> None:
        self.page = Page()
        self.document.pages.append(self.page)
        self.y = float(MARGIN)

    def ensure(self, height: float) -> bool:
        """Start a new page unless `height` still fits; True when a page was added."""
        if self.y + height <= BODY_BOTTOM:
            return False
        self.new_page()
        return True


def compose_invoice(
    invoice: Invoice,
    computed_items: Sequence[ComputedLineItem],
    summary: InvoiceSummary,
    include_logo: bool = True,
) -> Document:
    settings = invoice.settings
    flags = settings.flags
    rtl = settings.is_rtl
    labels = labels_for(settings.language)
    currency = settings.currency

    document = Document(title=f"{labels['title']} {invoice.id}", language=settings.language)
    cursor = _PageCursor(document)

    # Business identity
    logo = decode_logo(invoice.business.logo) if include_logo else None
    qr_matrix = None
    if flags.show_qr_code:
        qr_matrix = make_qr_matrix(
            build_qr_payload(
                invoice.business.name,
                invoice.business.tax_number,
                invoice.id,
                format_issue_date(invoice.issue_date),
                format_currency(summary.grand_total, currency),
            )
        )
    business_lines = build_business_lines(invoice.business, flags, labels)
    parts, bottom = render_business(invoice.business.name, business_lines, cursor.y, rtl, logo=logo, qr_matrix=qr_matrix)
    cursor.page.add(*parts)
    cursor.y = bottom + SECTION_GAP

    # Title
    cursor.page.add(*_draw_text([labels["title"]], MARGIN, cursor.y, CONTENT_W, TITLE_SIZE, bold=True, leading=TITLE_SIZE + 8, align="C", color=color("dark"), rtl_document=rtl))
    cursor.y += TITLE_SIZE + 8 + 4

    # Invoice details / client
    detail_lines = build_detail_lines(invoice.id, invoice.issue_date, labels)
    client_lines = build_client_lines(invoice.client, flags, labels)
    parts, bottom = render_parties(detail_lines, client_lines, cursor.y, rtl, labels)
    cursor.page.add(*parts)
    cursor.y = bottom + SECTION_GAP

    # Items table, overflowing onto continuation pages
    columns = build_columns(flags, labels, rtl)
    cursor.ensure(table_height(1))
    rows, overflow = render_items_table(computed_items, columns, cursor.y, BODY_BOTTOM, currency, rtl)
    cursor.page.add(*rows)
    cursor.y += table_height(len(rows) - 1)
    drawn = len(rows) - 1
    while overflow:
        cursor.new_page()
        caption = labels["continued"].format(invoice_no=invoice.id)
        cursor.page.add(*_draw_text([caption], MARGIN, cursor.y, CONTENT_W, SECTION_HEADER_SIZE, bold=True, leading=LINE_HEIGHT + 6, color=color("dark"), rtl_document=rtl))
        cursor.y += LINE_HEIGHT + 6
        rows, overflow = render_items_table(overflow, columns, cursor.y, BODY_BOTTOM, currency, rtl, first_index=drawn)
        cursor.page.add(*rows)
        cursor.y += table_height(len(rows) - 1)
        drawn += len(rows) - 1

    # Summary
    summary_lines = build_summary_lines(summary, flags, labels, currency)
    cursor.y += SECTION_GAP
    cursor.ensure(summary_height(summary_lines))
    parts, cursor.y = render_summary(summary_lines, cursor.y, rtl)
    cursor.page.add(*parts)

    # Notes
    notes_lines = build_notes_lines(invoice.notes)
    if notes_lines:
        cursor.y += SECTION_GAP
        cursor.ensure(LINE_HEIGHT * 2)
        cursor.page.add(*_draw_text([labels["notes"]], MARGIN, cursor.y, CONTENT_W, SECTION_HEADER_SIZE, bold=True, leading=LINE_HEIGHT, color=color("dark"), rtl_document=rtl))
        cursor.y += LINE_HEIGHT
        for line in notes_lines:
            cursor.ensure(LINE_HEIGHT)
            cursor.page.add(*_draw_text([line], MARGIN, cursor.y, CONTENT_W, SECTION_BODY_SIZE, leading=LINE_HEIGHT, color=color("muted"), rtl_document=rtl))
            cursor.y += LINE_HEIGHT

    _add_footers(document, labels, rtl)
    return document


def _add_footers(document: Document, labels: dict[str, str], rtl: bool) -> None:
    total = len(document.pages)
    for number, page in enumerate(document.pages, start=1):
        page.add(*_draw_text([labels["footer"]], MARGIN, FOOTER_Y, CONTENT_W, FOOTER_SIZE, align="C", color=color("faint"), rtl_document=rtl))
        if total > 1:
            page_label = labels["page"].format(page=number, pages=total)
            page.add(*_draw_text([page_label], MARGIN, FOOTER_Y, CONTENT_W, FOOTER_SIZE, align="R", color=color("faint"), rtl_document=rtl))


def render_invoice_pdf(
    invoice: Invoice,
    computed_items: Sequence[ComputedLineItem],
    summary: InvoiceSummary,
    include_logo: bool = True,
    fonts: FontSet | None = None,
    compress: bool = True,
) -> bytes:
    document = compose_invoice(invoice, computed_items, summary, include_logo=include_logo)
    return build_pdf_bytes(document, fonts=fonts, compress=compress)


def to_data_uri(pdf_bytes: bytes) -> str:
    return "data:application/pdf;base64," + base64.b64encode(pdf_bytes).decode("ascii")
