from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from invoice_studio.core.calculations.invoice_calculator import InvoiceCalculator
from invoice_studio.core.errors import LogoError
from invoice_studio.core.models.business import BusinessProfile, ClientDetails
from invoice_studio.core.models.invoice import Invoice, InvoiceSummary
from invoice_studio.core.models.line_item import ComputedLineItem, LineItem
from invoice_studio.core.models.settings import AppSettings
from invoice_studio.core.services.archive import InvoiceArchive
from invoice_studio.core.services.validation import validate_invoice_input
from invoice_studio.utils.invoice_number import SequenceGenerator, generate_invoice_id
from invoice_studio.utils.pdf.renderers.pdf_renderer import render_invoice_pdf

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedInvoice:
    invoice: Invoice
    items: list[ComputedLineItem]
    summary: InvoiceSummary
    document: bytes


def new_line_item(settings: AppSettings) -> LineItem:
    """Blank row for the create form, prefilled with the default percentages."""
    return LineItem(
        name="",
        quantity=1.0,
        unit_price=0.0,
        discount_percent=settings.default_discount_percent,
        tax_percent=settings.default_tax_percent,
    )


def build_invoice(
    invoice_id: str,
    client: ClientDetails,
    items: Iterable[LineItem],
    notes: str,
    business: BusinessProfile,
    settings: AppSettings,
    issue_date: date | None = None,
) -> Invoice:
    """
    Snapshot the invoice.
    Business profile and settings are copied so later edits do not leak into issued invoices.
    """
    return Invoice(
        id=invoice_id,
        issue_date=issue_date or date.today(),
        client=ClientDetails.from_dict(client.to_dict()),
        items=tuple(items),
        notes=notes.strip(),
        business=BusinessProfile.from_dict(business.to_dict()),
        settings=AppSettings.from_dict(settings.to_dict()),
    )


def calculate_invoice(invoice: Invoice) -> tuple[list[ComputedLineItem], InvoiceSummary]:
    calculation = InvoiceCalculator(invoice.settings.flags).compute(invoice.items)
    return list(calculation.items), calculation.summary


def render_invoice_document(invoice: Invoice, computed_items: Sequence[ComputedLineItem], summary: InvoiceSummary) -> bytes:
    try:
        return render_invoice_pdf(invoice, computed_items, summary)
    except LogoError as exc:
        log.warning("Logo for invoice %s could not be drawn (%s); rendering without it", invoice.id, exc)
        return render_invoice_pdf(invoice, computed_items, summary, include_logo=False)


def issue_invoice(
    client: ClientDetails,
    items: Sequence[LineItem],
    notes: str,
    business: BusinessProfile,
    settings: AppSettings,
    archive: InvoiceArchive,
    sequence: SequenceGenerator,
    issue_date: date | None = None,
) -> IssuedInvoice:
    """
    Validate, number, compute, render and archive a new invoice.

    Nothing is consumed when validation fails. Once numbered, a render
    failure leaves a gap in the sequence and stores nothing.
    An id that is already archived is never overwritten.
    """
    validate_invoice_input(client, items)
    issue_date = issue_date or date.today()
    invoice_id = generate_invoice_id(sequence, issue_date)
    invoice = build_invoice(invoice_id, client, items, notes, business, settings, issue_date)
    computed, summary = calculate_invoice(invoice)
    document = render_invoice_document(invoice, computed, summary)
    archive.save(invoice, summary, document, overwrite=False)
    log.info("Issued invoice %s for %s (%.2f)", invoice.id, invoice.client.name, summary.grand_total)
    return IssuedInvoice(invoice=invoice, items=computed, summary=summary, document=document)
