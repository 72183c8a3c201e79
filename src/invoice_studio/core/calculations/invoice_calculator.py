from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from invoice_studio.core.models.invoice import InvoiceSummary
from invoice_studio.core.models.line_item import ComputedLineItem, LineItem
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.utils.pdf.core import totals


@dataclass(frozen=True)
class InvoiceCalculation:
    items: tuple[ComputedLineItem, ...]
    summary: InvoiceSummary


def compute_line(item: LineItem, show_discount: bool, show_tax: bool) -> ComputedLineItem:
    line_subtotal = item.quantity * item.unit_price
    discount_amount = line_subtotal * (item.discount_percent / 100.0) if show_discount else 0.0
    price_after_discount = line_subtotal - discount_amount
    tax_amount = price_after_discount * (item.tax_percent / 100.0) if show_tax else 0.0
    return ComputedLineItem(
        item=item,
        line_subtotal=line_subtotal,
        discount_amount=discount_amount,
        price_after_discount=price_after_discount,
        tax_amount=tax_amount,
        total=price_after_discount + tax_amount,
    )


def compute(items: Iterable[LineItem], flags: DisplayFlags) -> tuple[list[ComputedLineItem], InvoiceSummary]:
    """
    Derive per-item amounts and the invoice summary.

    Inputs are expected to be validated already. Nothing is rounded here;
    rounding happens only when amounts are formatted for display.
    """
    computed = [compute_line(item, flags.show_discount, flags.show_tax) for item in items]
    subtotal = 0.0
    total_discount = 0.0
    total_tax = 0.0
    for line in computed:
        subtotal += line.line_subtotal
        total_discount += line.discount_amount
        total_tax += line.tax_amount
    summary = InvoiceSummary(
        subtotal=subtotal,
        total_discount=total_discount,
        total_tax=total_tax,
        # subtotal is pre-discount, so the discount is taken off here
        grand_total=subtotal - total_discount + total_tax,
    )
    return computed, summary


class InvoiceCalculator:
    """Calculator bound to one set of display flags."""

    def __init__(self, flags: DisplayFlags | None = None):
        self.flags = flags or DisplayFlags()

    def update_flags(self, flags: DisplayFlags) -> None:
        self.flags = flags

    def compute(self, items: Iterable[LineItem]) -> InvoiceCalculation:
        computed, summary = compute(items, self.flags)
        return InvoiceCalculation(items=tuple(computed), summary=summary)

    @staticmethod
    def format_currency(value: float, currency: str = "SAR") -> str:
        return totals.format_currency(value, currency)
