from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from invoice_studio.core.models.invoice import InvoiceSummary
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.utils.pdf.core.drawing import _draw_rule, _draw_text, mirror_x
from invoice_studio.utils.pdf.core.instructions import Instruction
from invoice_studio.utils.pdf.core.layout_common import (
    LINE_HEIGHT,
    MARGIN,
    PAGE_W,
    SECTION_BODY_SIZE,
    SUMMARY_WIDTH,
    color,
)
from invoice_studio.utils.pdf.core.totals import format_currency

GRAND_TOTAL_SIZE = 12
GRAND_TOTAL_HEIGHT = 22


@dataclass(frozen=True)
class SummaryLine:
    label: str
    value: str
    emphasized: bool = False


def build_summary_lines(summary: InvoiceSummary, flags: DisplayFlags, labels: dict[str, str], currency: str) -> list[SummaryLine]:
    lines = [SummaryLine(labels["subtotal"], format_currency(summary.subtotal, currency))]
    if flags.show_discount:
        lines.append(SummaryLine(labels["total_discount"], format_currency(summary.total_discount, currency)))
    if flags.show_tax:
        lines.append(SummaryLine(labels["total_tax"], format_currency(summary.total_tax, currency)))
    lines.append(SummaryLine(labels["grand_total"], format_currency(summary.grand_total, currency), emphasized=True))
    return lines


def summary_height(lines: Sequence[SummaryLine]) -> float:
    plain = sum(1 for line in lines if not line.emphasized)
    emphasized = len(lines) - plain
    return plain * LINE_HEIGHT + emphasized * (GRAND_TOTAL_HEIGHT + 6)


def render_summary(lines: Sequence[SummaryLine], y: float, rtl: bool) -> tuple[list[Instruction], float]:
    """Summary block on the trailing side of the page; grand total set apart by a rule."""
    right = PAGE_W - MARGIN
    x = mirror_x(right - SUMMARY_WIDTH, SUMMARY_WIDTH, MARGIN, right, rtl)
    parts: list[Instruction] = []
    for line in lines:
        if line.emphasized:
            parts.append(_draw_rule(x, y + 3, x + SUMMARY_WIDTH, width=0.8, color=color("accent_dark")))
            y += 6
            size, leading, tone = GRAND_TOTAL_SIZE, GRAND_TOTAL_HEIGHT, color("accent_dark")
        else:
            size, leading, tone = SECTION_BODY_SIZE, LINE_HEIGHT, color("text")
        label_runs = _draw_text([line.label], x, y, SUMMARY_WIDTH, size, bold=line.emphasized, leading=leading, align="L", color=tone, rtl_document=rtl)
        value_runs = _draw_text([line.value], x, y, SUMMARY_WIDTH, size, bold=line.emphasized, leading=leading, align="R", color=tone, rtl_document=rtl)
        parts.extend(label_runs)
        parts.extend(value_runs)
        y += leading
    return parts, y
