from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from invoice_studio.core.models.line_item import ComputedLineItem
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.utils.pdf.core.drawing import run_align
from invoice_studio.utils.pdf.core.instructions import TableRow
from invoice_studio.utils.pdf.core.layout_common import (
    CONTENT_W,
    MARGIN,
    TABLE_FONT_SIZE,
    TABLE_HEADER_HEIGHT,
    TABLE_ROW_HEIGHT,
    color,
)
from invoice_studio.utils.pdf.core.totals import format_currency, format_percent, format_quantity


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    width: float
    align: str


# key, label key, width (0 = takes the remaining width), alignment
_COLUMN_SPECS = [
    ("name", "col_item", 0, "L"),
    ("quantity", "col_qty", 40, "C"),
    ("unit_price", "col_unit_price", 78, "R"),
    ("discount_percent", "col_discount", 58, "C"),
    ("tax_percent", "col_tax", 48, "C"),
    ("tax_amount", "col_tax_amount", 74, "R"),
    ("total", "col_total", 84, "R"),
]


def build_columns(flags: DisplayFlags, labels: dict[str, str], rtl: bool = False) -> list[Column]:
    """
    Visible table columns, left to right on the page.
    Discount and tax columns only exist when their flag is on; RTL documents
    run the columns right to left.
    """
    hidden: set[str] = set()
    if not flags.show_discount:
        hidden.add("discount_percent")
    if not flags.show_tax:
        hidden.update({"tax_percent", "tax_amount"})
    specs = [spec for spec in _COLUMN_SPECS if spec[0] not in hidden]
    fixed = sum(width for _, _, width, _ in specs)
    columns = [Column(key, labels[label], float(width or CONTENT_W - fixed), align) for key, label, width, align in specs]
    if rtl:
        columns.reverse()
    return columns


def item_cells(line: ComputedLineItem, currency: str) -> dict[str, str]:
    return {
        "name": line.name,
        "quantity": format_quantity(line.quantity),
        "unit_price": format_currency(line.unit_price, currency),
        "discount_percent": format_percent(line.discount_percent),
        "tax_percent": format_percent(line.tax_percent),
        "tax_amount": format_currency(line.tax_amount, currency),
        "total": format_currency(line.total, currency),
    }


def _fit(text: str, width: float) -> str:
    max_chars = max(4, int(width / (TABLE_FONT_SIZE * 0.5)))
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 3].rstrip() + "..."


def render_table_header(columns: Sequence[Column], y: float, rtl: bool) -> TableRow:
    return TableRow(
        x=MARGIN,
        y=y,
        widths=tuple(c.width for c in columns),
        cells=tuple(c.label for c in columns),
        aligns=tuple("C" for _ in columns),
        height=TABLE_HEADER_HEIGHT,
        size=TABLE_FONT_SIZE,
        bold=True,
        fill=color("accent"),
        text_color=color("white"),
        border=color("accent"),
    )


def render_item_row(columns: Sequence[Column], line: ComputedLineItem, y: float, index: int, currency: str, rtl: bool) -> TableRow:
    values = item_cells(line, currency)
    cells: list[str] = []
    aligns: list[str] = []
    for column in columns:
        text = values[column.key]
        if column.key == "name":
            text = _fit(text, column.width)
            aligns.append(run_align(text, rtl, column.align))
        else:
            aligns.append(column.align)
        cells.append(text)
    return TableRow(
        x=MARGIN,
        y=y,
        widths=tuple(c.width for c in columns),
        cells=tuple(cells),
        aligns=tuple(aligns),
        height=TABLE_ROW_HEIGHT,
        size=TABLE_FONT_SIZE,
        fill=color("row_alt") if index % 2 == 0 else None,
        text_color=color("text"),
        border=color("border"),
    )


def render_items_table(
    items: Sequence[ComputedLineItem],
    columns: Sequence[Column],
    start_y: float,
    max_y: float,
    currency: str,
    rtl: bool,
    first_index: int = 0,
) -> tuple[list[TableRow], list[ComputedLineItem]]:
    """
    Render the header plus as many rows as fit above `max_y`.
    Returns (rows, overflow_items); overflow goes on the next page.
    """
    rows = [render_table_header(columns, start_y, rtl)]
    row_y = start_y + TABLE_HEADER_HEIGHT
    available_rows = max(1, int((max_y - row_y) // TABLE_ROW_HEIGHT))
    items_list = list(items)
    overflow = items_list[available_rows:]
    for offset, line in enumerate(items_list[:available_rows]):
        rows.append(render_item_row(columns, line, row_y, first_index + offset, currency, rtl))
        row_y += TABLE_ROW_HEIGHT
    return rows, overflow


def table_height(row_count: int) -> float:
    return TABLE_HEADER_HEIGHT + TABLE_ROW_HEIGHT * row_count
