import tkinter as tk
from typing import Callable, List

import customtkinter as ctk

from invoice_studio.core.models.line_item import LineItem
from invoice_studio.core.services.validation import parse_number
from invoice_studio.ui.styles import theme

_HEADERS = ("Item", "Qty", "Unit price", "Discount %", "Tax %", "")
_NUMBER_WIDTH = 90


class _ItemRow:
    def __init__(self, master: tk.Misc, item: LineItem, on_change: Callable[[], None], on_remove: Callable[["_ItemRow"], None]):
        self.name = tk.StringVar(value=item.name)
        self.quantity = tk.StringVar(value=f"{item.quantity:g}")
        self.unit_price = tk.StringVar(value=f"{item.unit_price:g}")
        self.discount = tk.StringVar(value=f"{item.discount_percent:g}")
        self.tax = tk.StringVar(value=f"{item.tax_percent:g}")
        for var in (self.name, self.quantity, self.unit_price, self.discount, self.tax):
            var.trace_add("write", lambda *_: on_change())

        self.entries = [ctk.CTkEntry(master, textvariable=self.name)]
        for var in (self.quantity, self.unit_price, self.discount, self.tax):
            self.entries.append(ctk.CTkEntry(master, textvariable=var, width=_NUMBER_WIDTH, justify="right"))
        for entry in self.entries:
            theme.style_entry(entry, theme.PALETTE)
        self.remove_btn = ctk.CTkButton(
            master,
            text="x",
            width=28,
            fg_color=theme.PALETTE["danger"],
            command=lambda: on_remove(self),
        )

    def reset(self, item: LineItem) -> None:
        self.name.set(item.name)
        self.quantity.set(f"{item.quantity:g}")
        self.unit_price.set(f"{item.unit_price:g}")
        self.discount.set(f"{item.discount_percent:g}")
        self.tax.set(f"{item.tax_percent:g}")

    def grid(self, row: int) -> None:
        for col, entry in enumerate(self.entries):
            entry.grid(row=row, column=col, sticky="ew", padx=2, pady=2)
        self.remove_btn.grid(row=row, column=len(self.entries), padx=(4, 0), pady=2)

    def destroy(self) -> None:
        for widget in (*self.entries, self.remove_btn):
            widget.destroy()

    def item(self, index: int) -> LineItem:
        prefix = f"items[{index}]"
        return LineItem(
            name=self.name.get().strip(),
            quantity=parse_number(self.quantity.get(), f"{prefix}.quantity", default=0.0),
            unit_price=parse_number(self.unit_price.get(), f"{prefix}.unit_price", default=0.0),
            discount_percent=parse_number(self.discount.get(), f"{prefix}.discount_percent", default=0.0),
            tax_percent=parse_number(self.tax.get(), f"{prefix}.tax_percent", default=0.0),
        )

    def set_enabled(self, col: int, enabled: bool) -> None:
        self.entries[col].configure(state="normal" if enabled else "disabled")


class LineItemRows(ctk.CTkScrollableFrame):
    """
    Editable line items, one row of entries per item.
    `items()` raises ValidationError for unparseable numbers.
    """

    def __init__(self, master: tk.Misc, new_item: Callable[[], LineItem], on_change: Callable[[], None]):
        super().__init__(master, fg_color=theme.PALETTE["panel"], corner_radius=8, height=220)
        self._new_item = new_item
        self._on_change = on_change
        self._rows: List[_ItemRow] = []
        self._show_discount = True
        self._show_tax = True
        self.columnconfigure(0, weight=1)
        for col, text in enumerate(_HEADERS):
            ctk.CTkLabel(self, text=text, font=("Segoe UI", 10, "bold")).grid(row=0, column=col, sticky="w", padx=2)

    def add_row(self, item: LineItem | None = None) -> None:
        row = _ItemRow(self, item or self._new_item(), self._on_change, self._remove_row)
        self._rows.append(row)
        row.grid(len(self._rows))
        self._apply_flags(row)
        self._on_change()

    @staticmethod
    def _resets_on_remove(row_count: int) -> bool:
        """The form always keeps one row; removing the last one blanks it instead."""
        return row_count <= 1

    def _remove_row(self, row: _ItemRow) -> None:
        if self._resets_on_remove(len(self._rows)):
            row.reset(self._new_item())
            return
        self._rows.remove(row)
        row.destroy()
        for index, remaining in enumerate(self._rows, start=1):
            remaining.grid(index)
        self._on_change()

    def clear(self) -> None:
        for row in self._rows:
            row.destroy()
        self._rows = []
        self._on_change()

    def items(self) -> list[LineItem]:
        return [row.item(index) for index, row in enumerate(self._rows)]

    def set_flags(self, show_discount: bool, show_tax: bool) -> None:
        self._show_discount = show_discount
        self._show_tax = show_tax
        for row in self._rows:
            self._apply_flags(row)

    def _apply_flags(self, row: _ItemRow) -> None:
        row.set_enabled(3, self._show_discount)
        row.set_enabled(4, self._show_tax)
