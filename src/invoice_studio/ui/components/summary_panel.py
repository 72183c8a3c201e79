import tkinter as tk
import customtkinter as ctk

from invoice_studio.core.calculations.invoice_calculator import InvoiceCalculator
from invoice_studio.core.models.invoice import InvoiceSummary
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.ui.styles import theme


class SummaryPanel(ctk.CTkFrame):
    """Live totals under the line items."""

    def __init__(self, master: tk.Misc, currency: str = "SAR"):
        super().__init__(master, fg_color="transparent")
        self._currency = currency
        fmt = InvoiceCalculator.format_currency
        self._subtotal_var = tk.StringVar(value=fmt(0, currency))
        self._discount_var = tk.StringVar(value=fmt(0, currency))
        self._tax_var = tk.StringVar(value=fmt(0, currency))
        self._grand_total_var = tk.StringVar(value=fmt(0, currency))

        ctk.CTkLabel(self, text="Summary", font=("Segoe UI", 12, "bold")).grid(row=0, column=0, sticky="w", padx=8)
        ctk.CTkLabel(self, text="Subtotal").grid(row=1, column=0, sticky="w", padx=8)
        ctk.CTkLabel(self, textvariable=self._subtotal_var).grid(row=1, column=1, sticky="e", padx=8)

        self._discount_row = (
            ctk.CTkLabel(self, text="Total discount"),
            ctk.CTkLabel(self, textvariable=self._discount_var),
        )
        self._discount_row[0].grid(row=2, column=0, sticky="w", padx=8)
        self._discount_row[1].grid(row=2, column=1, sticky="e", padx=8)

        self._tax_row = (
            ctk.CTkLabel(self, text="Total tax"),
            ctk.CTkLabel(self, textvariable=self._tax_var),
        )
        self._tax_row[0].grid(row=3, column=0, sticky="w", padx=8)
        self._tax_row[1].grid(row=3, column=1, sticky="e", padx=8)

        separator = ctk.CTkFrame(self, height=2, fg_color=theme.PALETTE["border"])
        separator.grid(row=4, column=0, columnspan=2, sticky="we", pady=6, padx=8)

        ctk.CTkLabel(self, text="Grand total", font=("Segoe UI", 13, "bold")).grid(row=5, column=0, sticky="w", padx=8)
        ctk.CTkLabel(
            self, textvariable=self._grand_total_var, font=("Segoe UI", 13, "bold"), text_color=theme.PALETTE["accent_dim"]
        ).grid(row=5, column=1, sticky="e", padx=8)

        for col in range(2):
            self.columnconfigure(col, weight=1)

    def update_values(self, summary: InvoiceSummary, flags: DisplayFlags, currency: str) -> None:
        self._currency = currency
        fmt = InvoiceCalculator.format_currency
        self._subtotal_var.set(fmt(summary.subtotal, currency))
        self._discount_var.set(f"- {fmt(summary.total_discount, currency)}")
        self._tax_var.set(fmt(summary.total_tax, currency))
        self._grand_total_var.set(fmt(summary.grand_total, currency))
        _toggle_row(self._discount_row, flags.show_discount)
        _toggle_row(self._tax_row, flags.show_tax)


def _toggle_row(widgets, visible: bool) -> None:
    for widget in widgets:
        if visible:
            widget.grid()
        else:
            widget.grid_remove()
