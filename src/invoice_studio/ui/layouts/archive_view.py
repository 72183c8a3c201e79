import tkinter as tk
from tkinter import ttk

import customtkinter as ctk

from invoice_studio.core.calculations.invoice_calculator import InvoiceCalculator
from invoice_studio.ui.styles import theme


class ArchiveView(ctk.CTkFrame):
    """
    Archive tab: searchable list of issued invoices with open/download/delete.
    """

    def __init__(self, master: tk.Misc, controller, currency_provider):
        super().__init__(master, fg_color="transparent")
        self._controller = controller
        self._currency = currency_provider
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        top = ctk.CTkFrame(self, fg_color="transparent")
        top.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        ctk.CTkLabel(top, text="Search").pack(side="left")
        self._query = tk.StringVar()
        self._query.trace_add("write", lambda *_: self.refresh())
        entry = ctk.CTkEntry(top, textvariable=self._query, placeholder_text="Invoice no., client or date")
        entry.pack(side="left", fill="x", expand=True, padx=(6, 0))
        theme.style_entry(entry, theme.PALETTE)

        container = ctk.CTkFrame(self, fg_color="transparent")
        container.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        columns = ("id", "client", "date", "total")
        tree = ttk.Treeview(container, columns=columns, show="headings", selectmode="browse")
        tree.heading("id", text="Invoice no.")
        tree.heading("client", text="Client")
        tree.heading("date", text="Date")
        tree.heading("total", text="Grand total")
        tree.column("id", width=180)
        tree.column("client", width=260)
        tree.column("date", width=100, anchor="center")
        tree.column("total", width=140, anchor="e")
        tree.pack(side="left", fill="both", expand=True)
        scrollbar = ttk.Scrollbar(container, orient="vertical", command=tree.yview)
        scrollbar.pack(side="right", fill="y")
        tree.configure(yscrollcommand=scrollbar.set)
        tree.bind("<Double-1>", lambda _e: self._with_selection(controller.open_document))
        self._tree = tree

        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        ctk.CTkButton(actions, text="Open", command=lambda: self._with_selection(controller.open_document)).pack(side="left")
        ctk.CTkButton(actions, text="Download", command=lambda: self._with_selection(controller.export_document)).pack(
            side="left", padx=6
        )
        ctk.CTkButton(
            actions,
            text="Delete",
            fg_color=theme.PALETTE["danger"],
            command=lambda: self._with_selection(controller.delete_invoice),
        ).pack(side="right")

    def refresh(self) -> None:
        self._tree.delete(*self._tree.get_children())
        currency = self._currency()
        for meta in self._controller.search(self._query.get()):
            self._tree.insert(
                "",
                "end",
                iid=meta.id,
                values=(
                    meta.id,
                    meta.client_name,
                    meta.issue_date.strftime("%d/%m/%Y"),
                    InvoiceCalculator.format_currency(meta.grand_total, currency),
                ),
            )

    def _with_selection(self, action) -> None:
        selection = self._tree.selection()
        if selection:
            action(selection[0])
