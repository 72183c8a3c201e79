import tkinter as tk
import customtkinter as ctk

from invoice_studio.core.models.settings import AppSettings
from invoice_studio.ui.components.line_item_rows import LineItemRows
from invoice_studio.ui.components.summary_panel import SummaryPanel
from invoice_studio.ui.layouts.client_form import ClientForm
from invoice_studio.ui.styles import theme


class CreateView(ctk.CTkFrame):
    """
    Create invoice tab: client, line items, live summary, notes and the issue button.
    """

    def __init__(self, master: tk.Misc, controller, settings: AppSettings):
        super().__init__(master, fg_color="transparent")
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self.client = ClientForm(self)
        self.client.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        self.items = LineItemRows(self, new_item=controller.new_item, on_change=controller.update_summary)
        self.items.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)

        bottom = ctk.CTkFrame(self, fg_color="transparent")
        bottom.grid(row=2, column=0, sticky="ew", padx=8, pady=4)
        bottom.columnconfigure(0, weight=1)
        bottom.columnconfigure(1, weight=1)

        notes_frame = ctk.CTkFrame(bottom, fg_color=theme.PALETTE["panel"], corner_radius=8)
        notes_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 6))
        ctk.CTkLabel(notes_frame, text="Notes", font=("Segoe UI", 12, "bold")).pack(anchor="w", padx=8, pady=(8, 2))
        self._notes = ctk.CTkTextbox(notes_frame, height=110)
        self._notes.pack(fill="both", expand=True, padx=8, pady=(0, 8))

        self.summary = SummaryPanel(bottom, currency=settings.currency)
        self.summary.grid(row=0, column=1, sticky="nsew")

        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=3, column=0, sticky="ew", padx=8, pady=(4, 8))
        ctk.CTkButton(actions, text="Add item", command=self.items.add_row).pack(side="left")
        ctk.CTkButton(actions, text="Clear", command=self.reset).pack(side="left", padx=6)
        ctk.CTkButton(
            actions,
            text="Issue invoice",
            command=controller.issue,
            fg_color=theme.PALETTE["accent"],
            hover_color=theme.PALETTE["accent_dim"],
            text_color="#ffffff",
            font=("Segoe UI", 12, "bold"),
        ).pack(side="right")

        self.apply_settings(settings)
        self.items.add_row()

    def notes_text(self) -> str:
        return self._notes.get("1.0", "end").strip()

    def apply_settings(self, settings: AppSettings) -> None:
        flags = settings.flags
        self.items.set_flags(flags.show_discount, flags.show_tax)
        self.client.set_address_visible(flags.show_client_address)

    def reset(self) -> None:
        self.client.reset()
        self._notes.delete("1.0", "end")
        self.items.clear()
        self.items.add_row()
