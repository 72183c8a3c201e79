import tkinter as tk
import customtkinter as ctk

from invoice_studio.core.models.business import ClientDetails
from invoice_studio.ui.styles import theme


class ClientForm(ctk.CTkFrame):
    """
    Client block of the create view with bound StringVars.
    """

    def __init__(self, master: tk.Misc, on_change=None):
        super().__init__(master, fg_color=theme.PALETTE["panel"], corner_radius=8)
        for i in range(2):
            self.columnconfigure(i, weight=1 if i else 0)

        self.name = tk.StringVar()
        self.phone = tk.StringVar()
        self.address = tk.StringVar()
        self._on_change = on_change or (lambda: None)
        for var in (self.name, self.phone, self.address):
            var.trace_add("write", lambda *_: self._on_change())

        ctk.CTkLabel(self, text="Client", font=("Segoe UI", 12, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=8, pady=(8, 4)
        )
        self._entries = []
        rows = (("Name *", self.name), ("Phone", self.phone), ("Address", self.address))
        for row, (label, var) in enumerate(rows, start=1):
            ctk.CTkLabel(self, text=label).grid(row=row, column=0, sticky="w", padx=8)
            entry = ctk.CTkEntry(self, textvariable=var)
            entry.grid(row=row, column=1, sticky="ew", padx=(4, 8), pady=(0, 6))
            theme.style_entry(entry, theme.PALETTE)
            self._entries.append(entry)

    def data(self) -> ClientDetails:
        return ClientDetails(
            name=self.name.get().strip(),
            phone=self.phone.get().strip(),
            address=self.address.get().strip(),
        )

    def set_address_visible(self, visible: bool) -> None:
        entry = self._entries[2]
        entry.configure(state="normal" if visible else "disabled")

    def reset(self) -> None:
        self.name.set("")
        self.phone.set("")
        self.address.set("")
