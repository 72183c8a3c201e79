from __future__ import annotations

import logging
import webbrowser
from pathlib import Path
from tkinter import filedialog, messagebox

from invoice_studio.core.calculations.invoice_calculator import InvoiceCalculator
from invoice_studio.core.errors import ArchiveError, InvoiceStudioError, ValidationError
from invoice_studio.core.models.business import BusinessProfile
from invoice_studio.core.models.settings import AppSettings
from invoice_studio.core.services.invoice import issue_invoice, new_line_item
from invoice_studio.core.services.settings import load_logo_file, save_settings

log = logging.getLogger(__name__)


class InvoiceController:
    """
    Handles the create, archive and settings actions.
    Keeps a reference to the main window so the state lives in one place.
    """

    def __init__(self, window) -> None:
        self.w = window
        self._calculator = InvoiceCalculator(window.settings.flags)

    # --- Create ---
    def new_item(self):
        return new_line_item(self.w.settings)

    def update_summary(self) -> None:
        if not hasattr(self.w, "create_view"):
            return
        try:
            items = self.w.create_view.items.items()
        except ValidationError:
            # keep the last valid totals while a number is half typed
            return
        calculation = self._calculator.compute(items)
        self.w.create_view.summary.update_values(calculation.summary, self.w.settings.flags, self.w.settings.currency)

    def issue(self) -> None:
        view = self.w.create_view
        title = "Issue invoice"
        try:
            issued = issue_invoice(
                client=view.client.data(),
                items=view.items.items(),
                notes=view.notes_text(),
                business=self.w.business,
                settings=self.w.settings,
                archive=self.w.archive,
                sequence=self.w.sequence,
            )
        except ValidationError as exc:
            messagebox.showwarning(title, f"{exc.field}: {exc.message}")
            return
        except (InvoiceStudioError, OSError) as exc:
            log.exception("Issuing invoice failed")
            messagebox.showerror(title, f"Invoice could not be created:\n{exc}")
            return

        view.reset()
        self.w.archive_view.refresh()
        if messagebox.askyesno(title, f"Invoice {issued.invoice.id} saved.\nOpen the PDF now?"):
            self.open_document(issued.invoice.id)

    # --- Archive ---
    def open_document(self, invoice_id: str) -> None:
        path = self.w.archive.document_path(invoice_id)
        if not path.exists():
            messagebox.showerror("Open invoice", f"No PDF stored for invoice {invoice_id}")
            return
        webbrowser.open(path.as_uri())

    def export_document(self, invoice_id: str) -> None:
        target = filedialog.asksaveasfilename(
            defaultextension=".pdf",
            filetypes=[("PDF", "*.pdf"), ("All files", "*.*")],
            title="Download invoice",
            initialfile=f"invoice-{invoice_id}.pdf",
        )
        if not target:
            return
        try:
            out_path = self.w.archive.export_document(invoice_id, Path(target))
        except PermissionError:
            messagebox.showerror(
                "Download invoice",
                "Export failed: the file is probably open in another program.\n"
                "Close the PDF viewer or pick another location and try again.",
            )
            return
        except ArchiveError as exc:
            messagebox.showerror("Download invoice", str(exc))
            return
        messagebox.showinfo("Download invoice", f"PDF saved:\n{out_path}")

    def delete_invoice(self, invoice_id: str) -> None:
        if not messagebox.askyesno("Delete invoice", f"Delete invoice {invoice_id}? This cannot be undone."):
            return
        try:
            self.w.archive.delete(invoice_id)
        except ArchiveError as exc:
            messagebox.showerror("Delete invoice", str(exc))
        self.w.archive_view.refresh()

    def search(self, term: str):
        try:
            return self.w.archive.search(term)
        except ArchiveError as exc:
            log.error("Archive listing failed: %s", exc)
            messagebox.showerror("Archive", str(exc))
            return []

    # --- Settings ---
    def pick_logo(self) -> str | None:
        path = filedialog.askopenfilename(
            title="Choose logo",
            filetypes=[("Images", "*.png *.jpg *.jpeg *.gif *.webp"), ("All files", "*.*")],
        )
        if not path:
            return None
        try:
            return load_logo_file(Path(path))
        except ValidationError as exc:
            messagebox.showwarning("Logo", exc.message)
            return None

    def save_settings(self, business: BusinessProfile, settings: AppSettings) -> None:
        try:
            save_settings(business, settings)
        except OSError as exc:
            log.exception("Saving settings failed")
            messagebox.showerror("Settings", f"Settings could not be saved:\n{exc}")
            return
        self.w.business = business
        self.w.settings = settings
        self._calculator.update_flags(settings.flags)
        self.w.create_view.apply_settings(settings)
        self.update_summary()
        messagebox.showinfo("Settings", "Settings saved.")
