import customtkinter as ctk

from invoice_studio.core import config
from invoice_studio.core.models.business import BusinessProfile
from invoice_studio.core.models.settings import AppSettings
from invoice_studio.core.services.archive import InvoiceArchive
from invoice_studio.ui.controllers.invoice_controller import InvoiceController
from invoice_studio.ui.layouts.archive_view import ArchiveView
from invoice_studio.ui.layouts.create_view import CreateView
from invoice_studio.ui.layouts.settings_view import SettingsView
from invoice_studio.ui.styles import theme
from invoice_studio.utils.invoice_number import FileSequence


class MainWindow(ctk.CTk):
    def __init__(self, business: BusinessProfile, settings: AppSettings):
        super().__init__()
        self._palette = theme.apply_theme(self, "light")
        self.title("Invoice Studio")
        screen_w, screen_h = self.winfo_screenwidth(), self.winfo_screenheight()
        min_w, min_h = min(900, screen_w), min(640, screen_h)
        self.geometry(f"{min_w}x{min_h}")
        self.minsize(min_w, min_h)

        self.business = business
        self.settings = settings
        self.archive = InvoiceArchive(config.archive_dir())
        self.sequence = FileSequence(config.counter_path(), floor=self.archive.highest_sequence)
        self._controller = InvoiceController(self)

        tabs = ctk.CTkTabview(self, segmented_button_selected_color=self._palette["accent"])
        tabs.pack(fill="both", expand=True, padx=8, pady=8)
        create_tab = tabs.add("Create invoice")
        archive_tab = tabs.add("Archive")
        settings_tab = tabs.add("Settings")

        self.create_view = CreateView(create_tab, self._controller, settings)
        self.create_view.pack(fill="both", expand=True)
        self.archive_view = ArchiveView(archive_tab, self._controller, currency_provider=lambda: self.settings.currency)
        self.archive_view.pack(fill="both", expand=True)
        self.settings_view = SettingsView(settings_tab, self._controller, business, settings)
        self.settings_view.pack(fill="both", expand=True)

        self.archive_view.refresh()
        self._controller.update_summary()
