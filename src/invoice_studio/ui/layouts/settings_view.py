import tkinter as tk
from tkinter import messagebox

import customtkinter as ctk

from invoice_studio.core.errors import ValidationError
from invoice_studio.core.models.business import BusinessProfile
from invoice_studio.core.models.settings import AppSettings, DisplayFlags
from invoice_studio.core.services.validation import parse_number
from invoice_studio.ui.styles import theme

_BUSINESS_FIELDS = (
    ("name", "Business name"),
    ("tax_number", "Tax number"),
    ("commercial_register", "Commercial register"),
    ("phone", "Phone"),
    ("website", "Website"),
    ("address", "Address"),
)

_FLAG_FIELDS = (
    ("show_tax", "Show tax"),
    ("show_discount", "Show discount"),
    ("show_commercial_register", "Show commercial register"),
    ("show_website", "Show website"),
    ("show_business_address", "Show business address"),
    ("show_client_address", "Show client address"),
    ("show_qr_code", "Show QR code"),
)

_LANGUAGES = {"English": "en", "Arabic": "ar"}


class SettingsView(ctk.CTkScrollableFrame):
    """
    Settings tab: business profile, logo, display flags and defaults.
    """

    def __init__(self, master: tk.Misc, controller, business: BusinessProfile, settings: AppSettings):
        super().__init__(master, fg_color="transparent")
        self._controller = controller
        self._logo: str | None = business.logo
        self.columnconfigure(1, weight=1)

        row = 0
        ctk.CTkLabel(self, text="Business", font=("Segoe UI", 12, "bold")).grid(row=row, column=0, sticky="w", padx=8, pady=(8, 4))
        self._business_vars: dict[str, tk.StringVar] = {}
        for key, label in _BUSINESS_FIELDS:
            row += 1
            var = tk.StringVar(value=getattr(business, key))
            self._business_vars[key] = var
            ctk.CTkLabel(self, text=label).grid(row=row, column=0, sticky="w", padx=8)
            entry = ctk.CTkEntry(self, textvariable=var)
            entry.grid(row=row, column=1, sticky="ew", padx=(4, 8), pady=2)
            theme.style_entry(entry, theme.PALETTE)

        row += 1
        ctk.CTkLabel(self, text="Logo").grid(row=row, column=0, sticky="w", padx=8)
        logo_frame = ctk.CTkFrame(self, fg_color="transparent")
        logo_frame.grid(row=row, column=1, sticky="w", padx=(4, 8), pady=2)
        self._logo_status = tk.StringVar(value=self._logo_text())
        ctk.CTkLabel(logo_frame, textvariable=self._logo_status).pack(side="left")
        ctk.CTkButton(logo_frame, text="Choose...", width=90, command=self._choose_logo).pack(side="left", padx=6)
        ctk.CTkButton(logo_frame, text="Remove", width=80, command=self._remove_logo).pack(side="left")

        row += 1
        ctk.CTkLabel(self, text="Display", font=("Segoe UI", 12, "bold")).grid(row=row, column=0, sticky="w", padx=8, pady=(12, 4))
        self._flag_vars: dict[str, tk.BooleanVar] = {}
        for key, label in _FLAG_FIELDS:
            row += 1
            var = tk.BooleanVar(value=getattr(settings.flags, key))
            self._flag_vars[key] = var
            ctk.CTkCheckBox(self, text=label, variable=var).grid(row=row, column=0, columnspan=2, sticky="w", padx=8, pady=2)

        row += 1
        ctk.CTkLabel(self, text="Defaults", font=("Segoe UI", 12, "bold")).grid(row=row, column=0, sticky="w", padx=8, pady=(12, 4))
        self._tax_var = tk.StringVar(value=f"{settings.default_tax_percent:g}")
        self._discount_var = tk.StringVar(value=f"{settings.default_discount_percent:g}")
        self._currency_var = tk.StringVar(value=settings.currency)
        language_name = next((name for name, code in _LANGUAGES.items() if code == settings.language), "English")
        self._language_var = tk.StringVar(value=language_name)
        for label, var in (
            ("Default tax %", self._tax_var),
            ("Default discount %", self._discount_var),
            ("Currency", self._currency_var),
        ):
            row += 1
            ctk.CTkLabel(self, text=label).grid(row=row, column=0, sticky="w", padx=8)
            entry = ctk.CTkEntry(self, textvariable=var, width=120)
            entry.grid(row=row, column=1, sticky="w", padx=(4, 8), pady=2)
            theme.style_entry(entry, theme.PALETTE)
        row += 1
        ctk.CTkLabel(self, text="Document language").grid(row=row, column=0, sticky="w", padx=8)
        combo = ctk.CTkComboBox(self, values=list(_LANGUAGES), variable=self._language_var, state="readonly", width=120)
        combo.grid(row=row, column=1, sticky="w", padx=(4, 8), pady=2)
        theme.style_combo_box(combo, theme.PALETTE)

        row += 1
        ctk.CTkButton(
            self,
            text="Save settings",
            command=self._save,
            fg_color=theme.PALETTE["accent"],
            hover_color=theme.PALETTE["accent_dim"],
            text_color="#ffffff",
        ).grid(row=row, column=0, columnspan=2, sticky="e", padx=8, pady=(12, 8))

    def _logo_text(self) -> str:
        return "Logo set" if self._logo else "No logo"

    def _choose_logo(self) -> None:
        logo = self._controller.pick_logo()
        if logo:
            self._logo = logo
            self._logo_status.set(self._logo_text())

    def _remove_logo(self) -> None:
        self._logo = None
        self._logo_status.set(self._logo_text())

    def _save(self) -> None:
        try:
            tax = parse_number(self._tax_var.get(), "settings.default_tax_percent", default=0.0)
            discount = parse_number(self._discount_var.get(), "settings.default_discount_percent", default=0.0)
        except ValidationError as exc:
            messagebox.showwarning("Settings", exc.message)
            return
        business = BusinessProfile(
            **{key: var.get().strip() for key, var in self._business_vars.items()},
            logo=self._logo,
        )
        settings = AppSettings(
            flags=DisplayFlags(**{key: var.get() for key, var in self._flag_vars.items()}),
            default_tax_percent=tax,
            default_discount_percent=discount,
            currency=self._currency_var.get().strip() or "SAR",
            language=_LANGUAGES.get(self._language_var.get(), "en"),
        )
        self._controller.save_settings(business, settings)
