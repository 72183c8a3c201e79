import tkinter as tk
from tkinter import ttk
from typing import Dict

import customtkinter as ctk

# Invoice accent follows the PDF accent colour (22, 160, 133)
THEMES: Dict[str, dict] = {
    "light": {
        "bg": "#f6f8f8",
        "surface": "#ffffff",
        "panel": "#eef3f2",
        "muted": "#52606d",
        "text": "#1f2933",
        "accent": "#16a085",
        "accent_dim": "#107f67",
        "border": "#cdd2d8",
        "highlight": "#e3f1ee",
        "danger": "#c0392b",
    },
    "dark": {
        "bg": "#101615",
        "surface": "#171f1e",
        "panel": "#1e2826",
        "muted": "#9aa5a3",
        "text": "#eef3f2",
        "accent": "#1abc9c",
        "accent_dim": "#16a085",
        "border": "#2c3a37",
        "highlight": "#22302d",
        "danger": "#e74c3c",
    },
}

ACTIVE_THEME = "light"
PALETTE = THEMES[ACTIVE_THEME]


def apply_theme(root: tk.Misc, name: str = "light") -> dict:
    """Switch appearance mode and restyle the ttk widgets CustomTkinter lacks (Treeview)."""
    global ACTIVE_THEME, PALETTE
    ACTIVE_THEME = name if name in THEMES else "light"
    PALETTE = THEMES[ACTIVE_THEME]

    ctk.set_appearance_mode("Light" if ACTIVE_THEME == "light" else "Dark")
    ctk.set_default_color_theme("green")
    root.configure(fg_color=PALETTE["bg"])  # type: ignore[call-arg]
    style_treeview(root, PALETTE)
    return PALETTE


def style_treeview(root: tk.Misc, palette: dict) -> None:
    style = ttk.Style(root)
    style.theme_use("clam")
    style.configure(
        "Treeview",
        background=palette["surface"],
        fieldbackground=palette["surface"],
        foreground=palette["text"],
        bordercolor=palette["border"],
        rowheight=28,
        font=("Segoe UI", 10),
    )
    style.map("Treeview", background=[("selected", palette["accent"])], foreground=[("selected", "#ffffff")])
    style.configure(
        "Treeview.Heading",
        background=palette["panel"],
        foreground=palette["text"],
        relief="flat",
        font=("Segoe UI", 10, "bold"),
    )
    style.map("Treeview.Heading", background=[("active", palette["highlight"])])


def style_entry(entry: ctk.CTkEntry, palette: dict) -> None:
    entry.configure(fg_color=palette["surface"], border_color=palette["border"], text_color=palette["text"])


def style_combo_box(combo: ctk.CTkComboBox, palette: dict) -> None:
    combo.configure(
        fg_color=palette["surface"],
        border_color=palette["border"],
        button_color=palette["accent"],
        button_hover_color=palette["accent_dim"],
        text_color=palette["text"],
        dropdown_fg_color=palette["surface"],
        dropdown_hover_color=palette["highlight"],
        border_width=1,
    )
