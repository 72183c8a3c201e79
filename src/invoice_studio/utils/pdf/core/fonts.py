"""
Font lookup for the PDF builder.

A Unicode TrueType pair is needed for Arabic, Hebrew and accented text;
without one the builder falls back to the PDF core fonts (ASCII only).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fpdf import FPDF

from invoice_studio.core import config

log = logging.getLogger(__name__)

UNICODE_FAMILY = "InvoiceSans"
CORE_FAMILY = "helvetica"

SYSTEM_CANDIDATES: list[tuple[Path, Path]] = [
    (Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"), Path("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf")),
    (Path("/usr/share/fonts/dejavu/DejaVuSans.ttf"), Path("/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf")),
    (Path("/usr/share/fonts/TTF/DejaVuSans.ttf"), Path("/usr/share/fonts/TTF/DejaVuSans-Bold.ttf")),
    (Path("/System/Library/Fonts/Supplemental/Arial.ttf"), Path("/System/Library/Fonts/Supplemental/Arial Bold.ttf")),
    (Path(r"C:\Windows\Fonts\arial.ttf"), Path(r"C:\Windows\Fonts\arialbd.ttf")),
    (Path(r"C:\Windows\Fonts\segoeui.ttf"), Path(r"C:\Windows\Fonts\segoeuib.ttf")),
]


@dataclass(frozen=True)
class FontSet:
    family: str
    regular: Path | None = None
    bold: Path | None = None

    @property
    def unicode(self) -> bool:
        return self.regular is not None

    @classmethod
    def core(cls) -> "FontSet":
        return cls(family=CORE_FAMILY)


def candidate_pairs(font_dir: Path | None = None) -> list[tuple[Path, Path]]:
    candidates: list[tuple[Path, Path]] = []
    base_dir = font_dir or config.font_dir()
    if base_dir and base_dir.is_dir():
        candidates.append((base_dir / "regular.ttf", base_dir / "bold.ttf"))
    candidates.extend(SYSTEM_CANDIDATES)
    return candidates


def find_unicode_fonts(font_dir: Path | None = None) -> FontSet:
    for regular, bold in candidate_pairs(font_dir):
        if regular.exists():
            return FontSet(family=UNICODE_FAMILY, regular=regular, bold=bold if bold.exists() else regular)
    log.warning("No Unicode TrueType font found; PDF text is limited to ASCII")
    return FontSet.core()


def register_fonts(pdf: FPDF, fonts: FontSet) -> None:
    if not fonts.unicode:
        return
    pdf.add_font(fonts.family, "", str(fonts.regular))
    pdf.add_font(fonts.family, "B", str(fonts.bold or fonts.regular))
