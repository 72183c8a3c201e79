from __future__ import annotations

from textwrap import wrap

NOTES_WRAP_WIDTH = 95


def build_notes_lines(notes: str, wrap_width: int = NOTES_WRAP_WIDTH) -> list[str]:
    """Word-wrap free text; blank lines between paragraphs are kept."""
    lines: list[str] = []
    for paragraph in (notes or "").strip().splitlines():
        if not paragraph.strip():
            lines.append("")
            continue
        lines.extend(wrap(paragraph.strip(), wrap_width) or [""])
    return lines
