from __future__ import annotations

from typing import Sequence

from invoice_studio.core.models.business import ClientDetails
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.utils.pdf.core.drawing import _draw_text, mirror_x
from invoice_studio.utils.pdf.core.instructions import Instruction
from invoice_studio.utils.pdf.core.layout_common import (
    COL_GAP,
    COL_WIDTH,
    LINE_HEIGHT,
    MARGIN,
    PAGE_W,
    SECTION_BODY_SIZE,
    SECTION_HEADER_SIZE,
    color,
)


def build_client_lines(client: ClientDetails, flags: DisplayFlags, labels: dict[str, str]) -> list[str]:
    lines = [client.name or "-"]
    if client.phone:
        lines.append(f"{labels['client_phone']}: {client.phone}")
    if flags.show_client_address and client.address:
        lines.append(f"{labels['client_address']}: {client.address}")
    return lines


def render_parties(
    detail_lines: Sequence[str],
    client_lines: Sequence[str],
    y: float,
    rtl: bool,
    labels: dict[str, str],
) -> tuple[list[Instruction], float]:
    """
    Two-column block: invoice number/date in the leading column, the billed
    client in the trailing one. Leading means left for LTR, right for RTL.
    """
    right = PAGE_W - MARGIN
    lead_x = mirror_x(MARGIN, COL_WIDTH, MARGIN, right, rtl)
    trail_x = mirror_x(MARGIN + COL_WIDTH + COL_GAP, COL_WIDTH, MARGIN, right, rtl)
    parts: list[Instruction] = []
    parts.extend(_draw_text(detail_lines, lead_x, y, COL_WIDTH, SECTION_BODY_SIZE, leading=LINE_HEIGHT, color=color("text"), rtl_document=rtl))
    parts.extend(_draw_text([labels["bill_to"]], trail_x, y, COL_WIDTH, SECTION_HEADER_SIZE, bold=True, leading=LINE_HEIGHT, color=color("dark"), rtl_document=rtl))
    parts.extend(_draw_text(client_lines, trail_x, y + LINE_HEIGHT, COL_WIDTH, SECTION_BODY_SIZE, leading=LINE_HEIGHT, color=color("text"), rtl_document=rtl))
    height = LINE_HEIGHT * max(len(detail_lines), len(client_lines) + 1)
    return parts, y + height
