from __future__ import annotations

import base64
import binascii
import io
from typing import Sequence

from PIL import Image, UnidentifiedImageError

from invoice_studio.core.errors import LogoError
from invoice_studio.core.models.business import BusinessProfile
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.utils.pdf.core.drawing import _draw_qr, _draw_text, mirror_x
from invoice_studio.utils.pdf.core.instructions import Instruction, Picture
from invoice_studio.utils.pdf.core.layout_common import (
    BUSINESS_NAME_SIZE,
    CONTENT_W,
    LINE_HEIGHT,
    LOGO_SIZE,
    MARGIN,
    PAGE_W,
    QR_SIZE,
    SECTION_BODY_SIZE,
    color,
)


def build_business_lines(business: BusinessProfile, flags: DisplayFlags, labels: dict[str, str]) -> list[str]:
    lines: list[str] = []
    if flags.show_commercial_register and business.commercial_register:
        lines.append(f"{labels['commercial_register']}: {business.commercial_register}")
    if business.tax_number:
        lines.append(f"{labels['tax_number']}: {business.tax_number}")
    if flags.show_business_address and business.address:
        lines.append(f"{labels['address']}: {business.address}")
    if business.phone:
        lines.append(f"{labels['phone']}: {business.phone}")
    if flags.show_website and business.website:
        lines.append(f"{labels['website']}: {business.website}")
    return lines


def decode_logo(logo: str | None) -> bytes | None:
    """
    Decode a base64 / data-URI logo and check that it is a readable image.
    Raises LogoError for anything that is not.
    """
    if not logo:
        return None
    payload = logo.split(",", 1)[1] if logo.startswith("data:") else logo
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise LogoError("Logo is not valid base64 data") from exc
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise LogoError("Logo is not a readable image") from exc
    return data


def render_business(
    name: str,
    lines: Sequence[str],
    y: float,
    rtl: bool,
    logo: bytes | None = None,
    qr_matrix: Sequence[Sequence[bool]] | None = None,
) -> tuple[list[Instruction], float]:
    """Business identity block. Returns (instructions, y below the block)."""
    parts: list[Instruction] = []
    right = PAGE_W - MARGIN
    graphics_w = 0.0
    graphics_h = 0.0

    if logo is not None:
        logo_x = mirror_x(right - LOGO_SIZE, LOGO_SIZE, MARGIN, right, rtl)
        parts.append(Picture(x=logo_x, y=y, w=LOGO_SIZE, h=LOGO_SIZE, data=logo))
        graphics_w += LOGO_SIZE + 8
        graphics_h = LOGO_SIZE

    if qr_matrix:
        modules = max(len(qr_matrix), len(qr_matrix[0]))
        module = QR_SIZE / modules
        qr_x = mirror_x(right - graphics_w - QR_SIZE, QR_SIZE, MARGIN, right, rtl)
        parts.extend(_draw_qr(qr_matrix, qr_x, y, module))
        graphics_w += QR_SIZE + 8
        graphics_h = max(graphics_h, QR_SIZE)

    text_w = CONTENT_W - graphics_w
    text_x = mirror_x(MARGIN, text_w, MARGIN, right, rtl)
    parts.extend(_draw_text([name], text_x, y, text_w, BUSINESS_NAME_SIZE, bold=True, leading=BUSINESS_NAME_SIZE + 6, color=color("dark"), rtl_document=rtl))
    text_y = y + BUSINESS_NAME_SIZE + 6
    parts.extend(_draw_text(lines, text_x, text_y, text_w, SECTION_BODY_SIZE, leading=LINE_HEIGHT, color=color("muted"), rtl_document=rtl))
    text_bottom = text_y + LINE_HEIGHT * len(lines)
    return parts, max(text_bottom, y + graphics_h)
