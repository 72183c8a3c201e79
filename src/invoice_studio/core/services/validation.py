from __future__ import annotations

import math
from typing import Sequence

from invoice_studio.core.errors import ValidationError
from invoice_studio.core.models.business import ClientDetails
from invoice_studio.core.models.line_item import LineItem


def parse_number(raw: str | float | int | None, field: str, default: float | None = None) -> float:
    """Parse form input such as ' 1,5 ' into a float."""
    if isinstance(raw, (int, float)):
        raw = str(raw)
    text = (raw or "").strip().replace(",", ".")
    if text == "":
        if default is not None:
            return default
        raise ValidationError(field, "a number is required")
    try:
        value = float(text)
    except ValueError as exc:
        raise ValidationError(field, f"'{raw}' is not a number") from exc
    if not math.isfinite(value):
        raise ValidationError(field, f"'{raw}' is not a finite number")
    return value


def validate_item(item: LineItem, index: int) -> None:
    prefix = f"items[{index}]"
    if not item.name.strip():
        raise ValidationError(f"{prefix}.name", "product or service name is required")
    for attr in ("quantity", "unit_price", "discount_percent", "tax_percent"):
        if not math.isfinite(getattr(item, attr)):
            raise ValidationError(f"{prefix}.{attr}", "must be a finite number")
    if item.quantity <= 0:
        raise ValidationError(f"{prefix}.quantity", "quantity must be greater than zero")
    if item.unit_price < 0:
        raise ValidationError(f"{prefix}.unit_price", "unit price cannot be negative")
    for attr in ("discount_percent", "tax_percent"):
        value = getattr(item, attr)
        if not 0.0 <= value <= 100.0:
            raise ValidationError(f"{prefix}.{attr}", "percentage must be between 0 and 100")


def validate_invoice_input(client: ClientDetails, items: Sequence[LineItem]) -> None:
    """Reject incomplete invoices before any totals are computed."""
    if not client.name.strip():
        raise ValidationError("client.name", "client name is required")
    if not items:
        raise ValidationError("items", "at least one line item is required")
    for index, item in enumerate(items):
        validate_item(item, index)
