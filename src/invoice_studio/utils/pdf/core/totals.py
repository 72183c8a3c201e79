"""
Display formatting for amounts. Values are rounded here and nowhere else.
"""

from __future__ import annotations


def format_currency(value: float, currency: str = "SAR") -> str:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        numeric = 0.0
    return f"{numeric:,.2f} {currency}".rstrip()


def format_percent(value: float) -> str:
    return f"{float(value):.2f}%"


def format_quantity(value: float) -> str:
    numeric = float(value)
    if numeric.is_integer():
        return str(int(numeric))
    return f"{numeric:.2f}"
