"""
QR helper for the invoice reference printed next to the business block.
"""

from __future__ import annotations

from typing import Sequence

import qrcode


def make_qr_matrix(data: str) -> Sequence[Sequence[bool]]:
    qr = qrcode.QRCode(border=1, box_size=1)
    qr.add_data(data)
    qr.make(fit=True)
    return qr.get_matrix()


def build_qr_payload(business_name: str, tax_number: str, invoice_id: str, issue_date: str, grand_total: str) -> str:
    lines = [
        f"Seller: {business_name}",
        f"VAT: {tax_number}" if tax_number else "",
        f"Invoice: {invoice_id}",
        f"Date: {issue_date}",
        f"Total: {grand_total}",
    ]
    return "\n".join(line for line in lines if line)
