"""
Printed captions per document language.
"""

from __future__ import annotations

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Tax Invoice",
        "tax_number": "Tax number",
        "commercial_register": "Commercial register",
        "address": "Address",
        "phone": "Phone",
        "website": "Website",
        "invoice_no": "Invoice No",
        "issue_date": "Issue date",
        "bill_to": "Bill to",
        "client_phone": "Client phone",
        "client_address": "Address",
        "col_item": "Product / service",
        "col_qty": "Qty",
        "col_unit_price": "Unit price",
        "col_discount": "Discount %",
        "col_tax": "Tax %",
        "col_tax_amount": "Tax amount",
        "col_total": "Total",
        "continued": "Invoice {invoice_no} (continued)",
        "subtotal": "Subtotal",
        "total_discount": "Total discount",
        "total_tax": "Total tax",
        "grand_total": "Grand total",
        "notes": "Notes",
        "footer": "Thank you for your business!",
        "page": "Page {page} of {pages}",
    },
    "ar": {
        "title": "فاتورة ضريبية",
        "tax_number": "الرقم الضريبي",
        "commercial_register": "السجل التجاري",
        "address": "العنوان",
        "phone": "الهاتف",
        "website": "الموقع الإلكتروني",
        "invoice_no": "رقم الفاتورة",
        "issue_date": "تاريخ الإصدار",
        "bill_to": "فاتورة إلى",
        "client_phone": "جوال العميل",
        "client_address": "الحي",
        "col_item": "المنتج/الخدمة",
        "col_qty": "الكمية",
        "col_unit_price": "سعر الوحدة",
        "col_discount": "الخصم %",
        "col_tax": "الضريبة %",
        "col_tax_amount": "قيمة الضريبة",
        "col_total": "الإجمالي",
        "continued": "فاتورة {invoice_no} (تابع)",
        "subtotal": "المجموع الفرعي",
        "total_discount": "إجمالي الخصم",
        "total_tax": "إجمالي الضريبة",
        "grand_total": "الإجمالي النهائي",
        "notes": "الملاحظات",
        "footer": "شكراً لتعاملكم معنا!",
        "page": "صفحة {page} من {pages}",
    },
}


def labels_for(language: str) -> dict[str, str]:
    return LABELS.get(language, LABELS["en"])
