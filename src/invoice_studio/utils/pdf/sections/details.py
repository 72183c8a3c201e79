from __future__ import annotations

from datetime import date


def format_issue_date(issue_date: date) -> str:
    return issue_date.strftime("%d/%m/%Y")


def build_detail_lines(invoice_id: str, issue_date: date, labels: dict[str, str]) -> list[str]:
    return [
        f"{labels['invoice_no']}: {invoice_id}",
        f"{labels['issue_date']}: {format_issue_date(issue_date)}",
    ]
