from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from invoice_studio.core.models.business import BusinessProfile, ClientDetails
from invoice_studio.core.models.line_item import LineItem
from invoice_studio.core.models.settings import AppSettings


@dataclass(frozen=True)
class InvoiceSummary:
    subtotal: float = 0.0
    total_discount: float = 0.0
    total_tax: float = 0.0
    grand_total: float = 0.0


@dataclass(frozen=True)
class Invoice:
    """
    Snapshot of an issued invoice.

    `business` and `settings` are copies taken when the invoice was created,
    so re-rendering an archived invoice never picks up later settings changes.
    """

    id: str
    issue_date: date
    client: ClientDetails
    items: tuple[LineItem, ...] = ()
    notes: str = ""
    business: BusinessProfile = field(default_factory=BusinessProfile)
    settings: AppSettings = field(default_factory=AppSettings)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "issue_date": self.issue_date.isoformat(),
            "client": self.client.to_dict(),
            "items": [item.to_dict() for item in self.items],
            "notes": self.notes,
            "business": self.business.to_dict(),
            "settings": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Invoice:
        return cls(
            id=str(data["id"]),
            issue_date=date.fromisoformat(data["issue_date"]),
            client=ClientDetails.from_dict(data.get("client") or {}),
            items=tuple(LineItem.from_dict(item) for item in data.get("items", [])),
            notes=str(data.get("notes") or ""),
            business=BusinessProfile.from_dict(data.get("business") or {}),
            settings=AppSettings.from_dict(data.get("settings") or {}),
        )


@dataclass(frozen=True)
class StoredInvoiceMeta:
    """Archive listing row."""

    id: str
    client_name: str
    issue_date: date
    grand_total: float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "client_name": self.client_name,
            "issue_date": self.issue_date.isoformat(),
            "grand_total": self.grand_total,
        }

    @classmethod
    def from_dict(cls, data: dict) -> StoredInvoiceMeta:
        return cls(
            id=str(data["id"]),
            client_name=str(data.get("client_name") or ""),
            issue_date=date.fromisoformat(data["issue_date"]),
            grand_total=float(data.get("grand_total", 0.0)),
        )
