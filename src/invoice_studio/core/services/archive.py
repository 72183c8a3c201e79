from __future__ import annotations

import json
import logging
import re
import shutil
from pathlib import Path

from invoice_studio.core import config
from invoice_studio.core.errors import ArchiveError
from invoice_studio.core.models.invoice import Invoice, InvoiceSummary, StoredInvoiceMeta

log = logging.getLogger(__name__)

_SEQUENCE_RE = re.compile(r"^INV-\d{8}-(\d+)$")


class InvoiceArchive:
    """
    Local invoice store.

    Layout under `root`:
    - metas.json            listing rows (id, client, date, grand total)
    - invoices/<id>.json    full invoice snapshots
    - documents/<id>.pdf    rendered documents
    """

    def __init__(self, root: Path | None = None):
        self.root = Path(root) if root else config.archive_dir()
        self.metas_path = self.root / "metas.json"
        self.invoices_dir = self.root / "invoices"
        self.documents_dir = self.root / "documents"

    # -------- paths --------
    def invoice_path(self, invoice_id: str) -> Path:
        return self.invoices_dir / f"{invoice_id}.json"

    def document_path(self, invoice_id: str) -> Path:
        return self.documents_dir / f"{invoice_id}.pdf"

    # -------- listing --------
    def _read_metas(self) -> list[StoredInvoiceMeta]:
        if not self.metas_path.exists():
            return []
        try:
            raw = json.loads(self.metas_path.read_text(encoding="utf-8"))
            return [StoredInvoiceMeta.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise ArchiveError(f"Invoice list {self.metas_path} is unreadable") from exc

    def _write_metas(self, metas: list[StoredInvoiceMeta]) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        payload = [meta.to_dict() for meta in metas]
        self.metas_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    def list_metas(self) -> list[StoredInvoiceMeta]:
        """Newest issue date first; same-day invoices keep newest-saved first."""
        metas = list(reversed(self._read_metas()))
        return sorted(metas, key=lambda meta: meta.issue_date, reverse=True)

    def search(self, term: str) -> list[StoredInvoiceMeta]:
        needle = (term or "").strip().lower()
        metas = self.list_metas()
        if not needle:
            return metas
        return [
            meta
            for meta in metas
            if needle in meta.id.lower()
            or needle in meta.client_name.lower()
            or needle in meta.issue_date.isoformat()
            or needle in meta.issue_date.strftime("%d/%m/%Y")
        ]

    # -------- records --------
    def exists(self, invoice_id: str) -> bool:
        return any(meta.id == invoice_id for meta in self._read_metas()) or self.invoice_path(invoice_id).exists()

    def highest_sequence(self) -> int:
        """Largest NNNN among archived INV-YYYYMMDD-NNNN ids, 0 for an empty archive."""
        highest = 0
        for meta in self._read_metas():
            match = _SEQUENCE_RE.match(meta.id)
            if match:
                highest = max(highest, int(match.group(1)))
        return highest

    def save(self, invoice: Invoice, summary: InvoiceSummary, document: bytes, overwrite: bool = True) -> StoredInvoiceMeta:
        if not overwrite and self.exists(invoice.id):
            raise ArchiveError(f"Invoice {invoice.id} already exists")
        self.invoices_dir.mkdir(parents=True, exist_ok=True)
        self.documents_dir.mkdir(parents=True, exist_ok=True)
        self.document_path(invoice.id).write_bytes(document)
        self.invoice_path(invoice.id).write_text(
            json.dumps(invoice.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
        )
        meta = StoredInvoiceMeta(
            id=invoice.id,
            client_name=invoice.client.name,
            issue_date=invoice.issue_date,
            grand_total=summary.grand_total,
        )
        metas = [m for m in self._read_metas() if m.id != invoice.id]
        metas.append(meta)
        self._write_metas(metas)
        log.info("Archived invoice %s (%d bytes)", invoice.id, len(document))
        return meta

    def load_invoice(self, invoice_id: str) -> Invoice:
        path = self.invoice_path(invoice_id)
        if not path.exists():
            raise ArchiveError(f"Invoice {invoice_id} not found")
        try:
            return Invoice.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (ValueError, KeyError, TypeError) as exc:
            raise ArchiveError(f"Invoice {invoice_id} is unreadable") from exc

    def load_document(self, invoice_id: str) -> bytes:
        path = self.document_path(invoice_id)
        if not path.exists():
            raise ArchiveError(f"No PDF stored for invoice {invoice_id}")
        return path.read_bytes()

    def export_document(self, invoice_id: str, target: Path) -> Path:
        source = self.document_path(invoice_id)
        if not source.exists():
            raise ArchiveError(f"No PDF stored for invoice {invoice_id}")
        target = Path(target)
        if target.is_dir():
            target = target / f"invoice-{invoice_id}.pdf"
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        return target

    def delete(self, invoice_id: str) -> None:
        metas = self._read_metas()
        remaining = [m for m in metas if m.id != invoice_id]
        if len(remaining) == len(metas):
            raise ArchiveError(f"Invoice {invoice_id} not found")
        self.invoice_path(invoice_id).unlink(missing_ok=True)
        self.document_path(invoice_id).unlink(missing_ok=True)
        self._write_metas(remaining)
        log.info("Deleted invoice %s", invoice_id)
