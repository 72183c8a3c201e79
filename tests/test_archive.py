from datetime import date

import pytest

from invoice_studio.core.calculations.invoice_calculator import compute
from invoice_studio.core.errors import ArchiveError
from invoice_studio.core.models.business import ClientDetails
from invoice_studio.core.services.archive import InvoiceArchive

PDF = b"%PDF-1.4 fake"


def _store(archive, invoice):
    _, summary = compute(invoice.items, invoice.settings.flags)
    return archive.save(invoice, summary, PDF)


def test_round_trip_preserves_every_field(archive, make_invoice):
    invoice = make_invoice(notes="Pay within 30 days.\nThanks.")
    meta = _store(archive, invoice)

    loaded = archive.load_invoice(invoice.id)

    assert loaded == invoice
    assert [item.name for item in loaded.items] == ["Consulting", "Hosting", "Domain"]
    assert loaded.items[1].unit_price == 49.5
    assert meta.client_name == "Globex LLC"
    assert archive.load_document(invoice.id) == PDF


def test_listing_is_newest_first(archive, make_invoice):
    _store(archive, make_invoice(id="INV-20240101-0001", issue_date=date(2024, 1, 1)))
    _store(archive, make_invoice(id="INV-20240301-0002", issue_date=date(2024, 3, 1)))
    _store(archive, make_invoice(id="INV-20240201-0003", issue_date=date(2024, 2, 1)))

    assert [meta.id for meta in archive.list_metas()] == [
        "INV-20240301-0002",
        "INV-20240201-0003",
        "INV-20240101-0001",
    ]


def test_saving_same_id_replaces_entry(archive, invoice):
    _store(archive, invoice)
    _store(archive, invoice)

    assert len(archive.list_metas()) == 1


def test_search_matches_id_client_and_date(archive, make_invoice):
    _store(archive, make_invoice(id="INV-20240115-0001"))
    _store(
        archive,
        make_invoice(id="INV-20240220-0002", issue_date=date(2024, 2, 20), client=ClientDetails(name="Initech")),
    )

    assert [m.id for m in archive.search("0002")] == ["INV-20240220-0002"]
    assert [m.id for m in archive.search("globex")] == ["INV-20240115-0001"]
    assert [m.id for m in archive.search("20/02/2024")] == ["INV-20240220-0002"]
    assert [m.id for m in archive.search("2024-01")] == ["INV-20240115-0001"]
    assert len(archive.search("  ")) == 2
    assert archive.search("nobody") == []


def test_delete_removes_files_and_listing(archive, invoice):
    _store(archive, invoice)

    archive.delete(invoice.id)

    assert archive.list_metas() == []
    assert not archive.invoice_path(invoice.id).exists()
    assert not archive.document_path(invoice.id).exists()
    with pytest.raises(ArchiveError):
        archive.delete(invoice.id)


def test_missing_records_raise(archive):
    with pytest.raises(ArchiveError):
        archive.load_invoice("INV-00000000-0000")
    with pytest.raises(ArchiveError):
        archive.load_document("INV-00000000-0000")


def test_export_document_to_directory(archive, invoice, tmp_path):
    _store(archive, invoice)
    target_dir = tmp_path / "downloads"
    target_dir.mkdir()

    out = archive.export_document(invoice.id, target_dir)

    assert out == target_dir / f"invoice-{invoice.id}.pdf"
    assert out.read_bytes() == PDF


def test_unreadable_listing_raises(tmp_path):
    archive = InvoiceArchive(tmp_path / "broken")
    archive.root.mkdir()
    archive.metas_path.write_text("{oops", encoding="utf-8")

    with pytest.raises(ArchiveError):
        archive.list_metas()


def test_default_root_follows_data_dir(data_dir):
    assert InvoiceArchive().root == data_dir / "archive"


def test_highest_sequence_tracks_archived_ids(archive, make_invoice):
    assert archive.highest_sequence() == 0

    _store(archive, make_invoice(id="INV-20240101-0003"))
    _store(archive, make_invoice(id="INV-20240301-0012"))
    _store(archive, make_invoice(id="INV-20240201-0007"))

    assert archive.highest_sequence() == 12


def test_exists(archive, invoice):
    assert not archive.exists(invoice.id)
    _store(archive, invoice)
    assert archive.exists(invoice.id)


def test_save_without_overwrite_keeps_the_original(archive, make_invoice):
    first = make_invoice()
    _store(archive, first)
    _, summary = compute(first.items, first.settings.flags)

    with pytest.raises(ArchiveError):
        archive.save(make_invoice(client=ClientDetails(name="Other Co")), summary, b"%PDF other", overwrite=False)

    assert archive.load_invoice(first.id) == first
    assert archive.load_document(first.id) == PDF
    assert len(archive.list_metas()) == 1
