import base64
import io
import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Keep settings, counter and archive files out of the real home directory."""
    path = tmp_path / "data"
    monkeypatch.setenv("INVOICE_STUDIO_DATA_DIR", str(path))
    return path


@pytest.fixture
def core_fonts(monkeypatch):
    """Serialize PDFs with the built-in core fonts regardless of installed TTFs."""
    from invoice_studio.utils.pdf.core import builder
    from invoice_studio.utils.pdf.core.fonts import FontSet

    monkeypatch.setattr(builder, "find_unicode_fonts", lambda font_dir=None: FontSet.core())


@pytest.fixture
def flags():
    from invoice_studio.core.models.settings import DisplayFlags

    return DisplayFlags()


@pytest.fixture
def settings():
    from invoice_studio.core.models.settings import AppSettings

    return AppSettings()


@pytest.fixture
def business():
    from invoice_studio.core.models.business import BusinessProfile

    return BusinessProfile(
        name="Acme Trading",
        tax_number="300000000000003",
        commercial_register="1010101010",
        phone="0501234567",
        website="www.acme.example",
        address="King Fahd Rd, Riyadh",
    )


@pytest.fixture
def client():
    from invoice_studio.core.models.business import ClientDetails

    return ClientDetails(name="Globex LLC", phone="0559876543", address="Olaya St, Riyadh")


@pytest.fixture
def sample_items():
    from invoice_studio.core.models.line_item import LineItem

    return [
        LineItem(name="Consulting", quantity=2, unit_price=100.0, discount_percent=10.0, tax_percent=15.0),
        LineItem(name="Hosting", quantity=1, unit_price=49.5, discount_percent=0.0, tax_percent=15.0),
        LineItem(name="Domain", quantity=3, unit_price=12.25, discount_percent=5.0, tax_percent=0.0),
    ]


@pytest.fixture
def make_invoice(business, client, settings, sample_items):
    from invoice_studio.core.models.invoice import Invoice

    def _make(**overrides):
        values = dict(
            id="INV-20240115-0001",
            issue_date=date(2024, 1, 15),
            client=client,
            items=tuple(sample_items),
            notes="",
            business=business,
            settings=settings,
        )
        values.update(overrides)
        return Invoice(**values)

    return _make


@pytest.fixture
def invoice(make_invoice):
    return make_invoice()


@pytest.fixture
def archive(tmp_path):
    from invoice_studio.core.services.archive import InvoiceArchive

    return InvoiceArchive(tmp_path / "archive")


@pytest.fixture
def png_logo():
    """Tiny PNG as a data URI."""
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), (22, 160, 133)).save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")
