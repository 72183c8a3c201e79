import base64

import pytest

from invoice_studio.core.calculations.invoice_calculator import compute
from invoice_studio.core.errors import LogoError
from invoice_studio.core.models.business import BusinessProfile, ClientDetails
from invoice_studio.core.models.line_item import LineItem
from invoice_studio.core.models.settings import AppSettings, DisplayFlags
from invoice_studio.utils.pdf.core.drawing import _normalize_latin1, run_align, text_direction
from invoice_studio.utils.pdf.core.fonts import FontSet, find_unicode_fonts
from invoice_studio.utils.pdf.core.instructions import Box, Picture, TableRow, TextRun
from invoice_studio.utils.pdf.core.labels import labels_for
from invoice_studio.utils.pdf.core.layout_common import BODY_BOTTOM, CONTENT_W, MARGIN
from invoice_studio.utils.pdf.renderers.pdf_renderer import compose_invoice, render_invoice_pdf, to_data_uri
from invoice_studio.utils.pdf.sections.business import build_business_lines, decode_logo
from invoice_studio.utils.pdf.sections.items_table import build_columns
from invoice_studio.utils.pdf.sections.notes import build_notes_lines


def _compose(invoice, **kwargs):
    computed, summary = compute(invoice.items, invoice.settings.flags)
    return compose_invoice(invoice, computed, summary, **kwargs)


def _header_rows(page):
    return [row for row in page.of_type(TableRow) if row.bold]


def _item_rows(page):
    return [row for row in page.of_type(TableRow) if not row.bold]


def test_columns_follow_flags():
    labels = labels_for("en")
    keys = lambda flags: [c.key for c in build_columns(flags, labels)]  # noqa: E731

    assert keys(DisplayFlags()) == ["name", "quantity", "unit_price", "discount_percent", "tax_percent", "tax_amount", "total"]
    assert "discount_percent" not in keys(DisplayFlags(show_discount=False))
    assert keys(DisplayFlags(show_tax=False)) == ["name", "quantity", "unit_price", "discount_percent", "total"]
    for flags in (DisplayFlags(), DisplayFlags(show_tax=False, show_discount=False)):
        assert sum(c.width for c in build_columns(flags, labels)) == pytest.approx(CONTENT_W)


def test_business_lines_follow_flags(business):
    labels = labels_for("en")

    full = build_business_lines(business, DisplayFlags(), labels)
    trimmed = build_business_lines(
        business,
        DisplayFlags(show_commercial_register=False, show_website=False, show_business_address=False),
        labels,
    )

    assert "Commercial register: 1010101010" in full
    assert "Website: www.acme.example" in full
    assert trimmed == ["Tax number: 300000000000003", "Phone: 0501234567"]


def test_document_order_and_content(make_invoice):
    invoice = make_invoice(items=(LineItem(name="Widget", quantity=2, unit_price=100.0, discount_percent=10.0, tax_percent=15.0),))

    document = _compose(invoice)

    texts = document.texts()
    assert len(document.pages) == 1
    assert document.title == "Tax Invoice INV-20240115-0001"
    for expected in ("Acme Trading", "Tax Invoice", "Invoice No: INV-20240115-0001", "Issue date: 15/01/2024", "Globex LLC"):
        assert expected in texts
    assert texts.index("Acme Trading") < texts.index("Tax Invoice") < texts.index("Globex LLC") < texts.index("Widget")
    assert texts.index("Widget") < texts.index("Grand total") < texts.index("Thank you for your business!")
    assert "207.00 SAR" in texts
    assert "20.00 SAR" in texts
    assert "27.00 SAR" in texts


def test_hidden_flags_drop_client_address_and_tax_rows(make_invoice):
    settings = AppSettings(flags=DisplayFlags(show_client_address=False, show_tax=False))

    texts = _compose(make_invoice(settings=settings)).texts()

    assert "Address: Olaya St, Riyadh" not in texts
    assert "Total tax" not in texts
    assert "Tax %" not in texts
    assert "Client phone: 0559876543" in texts


def test_empty_item_list_still_renders_header_and_footer(make_invoice):
    document = _compose(make_invoice(items=()))

    page = document.pages[0]
    assert len(document.pages) == 1
    assert len(_header_rows(page)) == 1
    assert _item_rows(page) == []
    assert "0.00 SAR" in page.texts()
    assert "Thank you for your business!" in page.texts()


def test_long_item_list_overflows_onto_continuation_pages(make_invoice):
    items = tuple(LineItem(name=f"Item {i}", quantity=1, unit_price=float(i)) for i in range(80))

    document = _compose(make_invoice(items=items))

    assert len(document.pages) >= 2
    drawn = [row.cells for page in document.pages for row in _item_rows(page)]
    assert len(drawn) == 80
    assert [cells[0] for cells in drawn] == [f"Item {i}" for i in range(80)]
    for number, page in enumerate(document.pages, start=1):
        texts = page.texts()
        assert "Thank you for your business!" in texts
        assert f"Page {number} of {len(document.pages)}" in texts
        for ins in page.instructions:
            if isinstance(ins, TableRow):
                assert ins.y + ins.height <= BODY_BOTTOM
    for page in document.pages[1:]:
        texts = page.texts()
        if _item_rows(page):
            assert "Invoice INV-20240115-0001 (continued)" in texts
            assert len(_header_rows(page)) == 1
        assert "Acme Trading" not in texts
        assert "Tax Invoice" not in texts


def test_summary_moves_to_next_page_when_it_does_not_fit(make_invoice):
    # enough rows to fill the first page almost completely
    items = tuple(LineItem(name=f"Item {i}", quantity=1, unit_price=1.0) for i in range(25))

    document = _compose(make_invoice(items=items))

    last = document.pages[-1]
    assert "Grand total" in last.texts()
    grand_total = [ins for ins in last.of_type(TextRun) if ins.text == "Grand total"][0]
    assert grand_total.y + grand_total.h <= BODY_BOTTOM


def test_notes_are_wrapped(make_invoice):
    notes = "Payment is due within thirty days. " * 8 + "\n\nBank transfer only."

    document = _compose(make_invoice(notes=notes))

    texts = document.texts()
    lines = build_notes_lines(notes)
    assert "Notes" in texts
    assert len(lines) > 3
    assert all(len(line) <= 95 for line in lines)
    assert "" in lines
    assert lines[-1] == "Bank transfer only."
    for line in lines:
        assert line in texts


def test_no_notes_block_without_notes(make_invoice):
    assert "Notes" not in _compose(make_invoice(notes="   ")).texts()


def test_run_alignment_follows_text_direction():
    assert text_direction("Hello") == "ltr"
    assert text_direction("123 مرحبا") == "rtl"
    assert text_direction("123") == "ltr"
    assert run_align("مرحبا", rtl_document=False) == "R"
    assert run_align("Hello", rtl_document=False) == "L"
    assert run_align("Hello", rtl_document=True) == "R"
    assert run_align("100.00 SAR", rtl_document=True, align="R") == "L"
    assert run_align("مرحبا", rtl_document=True, align="C") == "C"


def test_rtl_text_is_right_aligned_and_never_reversed(make_invoice):
    arabic_item = "خدمة استشارية"
    invoice = make_invoice(
        client=ClientDetails(name="شركة النور"),
        items=(LineItem(name=arabic_item, quantity=1, unit_price=10.0),),
    )

    document = _compose(invoice)

    runs = [ins for ins in document.pages[0].of_type(TextRun) if ins.text == "شركة النور"]
    assert runs and all(run.align == "R" for run in runs)
    row = _item_rows(document.pages[0])[0]
    assert row.cells[0] == arabic_item
    assert row.aligns[0] == "R"


def test_rtl_document_mirrors_layout(make_invoice):
    invoice = make_invoice(settings=AppSettings(language="ar"))

    document = _compose(invoice)

    page = document.pages[0]
    header = _header_rows(page)[0]
    assert header.cells[0] == "الإجمالي"
    assert header.cells[-1] == "المنتج/الخدمة"
    assert "فاتورة ضريبية" in page.texts()
    name_run = [ins for ins in page.of_type(TextRun) if ins.text == "Acme Trading"][0]
    assert name_run.align == "R"
    total_label = [ins for ins in page.of_type(TextRun) if ins.text == labels_for("ar")["grand_total"]][0]
    assert total_label.x == MARGIN
    assert document.language == "ar"


def test_logo_and_qr_code_are_placed(make_invoice, business, png_logo):
    settings = AppSettings(flags=DisplayFlags(show_qr_code=True))
    invoice = make_invoice(business=BusinessProfile(**{**business.to_dict(), "logo": png_logo}), settings=settings)

    page = _compose(invoice).pages[0]

    pictures = page.of_type(Picture)
    assert len(pictures) == 1
    assert pictures[0].data == base64.b64decode(png_logo.split(",", 1)[1])
    assert any(box.fill == (0, 0, 0) for box in page.of_type(Box))

    without_logo = _compose(invoice, include_logo=False).pages[0]
    assert without_logo.of_type(Picture) == []


def test_decode_logo_rejects_garbage():
    with pytest.raises(LogoError):
        decode_logo("data:image/png;base64,%%%")
    with pytest.raises(LogoError):
        decode_logo(base64.b64encode(b"not an image").decode("ascii"))
    assert decode_logo(None) is None


def test_pdf_bytes_with_core_fonts(invoice):
    computed, summary = compute(invoice.items, invoice.settings.flags)

    data = render_invoice_pdf(invoice, computed, summary, fonts=FontSet.core(), compress=False)

    assert data.startswith(b"%PDF")
    assert b"%%EOF" in data[-32:]
    assert b"INV-20240115-0001" in data
    assert to_data_uri(data).startswith("data:application/pdf;base64,")
    assert base64.b64decode(to_data_uri(data).split(",", 1)[1]) == data


def test_rtl_pdf_builds_with_core_font_fallback(make_invoice):
    invoice = make_invoice(settings=AppSettings(language="ar"), notes="ملاحظة")
    computed, summary = compute(invoice.items, invoice.settings.flags)

    data = render_invoice_pdf(invoice, computed, summary, fonts=FontSet.core())

    assert data.startswith(b"%PDF")


def test_core_font_text_keeps_latin1_accents():
    assert _normalize_latin1("José Müller مرحبا ő") == "José Müller  o"


def test_rtl_pdf_embeds_unicode_font(make_invoice, client):
    fonts = find_unicode_fonts()
    if not fonts.unicode:
        pytest.skip("no Unicode TrueType font installed")
    invoice = make_invoice(
        settings=AppSettings(language="ar"),
        client=ClientDetails(name="شركة الأفق", phone=client.phone, address="الرياض"),
        items=(LineItem(name="استشارات", quantity=2, unit_price=100.0, tax_percent=15.0),),
        notes="شكرا لتعاملكم معنا",
    )
    computed, summary = compute(invoice.items, invoice.settings.flags)

    data = render_invoice_pdf(invoice, computed, summary, fonts=fonts, compress=False)

    assert data.startswith(b"%PDF")
    assert b"/FontFile2" in data
