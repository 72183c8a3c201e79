import pytest

from invoice_studio.core.calculations.invoice_calculator import InvoiceCalculator, compute, compute_line
from invoice_studio.core.models.invoice import InvoiceSummary
from invoice_studio.core.models.line_item import LineItem
from invoice_studio.core.models.settings import DisplayFlags
from invoice_studio.utils.pdf.core import totals


def test_single_item_with_discount_and_tax(flags):
    item = LineItem(name="Widget", quantity=2, unit_price=100.0, discount_percent=10.0, tax_percent=15.0)

    computed, summary = compute([item], flags)

    line = computed[0]
    assert line.line_subtotal == pytest.approx(200.0)
    assert line.discount_amount == pytest.approx(20.0)
    assert line.price_after_discount == pytest.approx(180.0)
    assert line.tax_amount == pytest.approx(27.0)
    assert line.total == pytest.approx(207.0)
    assert summary.subtotal == pytest.approx(200.0)
    assert summary.total_discount == pytest.approx(20.0)
    assert summary.total_tax == pytest.approx(27.0)
    assert summary.grand_total == pytest.approx(207.0)


def test_empty_list_gives_zero_summary(flags):
    computed, summary = compute([], flags)

    assert computed == []
    assert summary == InvoiceSummary(0.0, 0.0, 0.0, 0.0)


def test_discount_flag_off_zeroes_every_discount(sample_items):
    computed, summary = compute(sample_items, DisplayFlags(show_discount=False))

    assert all(line.discount_amount == 0 for line in computed)
    assert summary.total_discount == 0
    for line in computed:
        assert line.price_after_discount == pytest.approx(line.quantity * line.unit_price)


def test_tax_flag_off_zeroes_every_tax(sample_items):
    computed, summary = compute(sample_items, DisplayFlags(show_tax=False))

    assert all(line.tax_amount == 0 for line in computed)
    assert summary.total_tax == 0
    assert summary.grand_total == pytest.approx(summary.subtotal - summary.total_discount)


def test_summary_matches_item_totals(sample_items, flags):
    computed, summary = compute(sample_items, flags)

    assert summary.grand_total == summary.subtotal - summary.total_discount + summary.total_tax
    assert abs(summary.grand_total - sum(line.total for line in computed)) < 1e-9
    assert summary.subtotal == sum(line.line_subtotal for line in computed)
    for line in computed:
        assert line.total == line.price_after_discount + line.tax_amount


def test_output_order_follows_input(sample_items, flags):
    computed, _ = compute(sample_items, flags)

    assert [line.name for line in computed] == ["Consulting", "Hosting", "Domain"]
    assert [line.item for line in computed] == sample_items


def test_compute_line_does_not_round():
    line = compute_line(LineItem(name="Thirds", quantity=1, unit_price=10.0, tax_percent=1 / 3), True, True)

    assert line.tax_amount == 10.0 * ((1 / 3) / 100.0)
    assert line.tax_amount != round(line.tax_amount, 2)


def test_calculator_object_uses_updated_flags(sample_items):
    calculator = InvoiceCalculator()
    with_tax = calculator.compute(sample_items)

    calculator.update_flags(DisplayFlags(show_tax=False))
    without_tax = calculator.compute(sample_items)

    assert with_tax.summary.total_tax > 0
    assert without_tax.summary.total_tax == 0
    assert isinstance(without_tax.items, tuple)


def test_format_currency_uses_currency_suffix():
    formatted = InvoiceCalculator.format_currency(1234.5)
    assert formatted == "1,234.50 SAR"
    assert InvoiceCalculator.format_currency(3, "USD") == "3.00 USD"


@pytest.mark.parametrize("value, currency", [(1234.5, "SAR"), (0, "USD"), (-12.345, "")])
def test_calculator_currency_matches_printed_amounts(value, currency):
    assert InvoiceCalculator.format_currency(value, currency) == totals.format_currency(value, currency)
