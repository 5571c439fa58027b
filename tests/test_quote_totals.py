"""
Unit tests for quote line items and total calculation
"""
from decimal import Decimal

import pytest

from app.core.exceptions import ValidationError
from app.models.billing_models.quotation_models import QuoteLineItem, calculate_totals


def item(name="Service", quantity=1, price="100", discount="0", description=""):
    return QuoteLineItem(
        name=name,
        quantity=quantity,
        unit_price=Decimal(price),
        discount=Decimal(discount),
        description=description,
    )


def test_totals_for_design_and_hosting():
    totals = calculate_totals([
        item("Design", quantity=2, price="500"),
        item("Hosting", quantity=1, price="300", discount="50"),
    ])
    assert totals.subtotal == Decimal("1300")
    assert totals.discount == Decimal("50")
    assert totals.total == Decimal("1250")


def test_total_is_subtotal_minus_discount():
    items = [item(quantity=q, price=p, discount=d) for q, p, d in [
        (3, "19.99", "5.01"),
        (7, "0.10", "0"),
        (1, "1234.56", "234.56"),
    ]]
    totals = calculate_totals(items)
    assert totals.total == totals.subtotal - totals.discount


def test_accumulation_is_exact():
    totals = calculate_totals([item(quantity=1, price="0.1") for _ in range(3)])
    assert totals.subtotal == Decimal("0.3")


def test_to_record_rounds_to_cents():
    totals = calculate_totals([item(quantity=3, price="0.335")])
    assert totals.to_record() == {"subtotal": 1.01, "discount": 0.0, "total": 1.01}


def test_empty_items_rejected():
    with pytest.raises(ValidationError, match="at least one item"):
        calculate_totals([])


@pytest.mark.parametrize("bad_item, message", [
    (dict(quantity=0), "quantity"),
    (dict(price="-1"), "price"),
    (dict(discount="-5"), "discount"),
    (dict(name=""), "name"),
])
def test_invalid_item_rejected(bad_item, message):
    with pytest.raises(ValidationError, match=message):
        calculate_totals([item(**bad_item)])


def test_discount_larger_than_subtotal_rejected():
    with pytest.raises(ValidationError, match="exceed"):
        calculate_totals([item(price="100", discount="150")])


def test_item_discount_above_its_line_allowed_when_quote_stays_positive():
    totals = calculate_totals([
        item("Setup", price="10", discount="20"),
        item("Retainer", price="500"),
    ])
    assert totals.total == Decimal("490")


def test_from_payload_reads_wire_shape():
    line = QuoteLineItem.from_payload(
        {"name": " Design ", "description": None, "quantity": 2, "price": 0.1, "discount": None}
    )
    assert line.name == "Design"
    assert line.description == ""
    assert line.unit_price == Decimal("0.1")
    assert line.discount == Decimal("0")
    assert line.line_total == Decimal("0.2")


@pytest.mark.parametrize("payload", [
    {"name": "X", "quantity": 1, "price": "abc"},
    {"name": "X", "quantity": 1.5, "price": 10},
    {"name": "X", "quantity": True, "price": 10},
    {"name": "X", "quantity": 1},
])
def test_from_payload_rejects_malformed_numbers(payload):
    with pytest.raises(ValidationError):
        QuoteLineItem.from_payload(payload)
