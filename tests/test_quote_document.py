"""
Tests for quote numbering and the rendered quote document
"""
from datetime import date, datetime
from decimal import Decimal

import pytest

from app.core.exceptions import ValidationError
from app.models.billing_models.quotation_models import QuoteLineItem, calculate_totals
from app.services.billing_services.quotation_service import generate_quote_number
from app.services.billing_services.quote_renderer import QuoteRenderer

PROFILE = {
    "business_name": "Master Code",
    "owner": "Yair",
    "phone": "052-209-1733",
    "email": "office@mastercode.test",
    "website": "https://mastercode.test",
}


@pytest.fixture
def renderer():
    return QuoteRenderer(currency_symbol="₪", country_code="972")


def render(renderer, items, client=None, notes="", business=PROFILE, validity_days=30):
    return renderer.render(
        quote_number="QT-2024-01-01_10-00-00",
        client=client or {"name": "Dana Levi", "phone": "050-1234567", "email": "dana@example.com"},
        items=items,
        totals=calculate_totals(items),
        notes=notes,
        validity_days=validity_days,
        business=business,
        issue_date=date(2024, 1, 1),
    )


def line(name="Design", quantity=1, price="100", discount="0"):
    return QuoteLineItem(name=name, quantity=quantity, unit_price=Decimal(price), discount=Decimal(discount))


# ----------------------
# Quote numbers
# ----------------------
def test_quote_number_format():
    assert generate_quote_number(datetime(2024, 5, 1, 13, 45, 0)) == "QT-2024-05-01_13-45-00"


def test_quote_numbers_sort_by_creation_time():
    earlier = generate_quote_number(datetime(2024, 5, 1, 9, 59, 59))
    later = generate_quote_number(datetime(2024, 5, 1, 10, 0, 0))
    assert earlier < later


def test_same_second_numbers_get_suffix():
    now = datetime(2024, 5, 1, 13, 45, 0)
    first = generate_quote_number(now)
    second = generate_quote_number(now, [first])
    third = generate_quote_number(now, [first, second])
    assert second == "QT-2024-05-01_13-45-00-002"
    assert third == "QT-2024-05-01_13-45-00-003"
    assert first < second < third < generate_quote_number(datetime(2024, 5, 1, 13, 45, 1))


# ----------------------
# Document rendering
# ----------------------
def test_document_contains_quote_data(renderer):
    html = render(renderer, [line("Design", 2, "500"), line("Hosting", 1, "300", "50")])
    assert "QT-2024-01-01_10-00-00" in html
    assert "01/01/2024" in html
    assert "31/01/2024" in html
    assert "Dana Levi" in html
    assert "Master Code" in html
    assert "₪1,300.00" in html
    assert "₪1,250.00" in html
    assert "-₪50.00" in html


def test_user_text_is_escaped(renderer):
    html = render(
        renderer,
        [line("<b>Design</b>")],
        client={"name": "<script>alert(1)</script>", "phone": "", "email": ""},
        notes="<img src=x onerror=alert(1)>",
    )
    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "<img" not in html
    assert "<b>Design</b>" not in html


def test_discount_line_only_when_discounted(renderer):
    plain = render(renderer, [line(price="100")])
    discounted = render(renderer, [line(price="100", discount="10")])
    assert 'class="totals-row discount"' not in plain
    assert 'class="totals-row discount"' in discounted


def test_notes_block_only_when_notes_present(renderer):
    assert 'class="notes"' not in render(renderer, [line()])
    assert "Bring the logo files" in render(renderer, [line()], notes="Bring the logo files")


def test_rendering_is_deterministic(renderer):
    items = [line("Design", 2, "500"), line("Hosting", 1, "300", "50")]
    assert render(renderer, items) == render(renderer, items)


def test_confirm_link_targets_business_whatsapp(renderer):
    html = render(renderer, [line()])
    assert "https://wa.me/972522091733?text=" in html
    assert "QT-2024-01-01_10-00-00" in renderer.confirm_url(PROFILE, "QT-2024-01-01_10-00-00")


def test_confirm_link_keeps_existing_country_code(renderer):
    url = renderer.confirm_url({**PROFILE, "phone": "+972 52 209 1733"}, "QT-1")
    assert url.startswith("https://wa.me/972522091733?text=")
    assert " " not in url


def test_unsafe_website_is_not_linked(renderer):
    html = render(renderer, [line()], business={**PROFILE, "website": "javascript:alert(1)"})
    assert 'href="javascript:' not in html


@pytest.mark.parametrize("business", [None, {}, {**PROFILE, "business_name": ""}, {**PROFILE, "phone": "  "}])
def test_missing_business_profile_fails(renderer, business):
    with pytest.raises(ValidationError, match="Business profile"):
        render(renderer, [line()], business=business)


def test_expiry_outside_calendar_fails(renderer):
    with pytest.raises(ValidationError, match="out of range"):
        render(renderer, [line()], validity_days=10**7)
