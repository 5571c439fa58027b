#app/models/billing_models/quotation_models.py
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Sequence

from app.core.exceptions import ValidationError
from app.utils.decimal_utils import money_to_float, to_decimal

ZERO = Decimal("0")


# ==================================================
# QUOTE LINE ITEM
# ==================================================
@dataclass(frozen=True)
class QuoteLineItem:
    name: str
    quantity: int
    unit_price: Decimal
    discount: Decimal = ZERO
    description: str = ""

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "QuoteLineItem":
        """Build an item from the wire shape {name, description, quantity, price, discount}."""
        try:
            unit_price = to_decimal(payload.get("price", payload.get("unit_price")))
            discount = to_decimal(payload.get("discount") or 0)
        except ValueError as e:
            raise ValidationError(str(e))
        quantity = payload.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(f"Quantity must be a whole number, got {quantity!r}")
        return cls(
            name=(payload.get("name") or "").strip(),
            quantity=quantity,
            unit_price=unit_price,
            discount=discount,
            description=(payload.get("description") or "").strip(),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "quantity": self.quantity,
            "price": money_to_float(self.unit_price),
            "discount": money_to_float(self.discount),
            "line_total": money_to_float(self.line_total),
        }


@dataclass(frozen=True)
class QuoteTotals:
    subtotal: Decimal
    discount: Decimal
    total: Decimal

    def to_record(self) -> Dict[str, float]:
        return {
            "subtotal": money_to_float(self.subtotal),
            "discount": money_to_float(self.discount),
            "total": money_to_float(self.total),
        }


# ----------------------
# Total calculation
# ----------------------
def _validate_item(item: QuoteLineItem, position: int) -> None:
    if not item.name:
        raise ValidationError(f"Item {position}: name is required")
    if item.quantity < 1:
        raise ValidationError(f"Item {position}: quantity must be at least 1")
    if item.unit_price < 0:
        raise ValidationError(f"Item {position}: price cannot be negative")
    if item.discount < 0:
        raise ValidationError(f"Item {position}: discount cannot be negative")


def calculate_totals(items: Sequence[QuoteLineItem]) -> QuoteTotals:
    """
    subtotal = sum(price * quantity), discount = sum(item discounts),
    total = subtotal - discount. Exact Decimal arithmetic; rounding happens
    only when amounts are stored or displayed.
    """
    if not items:
        raise ValidationError("Quote must contain at least one item")

    subtotal = ZERO
    discount = ZERO
    for position, item in enumerate(items, start=1):
        _validate_item(item, position)
        subtotal += item.line_total
        discount += item.discount

    if discount > subtotal:
        raise ValidationError("Total discount cannot exceed the quote subtotal")

    return QuoteTotals(subtotal=subtotal, discount=discount, total=subtotal - discount)
