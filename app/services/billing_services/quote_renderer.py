# app/services/billing_services/quote_renderer.py
import re
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import jinja2

from app.core.config import CURRENCY_SYMBOL, WHATSAPP_COUNTRY_CODE
from app.core.exceptions import ValidationError
from app.models.billing_models.quotation_models import QuoteLineItem, QuoteTotals
from app.utils.decimal_utils import format_money

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
TEMPLATE_NAME = "quote_document.html"
DATE_FORMAT = "%d/%m/%Y"

REQUIRED_PROFILE_FIELDS = ("business_name", "phone")


class QuoteRenderer:
    """Renders a quote into one self-contained HTML document (inline CSS, no scripts)."""

    def __init__(
        self,
        templates_dir: Path = TEMPLATES_DIR,
        currency_symbol: str = CURRENCY_SYMBOL,
        country_code: str = WHATSAPP_COUNTRY_CODE,
    ):
        self.currency_symbol = currency_symbol
        self.country_code = re.sub(r"\D", "", country_code or "")
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(templates_dir)),
            autoescape=True,
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
        )

    def render(
        self,
        *,
        quote_number: str,
        client: Dict[str, str],
        items: Sequence[QuoteLineItem],
        totals: QuoteTotals,
        notes: Optional[str],
        validity_days: int,
        business: Optional[Dict[str, Any]],
        issue_date: date,
    ) -> str:
        """
        Render the quote document. Output depends only on the arguments, so the
        same data and issue date always give the same bytes.

        Raises:
            ValidationError: the business profile is missing or incomplete, or the
                expiry date falls outside the supported calendar.
        """
        profile = self._check_profile(business)
        try:
            valid_until = issue_date + timedelta(days=validity_days)
        except OverflowError as e:
            raise ValidationError(f"Validity of {validity_days} days is out of range") from e

        template = self.jinja_env.get_template(TEMPLATE_NAME)
        return template.render(
            quote_number=quote_number,
            issue_date=issue_date.strftime(DATE_FORMAT),
            valid_until=valid_until.strftime(DATE_FORMAT),
            business=profile,
            website_url=self._safe_url(profile["website"]),
            confirm_url=self.confirm_url(profile, quote_number),
            client={
                "name": client.get("name") or "",
                "phone": client.get("phone") or "",
                "email": client.get("email") or "",
            },
            rows=self._build_rows(items),
            totals={
                "subtotal": self._money(totals.subtotal),
                "discount": self._money(totals.discount) if totals.discount > 0 else None,
                "total": self._money(totals.total),
            },
            notes=(notes or "").strip(),
        )

    def confirm_url(self, business: Dict[str, Any], quote_number: str) -> str:
        """WhatsApp deep link to the business, pre-filled with a confirmation of the quote."""
        digits = re.sub(r"\D", "", str(business.get("phone") or ""))
        if self.country_code and not digits.startswith(self.country_code):
            digits = self.country_code + digits.lstrip("0")
        message = f"Hi {business.get('business_name', '')}, I would like to confirm quote {quote_number}"
        return f"https://wa.me/{digits}?text={quote(message, safe='')}"

    # --------------------------
    # Helpers
    # --------------------------
    def _money(self, value) -> str:
        return format_money(value, self.currency_symbol)

    def _build_rows(self, items: Sequence[QuoteLineItem]) -> List[Dict[str, Any]]:
        return [
            {
                "index": index,
                "name": item.name,
                "description": item.description,
                "discount": self._money(item.discount) if item.discount > 0 else None,
                "quantity": item.quantity,
                "unit_price": self._money(item.unit_price),
                "line_total": self._money(item.line_total),
            }
            for index, item in enumerate(items, start=1)
        ]

    @staticmethod
    def _check_profile(business: Optional[Dict[str, Any]]) -> Dict[str, str]:
        if not business:
            raise ValidationError("Business profile is not configured; cannot render quote")
        missing = [f for f in REQUIRED_PROFILE_FIELDS if not str(business.get(f) or "").strip()]
        if missing:
            raise ValidationError(f"Business profile is missing: {', '.join(missing)}")
        return {
            key: str(business.get(key) or "")
            for key in ("business_name", "owner", "phone", "email", "website")
        }

    @staticmethod
    def _safe_url(url: str) -> Optional[str]:
        if url.lower().startswith(("http://", "https://")):
            return url
        return None


_renderer: Optional[QuoteRenderer] = None


def get_quote_renderer() -> QuoteRenderer:
    global _renderer
    if _renderer is None:
        _renderer = QuoteRenderer()
    return _renderer
