# app/services/billing_services/quotation_service.py
import logging
import math
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from app.core.config import DEFAULT_QUOTE_VALIDITY_DAYS
from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore, find_by_id, next_id, remove_by_id
from app.models.billing_models.quotation_models import QuoteLineItem, calculate_totals
from app.schemas.billing_schemas.quotation_schema import QuoteCreate, QuoteOut
from app.schemas.response_schemas import SuccessResponse
from app.services.billing_services.quote_renderer import QuoteRenderer, get_quote_renderer
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import TIMESTAMP_FORMAT, utc_now

logger = logging.getLogger(__name__)

QUOTE_NUMBER_PREFIX = "QT-"
QUOTE_NUMBER_TIME_FORMAT = "%Y-%m-%d_%H-%M-%S"


# --------------------------
# Helper: Generate unique quote number
# --------------------------
def generate_quote_number(now: datetime, existing: Iterable[str] = ()) -> str:
    """
    QT-2024-05-01_13-45-00: sortable, and safe in file names and URLs.
    Numbers minted within the same second get a -002, -003... suffix, which
    still sorts after the plain number and before the next second.
    """
    base = f"{QUOTE_NUMBER_PREFIX}{now.strftime(QUOTE_NUMBER_TIME_FORMAT)}"
    taken = set(existing)
    if base not in taken:
        return base
    suffix = 2
    while f"{base}-{suffix:03d}" in taken:
        suffix += 1
    return f"{base}-{suffix:03d}"


# --------------------------
# CREATE QUOTE
# --------------------------
async def create_quote(
    store: DataStore,
    data: QuoteCreate,
    renderer: Optional[QuoteRenderer] = None,
    now: Optional[datetime] = None,
) -> QuoteOut:
    renderer = renderer or get_quote_renderer()
    created = now or utc_now()

    client_name = (data.client_name or "").strip()
    if not client_name:
        raise ValidationError("Client name is required")

    items = [QuoteLineItem.from_payload(item.model_dump()) for item in data.items]
    totals = calculate_totals(items)
    hinted = data.total
    if hinted is not None and math.isfinite(hinted) and abs(Decimal(str(hinted)) - totals.total) >= Decimal("0.01"):
        logger.info(
            "Ignoring client-submitted total %s for quote of '%s'; computed %s",
            hinted, client_name, totals.total,
        )

    validity_days = data.validity_days or DEFAULT_QUOTE_VALIDITY_DAYS
    client = {
        "name": client_name,
        "email": (data.client_email or "").strip(),
        "phone": (data.client_phone or "").strip(),
    }
    notes = (data.notes or "").strip()

    async with store.transaction() as db:
        quote_number = generate_quote_number(created, (q.get("quote_number") for q in db["quotes"]))
        html_content = renderer.render(
            quote_number=quote_number,
            client=client,
            items=items,
            totals=totals,
            notes=notes,
            validity_days=validity_days,
            business=db["settings"],
            issue_date=created.date(),
        )
        quote = {
            "id": next_id(db, "quotes"),
            "quote_number": quote_number,
            "client_name": client["name"],
            "client_email": client["email"],
            "client_phone": client["phone"],
            "items": [item.to_record() for item in items],
            "notes": notes,
            "validity_days": validity_days,
            "date_created": created.strftime(TIMESTAMP_FORMAT),
            "valid_until": (created.date() + timedelta(days=validity_days)).isoformat(),
            **totals.to_record(),
            "html_content": html_content,
        }
        db["quotes"].append(quote)
        log_activity(db, f"Quote '{quote_number}' created for '{client_name}'")

    logger.info("Quote %s created (id=%s, total=%s)", quote_number, quote["id"], quote["total"])
    return QuoteOut(**quote)


# --------------------------
# LIST ALL QUOTES
# --------------------------
async def list_quotes(store: DataStore) -> List[QuoteOut]:
    data = await store.read()
    return [QuoteOut(**q) for q in data["quotes"]]


# --------------------------
# GET SINGLE QUOTE BY ID
# --------------------------
async def get_quote(store: DataStore, quote_id: int) -> QuoteOut:
    data = await store.read()
    quote = find_by_id(data, "quotes", quote_id)
    if not quote:
        raise NotFoundError(f"Quote {quote_id} not found")
    return QuoteOut(**quote)


async def get_quote_document(store: DataStore, quote_id: int) -> Tuple[str, str]:
    """Stored document snapshot as (quote_number, html)."""
    quote = await get_quote(store, quote_id)
    return quote.quote_number, quote.html_content


# --------------------------
# DELETE QUOTE
# --------------------------
async def delete_quote(store: DataStore, quote_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        quote = remove_by_id(db, "quotes", quote_id)
        if not quote:
            raise NotFoundError(f"Quote {quote_id} not found")
        log_activity(db, f"Quote '{quote.get('quote_number')}' deleted")

    logger.info("Quote %s deleted", quote_id)
    return SuccessResponse(message="Quote deleted successfully")
