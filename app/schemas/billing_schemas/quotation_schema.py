# app/schemas/billing_schemas/quotation_schema.py
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from app.core.config import MAX_QUOTE_VALIDITY_DAYS


# --------------------------
# Quote Item Schemas
# --------------------------
class QuoteItemCreate(BaseModel):
    name: str
    description: Optional[str] = None
    quantity: int = 1
    price: Decimal
    discount: Decimal = Decimal("0")


class QuoteItemOut(BaseModel):
    name: str
    description: str = ""
    quantity: int
    price: float
    discount: float = 0
    line_total: float = 0


# --------------------------
# Quote Schemas
# --------------------------
class QuoteCreate(BaseModel):
    client_name: str
    client_email: Optional[str] = ""
    client_phone: Optional[str] = ""
    items: List[QuoteItemCreate] = []
    notes: Optional[str] = None
    validity_days: Optional[int] = Field(None, ge=1, le=MAX_QUOTE_VALIDITY_DAYS)

    # Sent by older dashboards; totals and the document are always computed server-side
    subtotal: Optional[float] = None
    discount: Optional[float] = None
    total: Optional[float] = None
    html_content: Optional[str] = None


class QuoteOut(BaseModel):
    id: int
    quote_number: str
    client_name: str
    client_email: str = ""
    client_phone: str = ""
    items: List[QuoteItemOut] = []
    notes: str = ""
    validity_days: int = 30
    date_created: str
    valid_until: str = ""
    subtotal: float
    discount: float = 0
    total: float
    html_content: str = ""
