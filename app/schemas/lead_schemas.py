# app/schemas/lead_schemas.py
from typing import Optional

from pydantic import BaseModel


class LeadCreate(BaseModel):
    name: str
    phone: Optional[str] = ""
    email: Optional[str] = ""
    source: Optional[str] = ""
    interest: Optional[str] = ""
    notes: Optional[str] = ""


class LeadOut(BaseModel):
    id: int
    name: str
    phone: str = ""
    email: str = ""
    source: str = ""
    interest: str = ""
    notes: str = ""
    status: str
    date_added: str
    follow_up_date: str = ""
