from typing import Optional

from pydantic import BaseModel


class ClientBase(BaseModel):
    name: str
    phone: Optional[str] = ""
    email: Optional[str] = ""
    source: Optional[str] = ""
    notes: Optional[str] = ""


class ClientCreate(ClientBase):
    pass


class ClientOut(BaseModel):
    id: int
    name: str
    phone: str = ""
    email: str = ""
    source: str = ""
    notes: str = ""
    date_added: str
    total_paid: float = 0
    projects_count: int = 0
