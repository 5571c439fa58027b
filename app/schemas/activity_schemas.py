# app/schemas/activity_schemas.py
from typing import List

from pydantic import BaseModel


class ActivityOut(BaseModel):
    id: int
    message: str
    created_at: str


class ActivityListResponse(BaseModel):
    message: str
    total: int
    data: List[ActivityOut]
