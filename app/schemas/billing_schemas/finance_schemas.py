# app/schemas/billing_schemas/finance_schemas.py
from typing import Optional

from pydantic import BaseModel, Field


# --------------------------
# Income
# --------------------------
class IncomeCreate(BaseModel):
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    source: str
    category: Optional[str] = ""


class IncomeOut(BaseModel):
    id: int
    amount: float
    source: str = ""
    category: str = ""
    date: str


# --------------------------
# Expenses
# --------------------------
class ExpenseCreate(BaseModel):
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    description: str
    category: Optional[str] = ""


class ExpenseOut(BaseModel):
    id: int
    amount: float
    description: str = ""
    category: str = ""
    date: str
