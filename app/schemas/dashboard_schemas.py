# app/schemas/dashboard_schemas.py
from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_clients: int
    active_projects: int
    completed_projects: int
    active_leads: int
    total_income: float
    total_expenses: float
    net_profit: float
    pending_payments: float
    open_tasks: int


class BusinessProfile(BaseModel):
    business_name: str = ""
    owner: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""


class ChatRequest(BaseModel):
    message: str
    context: dict = {}


class ChatResponse(BaseModel):
    success: bool = True
    response: str
    timestamp: str
