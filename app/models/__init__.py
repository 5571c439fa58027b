# app/models/__init__.py
from app.models.business_models import LeadStatus, ProjectStatus, TaskPriority, TaskStatus
from app.models.billing_models.quotation_models import QuoteLineItem, QuoteTotals, calculate_totals
