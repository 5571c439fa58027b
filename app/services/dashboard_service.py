# app/services/dashboard_service.py
import json
import time
from decimal import Decimal
from typing import Iterable, Tuple

from app.core.store import DataStore, Dataset
from app.models.business_models import ACTIVE_LEAD_STATUSES, ProjectStatus, TaskStatus
from app.schemas.dashboard_schemas import BusinessProfile, DashboardStats
from app.utils.decimal_utils import money_to_float, to_decimal


def _sum_amounts(values: Iterable) -> Decimal:
    return sum((to_decimal(v or 0) for v in values), Decimal("0"))


def compute_stats(data: Dataset) -> DashboardStats:
    total_income = _sum_amounts(i.get("amount") for i in data["income"])
    total_expenses = _sum_amounts(e.get("amount") for e in data["expenses"])
    pending = _sum_amounts(p.get("price") for p in data["projects"] if not p.get("paid"))

    return DashboardStats(
        total_clients=len(data["clients"]),
        active_projects=sum(1 for p in data["projects"] if p.get("status") == ProjectStatus.IN_PROGRESS.value),
        completed_projects=sum(1 for p in data["projects"] if p.get("status") == ProjectStatus.COMPLETED.value),
        active_leads=sum(1 for l in data["leads"] if l.get("status") in ACTIVE_LEAD_STATUSES),
        total_income=money_to_float(total_income),
        total_expenses=money_to_float(total_expenses),
        net_profit=money_to_float(total_income - total_expenses),
        pending_payments=money_to_float(pending),
        open_tasks=sum(1 for t in data["tasks"] if t.get("status") == TaskStatus.OPEN.value),
    )


async def get_dashboard_stats(store: DataStore) -> DashboardStats:
    return compute_stats(await store.read())


async def get_settings(store: DataStore) -> BusinessProfile:
    data = await store.read()
    return BusinessProfile(**data["settings"])


async def get_all_data(store: DataStore) -> Dataset:
    return await store.read()


async def build_backup(store: DataStore) -> Tuple[str, bytes]:
    """(file name, JSON bytes) of the full dataset."""
    data = await store.read()
    filename = f"backup-{int(time.time() * 1000)}.json"
    return filename, json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
