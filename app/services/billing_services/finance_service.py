# app/services/billing_services/finance_service.py
import logging
from typing import Any, Dict, List

from app.core.exceptions import NotFoundError
from app.core.store import DataStore, Dataset, next_id, remove_by_id
from app.schemas.billing_schemas.finance_schemas import (
    ExpenseCreate,
    ExpenseOut,
    IncomeCreate,
    IncomeOut,
)
from app.schemas.response_schemas import SuccessResponse
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import current_timestamp
from app.utils.decimal_utils import money_to_float, to_decimal

logger = logging.getLogger(__name__)


def add_income_entry(data: Dataset, amount: Any, source: str, category: str = "") -> Dict[str, Any]:
    """Append an income record. Also used when a project is marked as paid."""
    entry = {
        "id": next_id(data, "income"),
        "amount": money_to_float(to_decimal(amount)),
        "source": source,
        "category": category or "",
        "date": current_timestamp(),
    }
    data["income"].append(entry)
    return entry


# --------------------------
# INCOME
# --------------------------
async def create_income(store: DataStore, data: IncomeCreate) -> IncomeOut:
    async with store.transaction() as db:
        entry = add_income_entry(db, data.amount, data.source.strip(), data.category)
        log_activity(db, f"Income of {entry['amount']:.2f} recorded from '{entry['source']}'")

    logger.info("Income %s recorded", entry["id"])
    return IncomeOut(**entry)


async def list_income(store: DataStore) -> List[IncomeOut]:
    data = await store.read()
    return [IncomeOut(**i) for i in data["income"]]


async def delete_income(store: DataStore, income_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        entry = remove_by_id(db, "income", income_id)
        if not entry:
            raise NotFoundError(f"Income entry {income_id} not found")
        log_activity(db, f"Income entry #{income_id} deleted")

    return SuccessResponse(message="Income deleted successfully")


# --------------------------
# EXPENSES
# --------------------------
async def create_expense(store: DataStore, data: ExpenseCreate) -> ExpenseOut:
    async with store.transaction() as db:
        entry = {
            "id": next_id(db, "expenses"),
            "amount": money_to_float(to_decimal(data.amount)),
            "description": data.description.strip(),
            "category": data.category or "",
            "date": current_timestamp(),
        }
        db["expenses"].append(entry)
        log_activity(db, f"Expense of {entry['amount']:.2f} recorded: '{entry['description']}'")

    logger.info("Expense %s recorded", entry["id"])
    return ExpenseOut(**entry)


async def list_expenses(store: DataStore) -> List[ExpenseOut]:
    data = await store.read()
    return [ExpenseOut(**e) for e in data["expenses"]]


async def delete_expense(store: DataStore, expense_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        entry = remove_by_id(db, "expenses", expense_id)
        if not entry:
            raise NotFoundError(f"Expense {expense_id} not found")
        log_activity(db, f"Expense #{expense_id} deleted")

    return SuccessResponse(message="Expense deleted successfully")
