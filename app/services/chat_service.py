# app/services/chat_service.py
"""
Scripted FAQ responder for the dashboard chat box.

An ordered list of (predicate, responder) rules over the lower-cased message;
the first matching rule answers from the current dataset. Nothing is learned
and no external service is called.
"""
import logging
from decimal import Decimal
from typing import Callable, List, Sequence, Tuple

from app.core.config import CURRENCY_SYMBOL
from app.core.store import DataStore, Dataset
from app.models.business_models import LeadStatus, ProjectStatus, TaskStatus
from app.schemas.dashboard_schemas import ChatRequest, ChatResponse
from app.utils.date_helpers import current_timestamp
from app.utils.decimal_utils import format_money, to_decimal

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]
Responder = Callable[[Dataset], str]
Rule = Tuple[Predicate, Responder]

OPEN_TASKS_WARNING_THRESHOLD = 5
NEW_LEADS_WARNING_THRESHOLD = 3

HELP_TEXT = (
    "I'm here to help! You can ask me about:\n"
    "- statistics (clients, projects, income)\n"
    "- recommendations for improvement\n"
    "- task and project status\n\n"
    "Just ask and I'll answer from the data in the system."
)


def mentions(*keywords: str) -> Predicate:
    return lambda text: any(k in text for k in keywords)


def _money(value: Decimal) -> str:
    return format_money(value, CURRENCY_SYMBOL)


def _total(records, field: str) -> Decimal:
    return sum((to_decimal(r.get(field) or 0) for r in records), Decimal("0"))


def _count(records, field: str, value: str) -> int:
    return sum(1 for r in records if r.get(field) == value)


# --------------------------
# Responders
# --------------------------
def clients_answer(data: Dataset) -> str:
    with_projects = sum(1 for c in data["clients"] if c.get("projects_count", 0) > 0)
    return f"You have {len(data['clients'])} clients in the system. {with_projects} of them have projects."


def finance_answer(data: Dataset) -> str:
    income = _total(data["income"], "amount")
    expenses = _total(data["expenses"], "amount")
    return (
        f"Total income: {_money(income)}\n"
        f"Total expenses: {_money(expenses)}\n"
        f"Net profit: {_money(income - expenses)}"
    )


def projects_answer(data: Dataset) -> str:
    projects = data["projects"]
    active = _count(projects, "status", ProjectStatus.IN_PROGRESS.value)
    completed = _count(projects, "status", ProjectStatus.COMPLETED.value)
    unpaid = sum(1 for p in projects if not p.get("paid"))
    return (
        f"You have {active} active projects and {completed} completed projects. "
        f"{unpaid} projects are awaiting payment."
    )


def tasks_answer(data: Dataset) -> str:
    open_tasks = _count(data["tasks"], "status", TaskStatus.OPEN.value)
    completed = _count(data["tasks"], "status", TaskStatus.COMPLETED.value)
    return f"You have {open_tasks} open tasks and {completed} completed tasks."


def recommendations_answer(data: Dataset) -> str:
    recommendations = []
    if _count(data["tasks"], "status", TaskStatus.OPEN.value) > OPEN_TASKS_WARNING_THRESHOLD:
        recommendations.append(
            f"- You have more than {OPEN_TASKS_WARNING_THRESHOLD} open tasks; it's worth setting priorities"
        )
    if any(not p.get("paid") for p in data["projects"]):
        recommendations.append("- Some projects are still unpaid; keep track of the payments")
    if _count(data["leads"], "status", LeadStatus.NEW.value) > NEW_LEADS_WARNING_THRESHOLD:
        recommendations.append("- New leads are waiting to be handled")

    if not recommendations:
        return "Everything looks great! Keep up the good work!"
    return "Recommendations:\n\n" + "\n".join(recommendations)


# Evaluated top-down; the first match wins. Hebrew keywords kept for the original dashboard.
RULES: List[Rule] = [
    (mentions("how many clients", "number of clients", "כמה לקוחות", "מספר לקוחות"), clients_answer),
    (mentions("income", "revenue", "profit", "הכנסות", "רווחים"), finance_answer),
    (mentions("project", "פרויקטים"), projects_answer),
    (mentions("task", "משימות"), tasks_answer),
    (mentions("recommend", "improve", "המלצות", "שיפור"), recommendations_answer),
]


def respond(message: str, data: Dataset, rules: Sequence[Rule] = RULES) -> str:
    text = (message or "").lower()
    for matches, answer in rules:
        if matches(text):
            return answer(data)
    return HELP_TEXT


async def answer_message(store: DataStore, request: ChatRequest) -> ChatResponse:
    data = await store.read()
    reply = respond(request.message, data)
    logger.debug("Chat message answered (%d chars)", len(reply))
    return ChatResponse(response=reply, timestamp=current_timestamp())
