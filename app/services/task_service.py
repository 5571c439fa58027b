# app/services/task_service.py
import logging
from typing import List

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore, find_by_id, next_id, remove_by_id
from app.models.business_models import TaskStatus
from app.schemas.response_schemas import SuccessResponse
from app.schemas.task_schemas import TaskCreate, TaskOut
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import current_timestamp

logger = logging.getLogger(__name__)


async def create_task(store: DataStore, data: TaskCreate) -> TaskOut:
    title = data.title.strip()
    if not title:
        raise ValidationError("Task title is required")

    async with store.transaction() as db:
        task = {
            "id": next_id(db, "tasks"),
            "title": title,
            "description": data.description or "",
            "priority": data.priority.value,
            "due_date": data.due_date or "",
            "status": TaskStatus.OPEN.value,
            "date_created": current_timestamp(),
            "date_completed": "",
        }
        db["tasks"].append(task)
        log_activity(db, f"Task '{title}' created")

    return TaskOut(**task)


async def list_tasks(store: DataStore) -> List[TaskOut]:
    data = await store.read()
    return [TaskOut(**t) for t in data["tasks"]]


async def complete_task(store: DataStore, task_id: int) -> TaskOut:
    async with store.transaction() as db:
        task = find_by_id(db, "tasks", task_id)
        if not task:
            raise NotFoundError(f"Task {task_id} not found")
        task["status"] = TaskStatus.COMPLETED.value
        task["date_completed"] = current_timestamp()
        log_activity(db, f"Task '{task['title']}' completed")

    return TaskOut(**task)


async def delete_task(store: DataStore, task_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        task = remove_by_id(db, "tasks", task_id)
        if not task:
            raise NotFoundError(f"Task {task_id} not found")
        log_activity(db, f"Task '{task['title']}' deleted")

    logger.info("Task %s deleted", task_id)
    return SuccessResponse(message="Task deleted successfully")
