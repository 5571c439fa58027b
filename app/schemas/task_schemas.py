# app/schemas/task_schemas.py
from typing import Optional

from pydantic import BaseModel

from app.models.business_models import TaskPriority


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = ""
    priority: TaskPriority = TaskPriority.NORMAL
    due_date: Optional[str] = ""


class TaskOut(BaseModel):
    id: int
    title: str
    description: str = ""
    priority: str
    due_date: str = ""
    status: str
    date_created: str
    date_completed: str = ""
