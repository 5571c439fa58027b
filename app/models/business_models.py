# app/models/business_models.py
import enum


class ProjectStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"


class TaskStatus(str, enum.Enum):
    OPEN = "open"
    COMPLETED = "completed"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class LeadStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    CONVERTED = "converted"
    LOST = "lost"


# Leads still being worked on
ACTIVE_LEAD_STATUSES = (LeadStatus.NEW.value, LeadStatus.IN_PROGRESS.value)

# Extensions the dashboard opens in the code editor
CODE_EXTENSIONS = frozenset({
    ".js", ".html", ".htm", ".css", ".json", ".py", ".php", ".java",
    ".cpp", ".c", ".ts", ".jsx", ".tsx", ".vue", ".sql",
})

INCOME_CATEGORY_PROJECT = "project"
