# app/utils/activity_helpers.py
from app.core.config import ACTIVITY_LOG_LIMIT
from app.core.store import Dataset, next_id
from app.models.activity_models import build_activity


def log_activity(data: Dataset, message: str, limit: int = ACTIVITY_LOG_LIMIT) -> None:
    """
    Adds an activity entry to the dataset. The caller's transaction persists it
    together with the change it describes.
    """
    data["activities"].append(build_activity(next_id(data, "activities"), message))
    if limit and len(data["activities"]) > limit:
        data["activities"] = data["activities"][-limit:]
