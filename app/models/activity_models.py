# app/models/activity_models.py
from typing import Any, Dict

from app.utils.date_helpers import current_timestamp


def build_activity(activity_id: int, message: str) -> Dict[str, Any]:
    return {
        "id": activity_id,
        "message": message,
        "created_at": current_timestamp(),
    }
