# app/services/activity_service.py
from typing import List, Tuple

from app.core.store import DataStore
from app.schemas.activity_schemas import ActivityOut


async def get_activities(
    store: DataStore,
    page: int = 1,
    page_size: int = 20,
    order: str = "desc",
) -> Tuple[int, List[ActivityOut]]:
    data = await store.read()
    # ids grow with time, so they break ties between entries of the same second
    activities = sorted(
        data["activities"],
        key=lambda a: (a.get("created_at", ""), a.get("id", 0)),
        reverse=order.lower() != "asc",
    )
    start = (page - 1) * page_size
    return len(activities), [ActivityOut(**a) for a in activities[start:start + page_size]]
