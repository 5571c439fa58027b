# app/routers/system/activity_router.py
from fastapi import APIRouter, Depends, Query

from app.core.store import DataStore, get_store
from app.schemas.activity_schemas import ActivityListResponse
from app.services.activity_service import get_activities

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    store: DataStore = Depends(get_store),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    order: str = Query("desc", description="Order: asc or desc"),
):
    """
    Fetch the activity trail with pagination, newest first by default.
    """
    total, activities = await get_activities(store, page=page, page_size=page_size, order=order)
    return ActivityListResponse(
        message="Activities fetched successfully",
        total=total,
        data=activities,
    )
