# app/routers/system/dashboard_router.py
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.core.store import DataStore, get_store
from app.schemas.dashboard_schemas import BusinessProfile, DashboardStats
from app.services import dashboard_service

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard_stats_route(store: DataStore = Depends(get_store)):
    return await dashboard_service.get_dashboard_stats(store)


@router.get("/settings", response_model=BusinessProfile)
async def settings_route(store: DataStore = Depends(get_store)):
    return await dashboard_service.get_settings(store)


@router.get("/data")
async def all_data_route(store: DataStore = Depends(get_store)):
    return await dashboard_service.get_all_data(store)


# --------------------------
# BACKUP DOWNLOAD
# --------------------------
@router.post("/backup")
async def backup_route(store: DataStore = Depends(get_store)):
    filename, payload = await dashboard_service.build_backup(store)
    return Response(
        content=payload,
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
