# app/routers/projects/projects_router.py
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.store import DataStore, get_store
from app.schemas.project_schemas import ProjectCreate, ProjectOut, ProjectStatusUpdate
from app.schemas.response_schemas import SuccessResponse
from app.services import project_service

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=List[ProjectOut])
async def list_projects_route(store: DataStore = Depends(get_store)):
    return await project_service.list_projects(store)


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project_route(data: ProjectCreate, store: DataStore = Depends(get_store)):
    return await project_service.create_project(store, data)


@router.get("/{project_id}", response_model=ProjectOut)
async def get_project_route(project_id: int, store: DataStore = Depends(get_store)):
    return await project_service.get_project(store, project_id)


@router.put("/{project_id}/status", response_model=ProjectOut)
async def update_project_status_route(
    project_id: int,
    data: ProjectStatusUpdate,
    store: DataStore = Depends(get_store),
):
    return await project_service.update_project_status(store, project_id, data)


@router.put("/{project_id}/paid", response_model=ProjectOut)
async def mark_project_paid_route(project_id: int, store: DataStore = Depends(get_store)):
    return await project_service.mark_project_paid(store, project_id)


@router.delete("/{project_id}", response_model=SuccessResponse)
async def delete_project_route(project_id: int, store: DataStore = Depends(get_store)):
    return await project_service.delete_project(store, project_id)
