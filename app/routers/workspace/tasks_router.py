# app/routers/workspace/tasks_router.py
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.store import DataStore, get_store
from app.schemas.response_schemas import SuccessResponse
from app.schemas.task_schemas import TaskCreate, TaskOut
from app.services import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskOut])
async def list_tasks_route(store: DataStore = Depends(get_store)):
    return await task_service.list_tasks(store)


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
async def create_task_route(data: TaskCreate, store: DataStore = Depends(get_store)):
    return await task_service.create_task(store, data)


@router.put("/{task_id}/complete", response_model=TaskOut)
async def complete_task_route(task_id: int, store: DataStore = Depends(get_store)):
    return await task_service.complete_task(store, task_id)


@router.delete("/{task_id}", response_model=SuccessResponse)
async def delete_task_route(task_id: int, store: DataStore = Depends(get_store)):
    return await task_service.delete_task(store, task_id)
