# app/routers/projects/files_router.py
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from app.core.store import DataStore, get_store
from app.schemas.project_schemas import (
    FileContentResponse,
    FileContentUpdate,
    FileSavedResponse,
    FileUploadResponse,
    ProjectFileOut,
)
from app.schemas.response_schemas import SuccessResponse
from app.services import project_file_service

router = APIRouter(prefix="/projects", tags=["Project Files"])


# --------------------------
# UPLOAD
# --------------------------
@router.post("/{project_id}/upload", response_model=FileUploadResponse)
async def upload_files_route(
    project_id: int,
    files: List[UploadFile] = File(...),
    store: DataStore = Depends(get_store),
):
    return await project_file_service.upload_files(store, project_id, files)


# --------------------------
# LIST / DELETE
# --------------------------
@router.get("/{project_id}/files", response_model=List[ProjectFileOut])
async def list_files_route(project_id: int, store: DataStore = Depends(get_store)):
    return await project_file_service.list_files(store, project_id)


@router.delete("/{project_id}/files/{file_id}", response_model=SuccessResponse)
async def delete_file_route(project_id: int, file_id: str, store: DataStore = Depends(get_store)):
    return await project_file_service.delete_file(store, project_id, file_id)


# --------------------------
# CODE EDITOR
# --------------------------
@router.get("/{project_id}/files/{file_id}/content", response_model=FileContentResponse)
async def read_file_content_route(project_id: int, file_id: str, store: DataStore = Depends(get_store)):
    return await project_file_service.read_file_content(store, project_id, file_id)


@router.put("/{project_id}/files/{file_id}/content", response_model=FileSavedResponse)
async def save_file_content_route(
    project_id: int,
    file_id: str,
    data: FileContentUpdate,
    store: DataStore = Depends(get_store),
):
    return await project_file_service.save_file_content(store, project_id, file_id, data.content)


@router.get("/{project_id}/files/{file_id}/raw")
async def raw_file_route(project_id: int, file_id: str, store: DataStore = Depends(get_store)):
    path, name, media_type = await project_file_service.get_file_for_download(store, project_id, file_id)
    return FileResponse(path, media_type=media_type, filename=name, content_disposition_type="inline")
