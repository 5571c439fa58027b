# app/schemas/project_schemas.py
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.business_models import ProjectStatus


# --------------------------
# Project Files
# --------------------------
class ProjectFileOut(BaseModel):
    id: str
    name: str
    path: str
    size: int
    mimetype: str = ""
    extension: str = ""
    is_code: bool = False
    upload_date: str


class FileUploadResponse(BaseModel):
    success: bool = True
    files: List[ProjectFileOut]
    message: str


class FileInfo(BaseModel):
    name: str
    extension: str
    size: int


class FileContentResponse(BaseModel):
    success: bool = True
    content: str
    file: FileInfo


class FileContentUpdate(BaseModel):
    content: str


class FileSavedResponse(BaseModel):
    success: bool = True
    message: str
    size: int


# --------------------------
# Projects
# --------------------------
class ProjectCreate(BaseModel):
    client_id: int
    type: str
    price: float = Field(..., ge=0, allow_inf_nan=False)
    description: Optional[str] = ""
    deadline: Optional[str] = ""


class ProjectStatusUpdate(BaseModel):
    status: ProjectStatus


class ProjectOut(BaseModel):
    id: int
    client_id: int
    client_name: str = ""
    type: str = ""
    price: float
    description: str = ""
    deadline: str = ""
    status: str
    date_created: str
    date_completed: str = ""
    paid: bool = False
    payment_date: str = ""
    files: List[ProjectFileOut] = []
