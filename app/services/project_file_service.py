# app/services/project_file_service.py
"""
Project attachments: files live under <UPLOAD_DIR>/projects/<project id>/,
their metadata in the project's "files" list inside the dataset.
"""
import asyncio
import logging
import mimetypes
import shutil
import time
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Sequence, Tuple
from uuid import uuid4

from fastapi import UploadFile

from app.core import config
from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore, Dataset, find_by_id
from app.models.business_models import CODE_EXTENSIONS
from app.schemas.project_schemas import (
    FileContentResponse,
    FileInfo,
    FileSavedResponse,
    FileUploadResponse,
    ProjectFileOut,
)
from app.schemas.response_schemas import SuccessResponse
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import current_timestamp

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


# --------------------------
# Paths
# --------------------------
def upload_root() -> Path:
    return Path(config.UPLOAD_DIR)


def project_upload_dir(project_id: int) -> Path:
    return upload_root() / "projects" / str(project_id)


def safe_filename(filename: str) -> str:
    """Base name only; directory parts from either path style are dropped."""
    name = Path((filename or "").replace("\\", "/")).name.strip()
    if name in ("", ".", ".."):
        return "file"
    return name


def _stored_path(record: Dict[str, Any]) -> Path:
    path = Path(record["path"]).resolve()
    root = upload_root().resolve()
    if root != path and root not in path.parents:
        raise NotFoundError(f"File {record.get('id')} is outside the upload directory")
    return path


def _find_file(data: Dataset, project_id: int, file_id: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    project = find_by_id(data, "projects", project_id)
    if not project:
        raise NotFoundError(f"Project {project_id} not found")
    for record in project.get("files") or []:
        if str(record.get("id")) == file_id:
            return project, record
    raise NotFoundError(f"File {file_id} not found")


# --------------------------
# Blocking disk helpers
# --------------------------
def _write_upload(src: BinaryIO, dest: Path, limit: int) -> int:
    size = 0
    try:
        with open(dest, "wb") as out:
            while True:
                chunk = src.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > limit:
                    raise ValidationError(
                        f"File '{dest.name}' exceeds the {config.MAX_UPLOAD_SIZE_MB} MB limit"
                    )
                out.write(chunk)
    except BaseException:
        dest.unlink(missing_ok=True)
        raise
    return size


def _unique_destination(directory: Path, name: str) -> Path:
    stamp = int(time.time() * 1000)
    dest = directory / f"{stamp}-{name}"
    counter = 1
    while dest.exists():
        dest = directory / f"{stamp}-{counter}-{name}"
        counter += 1
    return dest


def _discard(paths: Sequence[Path]) -> None:
    for path in paths:
        path.unlink(missing_ok=True)


async def _save_upload(project_id: int, upload: UploadFile) -> Dict[str, Any]:
    name = safe_filename(upload.filename)
    directory = project_upload_dir(project_id)
    await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
    dest = _unique_destination(directory, name)
    size = await asyncio.to_thread(_write_upload, upload.file, dest, config.MAX_UPLOAD_SIZE)

    extension = Path(name).suffix.lower()
    return {
        "id": uuid4().hex,
        "name": name,
        "path": dest.as_posix(),
        "size": size,
        "mimetype": upload.content_type or mimetypes.guess_type(name)[0] or "application/octet-stream",
        "extension": extension,
        "is_code": extension in CODE_EXTENSIONS,
        "upload_date": current_timestamp(),
    }


# --------------------------
# UPLOAD FILES
# --------------------------
async def upload_files(store: DataStore, project_id: int, files: List[UploadFile]) -> FileUploadResponse:
    if not files:
        raise ValidationError("No files were uploaded")
    if len(files) > config.MAX_UPLOAD_FILES:
        raise ValidationError(f"At most {config.MAX_UPLOAD_FILES} files can be uploaded at once")

    data = await store.read()
    if not find_by_id(data, "projects", project_id):
        raise NotFoundError(f"Project {project_id} not found")

    records: List[Dict[str, Any]] = []
    try:
        for upload in files:
            records.append(await _save_upload(project_id, upload))

        async with store.transaction() as db:
            project = find_by_id(db, "projects", project_id)
            if not project:
                raise NotFoundError(f"Project {project_id} not found")
            project.setdefault("files", []).extend(records)
            log_activity(db, f"{len(records)} file(s) uploaded to project #{project_id}")
    except BaseException:
        await asyncio.to_thread(_discard, [Path(r["path"]) for r in records])
        raise

    logger.info("Uploaded %d file(s) to project %s", len(records), project_id)
    return FileUploadResponse(
        files=[ProjectFileOut(**r) for r in records],
        message=f"{len(records)} file(s) uploaded successfully",
    )


# --------------------------
# LIST FILES
# --------------------------
async def list_files(store: DataStore, project_id: int) -> List[ProjectFileOut]:
    data = await store.read()
    project = find_by_id(data, "projects", project_id)
    if not project:
        raise NotFoundError(f"Project {project_id} not found")
    return [ProjectFileOut(**f) for f in project.get("files") or []]


# --------------------------
# DELETE FILE
# --------------------------
async def delete_file(store: DataStore, project_id: int, file_id: str) -> SuccessResponse:
    async with store.transaction() as db:
        project, record = _find_file(db, project_id, file_id)
        project["files"] = [f for f in project["files"] if f is not record]
        log_activity(db, f"File '{record['name']}' deleted from project #{project_id}")

    try:
        await asyncio.to_thread(_stored_path(record).unlink, missing_ok=True)
    except (OSError, NotFoundError) as e:
        logger.warning("Could not remove file %s from disk: %s", record.get("path"), e)
    return SuccessResponse(message="File deleted successfully")


# --------------------------
# FILE CONTENT (code editor)
# --------------------------
def _read_text(path: Path) -> str:
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8", errors="replace")


def _write_text(path: Path, content: str) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path.stat().st_size


async def read_file_content(store: DataStore, project_id: int, file_id: str) -> FileContentResponse:
    data = await store.read()
    _, record = _find_file(data, project_id, file_id)
    content = await asyncio.to_thread(_read_text, _stored_path(record))
    return FileContentResponse(
        content=content,
        file=FileInfo(name=record["name"], extension=record.get("extension", ""), size=record.get("size", 0)),
    )


async def save_file_content(store: DataStore, project_id: int, file_id: str, content: str) -> FileSavedResponse:
    async with store.transaction() as db:
        _, record = _find_file(db, project_id, file_id)
        record["size"] = await asyncio.to_thread(_write_text, _stored_path(record), content)
        log_activity(db, f"File '{record['name']}' edited in project #{project_id}")

    return FileSavedResponse(message="File saved successfully", size=record["size"])


async def get_file_for_download(store: DataStore, project_id: int, file_id: str) -> Tuple[Path, str, str]:
    """(path on disk, original name, media type) for serving the raw file."""
    data = await store.read()
    _, record = _find_file(data, project_id, file_id)
    path = _stored_path(record)
    if not path.is_file():
        raise NotFoundError(f"File {file_id} is missing from disk")
    media_type = record.get("mimetype") or mimetypes.guess_type(record["name"])[0] or "application/octet-stream"
    return path, record["name"], media_type


# --------------------------
# PROJECT CLEANUP
# --------------------------
async def remove_project_dir(project_id: int) -> None:
    directory = project_upload_dir(project_id)
    if not directory.exists():
        return
    try:
        await asyncio.to_thread(shutil.rmtree, directory)
    except OSError as e:
        logger.warning("Could not remove upload directory %s: %s", directory, e)
