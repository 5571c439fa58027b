# app/services/project_service.py
import logging
from typing import List

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore, find_by_id, next_id
from app.models.business_models import INCOME_CATEGORY_PROJECT, ProjectStatus
from app.schemas.project_schemas import ProjectCreate, ProjectOut, ProjectStatusUpdate
from app.schemas.response_schemas import SuccessResponse
from app.services.billing_services.finance_service import add_income_entry
from app.services.project_file_service import remove_project_dir
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import current_timestamp
from app.utils.decimal_utils import money_to_float, to_decimal

logger = logging.getLogger(__name__)


# --------------------------
# CREATE PROJECT
# --------------------------
async def create_project(store: DataStore, data: ProjectCreate) -> ProjectOut:
    async with store.transaction() as db:
        client = find_by_id(db, "clients", data.client_id)
        if not client:
            raise NotFoundError(f"Client {data.client_id} not found")
        if not data.type.strip():
            raise ValidationError("Project type is required")

        project = {
            "id": next_id(db, "projects"),
            "client_id": client["id"],
            "client_name": client["name"],
            "type": data.type.strip(),
            "price": money_to_float(to_decimal(data.price)),
            "description": data.description or "",
            "deadline": data.deadline or "",
            "status": ProjectStatus.IN_PROGRESS.value,
            "date_created": current_timestamp(),
            "date_completed": "",
            "paid": False,
            "payment_date": "",
            "files": [],
        }
        db["projects"].append(project)
        client["projects_count"] = client.get("projects_count", 0) + 1
        log_activity(db, f"Project #{project['id']} ({project['type']}) created for '{client['name']}'")

    logger.info("Project %s created for client %s", project["id"], client["id"])
    return ProjectOut(**project)


# --------------------------
# LIST / GET PROJECTS
# --------------------------
async def list_projects(store: DataStore) -> List[ProjectOut]:
    data = await store.read()
    return [ProjectOut(**p) for p in data["projects"]]


async def get_project(store: DataStore, project_id: int) -> ProjectOut:
    data = await store.read()
    project = find_by_id(data, "projects", project_id)
    if not project:
        raise NotFoundError(f"Project {project_id} not found")
    return ProjectOut(**project)


# --------------------------
# UPDATE STATUS
# --------------------------
async def update_project_status(store: DataStore, project_id: int, data: ProjectStatusUpdate) -> ProjectOut:
    async with store.transaction() as db:
        project = find_by_id(db, "projects", project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        project["status"] = data.status.value
        if data.status == ProjectStatus.COMPLETED:
            project["date_completed"] = current_timestamp()
        log_activity(db, f"Project #{project_id} status changed to '{data.status.value}'")

    return ProjectOut(**project)


# --------------------------
# MARK AS PAID
# --------------------------
async def mark_project_paid(store: DataStore, project_id: int) -> ProjectOut:
    """
    Marks the project paid, credits the client's total and books the income,
    all in one write.
    """
    async with store.transaction() as db:
        project = find_by_id(db, "projects", project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        if project.get("paid"):
            raise ValidationError(f"Project {project_id} is already marked as paid")

        project["paid"] = True
        project["payment_date"] = current_timestamp()

        client = find_by_id(db, "clients", project["client_id"])
        if client:
            client["total_paid"] = money_to_float(
                to_decimal(client.get("total_paid", 0)) + to_decimal(project["price"])
            )

        add_income_entry(
            db,
            project["price"],
            source=f"Project #{project['id']} - {project['client_name']}",
            category=INCOME_CATEGORY_PROJECT,
        )
        log_activity(db, f"Project #{project_id} marked as paid")

    logger.info("Project %s marked as paid", project_id)
    return ProjectOut(**project)


# --------------------------
# DELETE PROJECT
# --------------------------
async def delete_project(store: DataStore, project_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        project = find_by_id(db, "projects", project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")

        client = find_by_id(db, "clients", project["client_id"])
        if client and client.get("projects_count", 0) > 0:
            client["projects_count"] -= 1

        db["projects"] = [p for p in db["projects"] if p["id"] != project_id]
        log_activity(db, f"Project #{project_id} deleted")

    await remove_project_dir(project_id)
    logger.info("Project %s deleted", project_id)
    return SuccessResponse(message="Project deleted successfully")
