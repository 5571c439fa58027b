# app/services/lead_service.py
import logging
from typing import List

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore, find_by_id, next_id, remove_by_id
from app.models.business_models import LeadStatus
from app.schemas.billing_schemas.client_schema import ClientOut
from app.schemas.lead_schemas import LeadCreate, LeadOut
from app.schemas.response_schemas import SuccessResponse
from app.services.billing_services.client_service import build_client
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import current_timestamp

logger = logging.getLogger(__name__)


async def create_lead(store: DataStore, data: LeadCreate) -> LeadOut:
    name = data.name.strip()
    if not name:
        raise ValidationError("Lead name is required")

    async with store.transaction() as db:
        lead = {
            "id": next_id(db, "leads"),
            "name": name,
            "phone": (data.phone or "").strip(),
            "email": (data.email or "").strip(),
            "source": data.source or "",
            "interest": data.interest or "",
            "notes": data.notes or "",
            "status": LeadStatus.NEW.value,
            "date_added": current_timestamp(),
            "follow_up_date": "",
        }
        db["leads"].append(lead)
        log_activity(db, f"Lead '{name}' added")

    return LeadOut(**lead)


async def list_leads(store: DataStore) -> List[LeadOut]:
    data = await store.read()
    return [LeadOut(**l) for l in data["leads"]]


# --------------------------
# CONVERT LEAD TO CLIENT
# --------------------------
async def convert_lead(store: DataStore, lead_id: int) -> ClientOut:
    async with store.transaction() as db:
        lead = find_by_id(db, "leads", lead_id)
        if not lead:
            raise NotFoundError(f"Lead {lead_id} not found")
        if lead.get("status") == LeadStatus.CONVERTED.value:
            raise ValidationError(f"Lead {lead_id} was already converted to a client")

        client = build_client(
            db,
            name=lead["name"],
            phone=lead.get("phone", ""),
            email=lead.get("email", ""),
            source=lead.get("source", ""),
            notes=lead.get("notes", ""),
        )
        lead["status"] = LeadStatus.CONVERTED.value
        log_activity(db, f"Lead '{lead['name']}' converted to client #{client['id']}")

    logger.info("Lead %s converted to client %s", lead_id, client["id"])
    return ClientOut(**client)


async def delete_lead(store: DataStore, lead_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        lead = remove_by_id(db, "leads", lead_id)
        if not lead:
            raise NotFoundError(f"Lead {lead_id} not found")
        log_activity(db, f"Lead '{lead['name']}' deleted")

    return SuccessResponse(message="Lead deleted successfully")
