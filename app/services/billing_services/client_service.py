import logging
from typing import Any, Dict, List

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore, Dataset, find_by_id, next_id
from app.schemas.billing_schemas.client_schema import ClientCreate, ClientOut
from app.schemas.response_schemas import SuccessResponse
from app.utils.activity_helpers import log_activity
from app.utils.date_helpers import current_timestamp

logger = logging.getLogger(__name__)


def build_client(data: Dataset, name: str, phone: str = "", email: str = "",
                 source: str = "", notes: str = "") -> Dict[str, Any]:
    """Append a new client record to the dataset. Shared with lead conversion."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Client name is required")
    client = {
        "id": next_id(data, "clients"),
        "name": name,
        "phone": (phone or "").strip(),
        "email": (email or "").strip(),
        "source": source or "",
        "date_added": current_timestamp(),
        "total_paid": 0,
        "projects_count": 0,
        "notes": notes or "",
    }
    data["clients"].append(client)
    return client


async def create_client(store: DataStore, client_data: ClientCreate) -> ClientOut:
    async with store.transaction() as db:
        client = build_client(db, **client_data.model_dump())
        log_activity(db, f"Client '{client['name']}' created")

    logger.info("Client %s created", client["id"])
    return ClientOut(**client)


async def list_clients(store: DataStore) -> List[ClientOut]:
    data = await store.read()
    return [ClientOut(**c) for c in data["clients"]]


async def get_client(store: DataStore, client_id: int) -> ClientOut:
    data = await store.read()
    client = find_by_id(data, "clients", client_id)
    if not client:
        raise NotFoundError(f"Client {client_id} not found")
    return ClientOut(**client)


# DELETE CLIENT
async def delete_client(store: DataStore, client_id: int) -> SuccessResponse:
    async with store.transaction() as db:
        client = find_by_id(db, "clients", client_id)
        if not client:
            raise NotFoundError(f"Client {client_id} not found")
        if any(p.get("client_id") == client_id for p in db["projects"]):
            raise ValidationError("Cannot delete client with existing projects")
        db["clients"] = [c for c in db["clients"] if c["id"] != client_id]
        log_activity(db, f"Client '{client['name']}' deleted")

    logger.info("Client %s deleted", client_id)
    return SuccessResponse(message="Client deleted successfully")
