# app/routers/workspace/leads_router.py
from typing import List

from fastapi import APIRouter, Depends, status

from app.core.store import DataStore, get_store
from app.schemas.billing_schemas.client_schema import ClientOut
from app.schemas.lead_schemas import LeadCreate, LeadOut
from app.schemas.response_schemas import SuccessResponse
from app.services import lead_service

router = APIRouter(prefix="/leads", tags=["Leads"])


@router.get("", response_model=List[LeadOut])
async def list_leads_route(store: DataStore = Depends(get_store)):
    return await lead_service.list_leads(store)


@router.post("", response_model=LeadOut, status_code=status.HTTP_201_CREATED)
async def create_lead_route(data: LeadCreate, store: DataStore = Depends(get_store)):
    return await lead_service.create_lead(store, data)


# --------------------------
# CONVERT LEAD TO CLIENT
# --------------------------
@router.post("/{lead_id}/convert", response_model=ClientOut)
async def convert_lead_route(lead_id: int, store: DataStore = Depends(get_store)):
    return await lead_service.convert_lead(store, lead_id)


@router.delete("/{lead_id}", response_model=SuccessResponse)
async def delete_lead_route(lead_id: int, store: DataStore = Depends(get_store)):
    return await lead_service.delete_lead(store, lead_id)
