from typing import List

from fastapi import APIRouter, Depends, status

from app.core.store import DataStore, get_store
from app.schemas.billing_schemas.client_schema import ClientCreate, ClientOut
from app.schemas.response_schemas import SuccessResponse
from app.services.billing_services import client_service

router = APIRouter(prefix="/clients", tags=["Clients"])


# CREATE
@router.post("", response_model=ClientOut, status_code=status.HTTP_201_CREATED)
async def create_client_route(client: ClientCreate, store: DataStore = Depends(get_store)):
    return await client_service.create_client(store, client)


# GET ALL
@router.get("", response_model=List[ClientOut])
async def list_clients_route(store: DataStore = Depends(get_store)):
    return await client_service.list_clients(store)


# GET SINGLE
@router.get("/{client_id}", response_model=ClientOut)
async def get_client_route(client_id: int, store: DataStore = Depends(get_store)):
    return await client_service.get_client(store, client_id)


# DELETE
@router.delete("/{client_id}", response_model=SuccessResponse)
async def delete_client_route(client_id: int, store: DataStore = Depends(get_store)):
    return await client_service.delete_client(store, client_id)
