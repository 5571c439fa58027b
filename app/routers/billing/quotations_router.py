# app/routers/billing/quotations_router.py
from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse

from app.core.store import DataStore, get_store
from app.schemas.billing_schemas.quotation_schema import QuoteCreate, QuoteOut
from app.schemas.response_schemas import SuccessResponse
from app.services.billing_services.quotation_service import (
    create_quote,
    delete_quote,
    get_quote,
    get_quote_document,
    list_quotes,
)

router = APIRouter(prefix="/quotes", tags=["Quotes"])


# --------------------------
# CREATE QUOTE
# --------------------------
@router.post("", response_model=QuoteOut, status_code=status.HTTP_201_CREATED)
async def create_quote_route(
    data: QuoteCreate,
    store: DataStore = Depends(get_store),
):
    return await create_quote(store, data)


# --------------------------
# LIST ALL QUOTES
# --------------------------
@router.get("", response_model=List[QuoteOut])
async def list_quotes_route(store: DataStore = Depends(get_store)):
    return await list_quotes(store)


# --------------------------
# GET SINGLE QUOTE BY ID
# --------------------------
@router.get("/{quote_id}", response_model=QuoteOut)
async def get_quote_route(quote_id: int, store: DataStore = Depends(get_store)):
    return await get_quote(store, quote_id)


# --------------------------
# VIEW / DOWNLOAD QUOTE DOCUMENT
# --------------------------
@router.get("/{quote_id}/document", response_class=HTMLResponse)
async def get_quote_document_route(
    quote_id: int,
    download: bool = Query(False, description="Send as an attachment named <quote_number>.html"),
    store: DataStore = Depends(get_store),
):
    quote_number, html_content = await get_quote_document(store, quote_id)
    headers = {}
    if download:
        headers["Content-Disposition"] = f'attachment; filename="{quote_number}.html"'
    return HTMLResponse(content=html_content, headers=headers)


# --------------------------
# DELETE QUOTE
# --------------------------
@router.delete("/{quote_id}", response_model=SuccessResponse)
async def delete_quote_route(quote_id: int, store: DataStore = Depends(get_store)):
    return await delete_quote(store, quote_id)
