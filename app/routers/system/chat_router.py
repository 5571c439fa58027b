# app/routers/system/chat_router.py
from fastapi import APIRouter, Depends

from app.core.store import DataStore, get_store
from app.schemas.dashboard_schemas import ChatRequest, ChatResponse
from app.services.chat_service import answer_message

router = APIRouter(prefix="/ai-chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
async def chat_route(request: ChatRequest, store: DataStore = Depends(get_store)):
    return await answer_message(store, request)
