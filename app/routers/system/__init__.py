from fastapi import APIRouter

from .dashboard_router import router as dashboard_router
from .activity_router import router as activity_router
from .chat_router import router as chat_router

router = APIRouter(prefix="/api")

router.include_router(dashboard_router)
router.include_router(activity_router)
router.include_router(chat_router)
