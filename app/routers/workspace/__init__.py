from fastapi import APIRouter

from .tasks_router import router as tasks_router
from .leads_router import router as leads_router

router = APIRouter(prefix="/api")

router.include_router(tasks_router)
router.include_router(leads_router)
