from fastapi import APIRouter

from .projects_router import router as projects_router
from .files_router import router as files_router

router = APIRouter(prefix="/api")

router.include_router(projects_router)
router.include_router(files_router)
