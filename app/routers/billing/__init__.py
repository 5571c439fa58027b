from fastapi import APIRouter
from .clients_router import router as clients_router
from .quotations_router import router as quotations_router
from .finance_router import income_router, expenses_router

router = APIRouter(prefix="/api")

router.include_router(clients_router)
router.include_router(quotations_router)
router.include_router(income_router)
router.include_router(expenses_router)
