# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import CORS_ORIGINS
from app.core.exceptions import AppError, StorageError
from app.core.logging_config import setup_logging
from app.middleware.activity_logger import ActivityLoggerMiddleware
from app.routers import billing
from app.routers import projects
from app.routers import workspace
from app.routers import system

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Business backend starting")
    yield
    logger.info("Business backend stopped")


app = FastAPI(
    title="Business Management API",
    description="FastAPI backend for clients, projects, finances, tasks, leads and quotes",
    version="0.1.0",
    lifespan=lifespan,
)
# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ActivityLoggerMiddleware)


# Domain errors -> HTTP responses
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    else:
        logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Health check endpoint
@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "Backend is running"}


# Register routers
app.include_router(billing.router)
app.include_router(projects.router)
app.include_router(workspace.router)
app.include_router(system.router)
