"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pitchlab.api.projects import router as projects_router
from pitchlab.config import settings
from pitchlab.db import database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Pitchlab API...")
    try:
        await database.connect()
    except Exception:
        # Not fatal: requests connect lazily when auto-connect is enabled
        logger.error("Database unavailable at startup")
    yield
    logger.info("Shutting down Pitchlab API...")
    await database.disconnect()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS middleware - allow frontend to make requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"→ {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"← {request.method} {request.url.path} {response.status_code}")
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report validation failures as a list of field-level issues."""
    issues = jsonable_encoder(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(issues)} validation issue(s)")
    return JSONResponse(status_code=400, content={"success": False, "error": issues})


# Include routers
app.include_router(projects_router, prefix="/api")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}
