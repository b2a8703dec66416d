"""
FastAPI application entrypoint. No business logic; only wiring and middleware.

Run with:
  uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.api.errors import register_exception_handlers
from app.core.config import settings
from app.core.database import SessionLocal, check_db_connected
from app.core.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Check the database once at startup and make sure the upload directory exists."""
    db = SessionLocal()
    try:
        if check_db_connected(db):
            logger.info("Database connected")
        else:
            logger.error("Database connection failed; requests touching it will fail")
    finally:
        db.close()
    settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    logger.info("Serving uploads from %s", settings.UPLOAD_DIR.resolve())
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="NFT Listing API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their outcomes."""
    logger.info("request %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("error handling %s %s", request.method, request.url.path)
        raise
    logger.info(
        "response %s %s status %s",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


app.include_router(api_router)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "NFT Listing API"}
