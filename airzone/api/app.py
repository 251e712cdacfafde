"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from airzone.api.routes import schedules, zones  # noqa: E402
from airzone.persistence.errors import (  # noqa: E402
    DocumentNotFoundError,
    ScheduleRejectedError,
    ZoneRejectedError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize Firebase Admin on startup (token verification)."""
    try:
        import firebase_admin
        firebase_admin.initialize_app()
        logger.info("Firebase Admin SDK initialized")
    except ValueError:
        # Already initialized
        logger.info("Firebase Admin SDK already initialized")
    except Exception as exc:
        logger.warning("Firebase Admin SDK init failed: %s", exc)
    yield


app = FastAPI(
    title="airzone API",
    description="Restricted airspace zones and flight schedule lookup",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ZoneRejectedError)
async def zone_rejected(request: Request, exc: ZoneRejectedError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": exc.message, "reason": exc.reason.value},
    )


@app.exception_handler(ScheduleRejectedError)
async def schedule_rejected(request: Request, exc: ScheduleRejectedError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": exc.message})


@app.exception_handler(DocumentNotFoundError)
async def document_not_found(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
    messages = {"flight_zones": "Flight zone not found", "schedules": "Schedule not found"}
    return JSONResponse(
        status_code=404,
        content={"message": messages.get(exc.collection, str(exc))},
    )


app.include_router(zones.router, prefix="/api")
app.include_router(schedules.router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok"}
