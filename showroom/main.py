"""Showroom API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as the envelope
    - CORS configured from settings (not hardcoded)
    - Store pool created lazily on first request, disposed on shutdown
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from showroom.api.error_handlers import register_error_handlers
from showroom.api.routes import contact_form, health, vehicle
from showroom.config import get_settings
from showroom.infrastructure.database import close_db
from showroom.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Showroom API started")
    yield
    await close_db()
    logger.info("Showroom API shutting down")


app = FastAPI(
    title="Showroom API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(vehicle.router)
app.include_router(contact_form.router)

register_error_handlers(app)

# Built front end, mounted after the API routes so /external/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
