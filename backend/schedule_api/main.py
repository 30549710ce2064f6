"""Gym Schedule API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ScheduleApiError → envelope JSON responses
    - CORS configured from settings (not hardcoded)
    - Schedule store created once in the lifespan and pinged once at startup,
      unless one was injected through create_app(store=...)

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Unreachable store at startup: logged, then either abort (store_required_on_startup)
      or start anyway and report 503 from /health/ready
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schedule_api.api.error_handlers import register_error_handlers
from schedule_api.api.routes import health, schedules
from schedule_api.config import get_settings
from schedule_api.core.repository_protocols import ScheduleStore
from schedule_api.infrastructure.database import MongoScheduleStore
from schedule_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    owned_store = None
    if getattr(app.state, "schedule_store", None) is None:
        owned_store = MongoScheduleStore.from_settings(settings)
        app.state.schedule_store = owned_store

    if await app.state.schedule_store.ping():
        logger.info("Successfully connected to MongoDB")
    else:
        logger.error("Error connecting to MongoDB: store unreachable at startup")
        if settings.store_required_on_startup:
            if owned_store is not None:
                await owned_store.close()
            raise RuntimeError("Schedule store unreachable at startup")

    logger.info("Schedule API started")
    yield
    logger.info("Schedule API shutting down")
    if owned_store is not None:
        await owned_store.close()
        app.state.schedule_store = None


def create_app(store: ScheduleStore | None = None) -> FastAPI:
    """Build the application, optionally around an already-constructed store."""
    settings = get_settings()
    app = FastAPI(
        title="Gym Schedule API", version="1.0.0", lifespan=lifespan,
    )
    app.state.schedule_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(schedules.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server is running on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "schedule_api.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
