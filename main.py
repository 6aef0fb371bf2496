import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petdoc.config import get_settings
from petdoc.infrastructure.database import engine, initialize_database
from petdoc.infrastructure.scheduler import build_reminder_scheduler
from petdoc.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables, start the reminder scheduler and release resources on exit."""

    settings = get_settings()
    initialize_database()

    scheduler = None
    if settings.scheduler_enabled:
        scheduler = build_reminder_scheduler(settings)
        scheduler.start()
    else:
        logger.info("Reminder scheduler disabled by configuration")
    app.state.reminder_scheduler = scheduler

    try:
        yield
    finally:
        if scheduler is not None:
            scheduler.shutdown()
        app.state.reminder_scheduler = None
        engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the PetDoc reminder application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="PetDoc Reminders", lifespan=lifespan)

    # Browser clients on the allow-listed origins may call the API with cookies.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
