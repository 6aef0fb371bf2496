"""Database configuration and session management."""

from __future__ import annotations

from typing import Any

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from petdoc.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, Any]:
    """Return driver specific keyword arguments for :func:`create_engine`."""

    options: dict[str, Any] = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # The scheduler runs checks from a worker thread.
        options["connect_args"] = {"check_same_thread": False}
    return options


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from petdoc.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.debug("Database tables verified for %s", engine.url.render_as_string())

