"""Database engine, sessions and the declarative base for the reading ledger."""

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.config import settings


def get_connect_args(database_url: str) -> dict[str, Any]:
    """Driver arguments for ``database_url``.

    For a file-backed SQLite database the containing directory is created,
    so a fresh data volume works on first start.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}

    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    # Sessions are handed across FastAPI's threadpool
    return {"check_same_thread": False}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=get_connect_args(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all database models."""


def get_db():
    """Dependency yielding a session that is closed after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
