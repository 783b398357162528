"""
Database engine and per-request sessions for the generated-player store.

`SqlPlayerSink` is built on the session yielded by `get_session`; tests swap
it for an in-memory SQLite session through `app.dependency_overrides`.
"""

from sqlmodel import Session, SQLModel, create_engine

from app.core.config import get_settings
from app import models  # noqa: F401 - ensures models are registered with metadata

settings = get_settings()
engine = create_engine(settings.database_url, echo=settings.debug)


def init_db() -> None:
    """Create tables; called during startup."""
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a session for dependency injection."""
    with Session(engine) as session:
        yield session
