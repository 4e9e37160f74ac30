"""Shared test helpers: an in-memory SQLite database with the ORM schema."""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import session_factory
from app.models import Base


def make_session_factory() -> sessionmaker[Session]:
    """Fresh in-memory database (shared across threads) with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return session_factory(engine)
