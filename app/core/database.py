"""Engine and session handling for the geodata store (PostgreSQL with PostGIS)."""

import logging
from collections.abc import Iterator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def session_factory(bind: Engine) -> sessionmaker[Session]:
    """Sessions used by request handlers and scripts; callers commit explicitly."""
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=True)


engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, echo=settings.DEBUG)
SessionLocal = session_factory(engine)


def get_db() -> Iterator[Session]:
    """Request-scoped session; always closed, never committed here."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.debug("Database ping failed", exc_info=True)
        return False
    return True
