"""Settings, database sessions and credential primitives shared by the geodata API."""

from app.core.config import get_settings, settings
from app.core.database import SessionLocal, get_db, session_factory
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

__all__ = [
    "SessionLocal",
    "create_access_token",
    "decode_access_token",
    "get_db",
    "get_settings",
    "hash_password",
    "session_factory",
    "settings",
    "verify_password",
]
