"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Bcrypt cost factor (2^10 rounds).
BCRYPT_ROUNDS = 10

# Session tokens are valid for a fixed window from issuance.
ACCESS_TOKEN_TTL = timedelta(hours=1)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors on long inputs.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str | int,
    role: str,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT carrying sub (account id), role, iat and exp."""
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + ACCESS_TOKEN_TTL,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
