"""Credential & session authority: registration, login, token verification, profiles, admin account management."""

import logging

import jwt
from sqlalchemy.orm import Session

from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models.user import ROLE_USER, User
from app.schemas.auth import AccountOut, CurrentUser
from app.services.errors import (
    AuthenticationError,
    AuthorizationError,
    IntegrityError,
    NotFoundError,
    ValidationError,
    commit_or_raise,
    fetch_or_raise,
)

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password: no account enumeration.
INVALID_CREDENTIALS = "Invalid credentials"

ADMIN_PAGE_MAX_LIMIT = 100


def _normalize_email(email: str | None) -> str:
    """Trimmed, lowercased email; '' when nothing usable was given."""
    return (email or "").strip().lower()


def _get_account(db: Session, account_id: int) -> User:
    user = fetch_or_raise(
        logger,
        "Account lookup",
        lambda: db.query(User).filter(User.id == account_id).first(),
        account_id=account_id,
    )
    if user is None:
        raise NotFoundError("User not found")
    return user


def register(
    db: Session,
    username: str | None,
    email: str | None,
    password: str | None,
    role: str | None = None,
) -> User:
    """
    Create an account with a bcrypt digest of password.

    Email is stored lowercase; role defaults to 'user'. Duplicate email or any
    persistence failure raises StorageError and leaves no account behind.
    """
    email = _normalize_email(email)
    if not username or not email or not password:
        raise ValidationError("Missing required fields")

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role or ROLE_USER,
    )
    db.add(user)
    commit_or_raise(db, logger, "Register", email=email)
    db.refresh(user)
    logger.info("Account registered", extra={"account_id": user.id, "role": user.role})
    return user


def login(db: Session, email: str | None, password: str | None) -> str:
    """
    Verify credentials and return a signed session token (1 hour validity).

    Raises AuthenticationError for unknown email or wrong password (same
    message), IntegrityError when the stored account has no digest at all.
    """
    email = _normalize_email(email)
    if not email or not password:
        raise ValidationError("Email and password required")

    user = fetch_or_raise(
        logger,
        "Login lookup",
        lambda: db.query(User).filter(User.email == email).first(),
    )

    if user is None:
        logger.info("Login rejected: invalid credentials")
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not user.password_hash:
        logger.error(
            "Login failed: account has no password digest (corrupt record)",
            extra={"account_id": user.id},
        )
        raise IntegrityError("Internal server error")
    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: invalid credentials", extra={"account_id": user.id})
        raise AuthenticationError(INVALID_CREDENTIALS)

    return create_access_token(sub=user.id, role=user.role)


def verify_token(token: str | None) -> CurrentUser:
    """
    Decode a presented bearer token into the embedded identity and role.

    Missing token raises AuthenticationError; malformed, mis-signed or expired
    tokens raise AuthorizationError. The embedded role is used as-is for the
    token's lifetime; the account row is not consulted.
    """
    if not token:
        raise AuthenticationError("No token provided")
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        raise AuthorizationError("Invalid token", cause=e) from e

    role = payload.get("role")
    try:
        account_id = int(payload.get("sub"))
    except (TypeError, ValueError) as e:
        raise AuthorizationError("Invalid token", cause=e) from e
    if not isinstance(role, str) or not role:
        raise AuthorizationError("Invalid token")
    return CurrentUser(id=account_id, role=role)


def get_profile(db: Session, identity: CurrentUser) -> User:
    """Return the caller's own account."""
    return _get_account(db, identity.id)


def update_profile(
    db: Session,
    identity: CurrentUser,
    username: str | None = None,
    email: str | None = None,
    current_password: str | None = None,
    new_password: str | None = None,
) -> User:
    """
    Update the caller's username, email and/or password.

    Only supplied fields change. A new password is accepted only after the
    current password verifies.
    """
    if not (username or email or new_password):
        raise ValidationError("No valid fields provided for update")
    if email:
        email = _normalize_email(email)
        if not email:
            raise ValidationError("Email must not be blank")

    user = _get_account(db, identity.id)

    # Verify before touching any column so a rejected call changes nothing.
    if new_password:
        if not current_password:
            raise ValidationError("Current password required to set a new password")
        if not user.password_hash or not verify_password(current_password, user.password_hash):
            raise AuthenticationError("Current password incorrect")
        user.password_hash = hash_password(new_password)
    if username:
        user.username = username
    if email:
        user.email = email

    commit_or_raise(db, logger, "Update profile", account_id=user.id)
    db.refresh(user)
    logger.info("Profile updated", extra={"account_id": user.id})
    return user


def list_accounts(
    db: Session,
    page: int = 1,
    limit: int = 10,
    role: str | None = None,
) -> list[User]:
    """Return one page of accounts, newest first, optionally filtered by role."""
    if page < 1 or not 1 <= limit <= ADMIN_PAGE_MAX_LIMIT:
        raise ValidationError("Invalid pagination parameters")
    query = db.query(User)
    if role:
        query = query.filter(User.role == role)
    return fetch_or_raise(
        logger,
        "Listing accounts",
        query.order_by(User.created_at.desc(), User.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all,
    )


def change_role(db: Session, account_id: int, role: str | None) -> User:
    """Set an account's role. Outstanding tokens keep the role they were issued with."""
    if not role:
        raise ValidationError("Role is required")
    user = _get_account(db, account_id)
    previous = user.role
    user.role = role
    commit_or_raise(db, logger, "Change role", account_id=account_id)
    db.refresh(user)
    logger.info(
        "Account role changed",
        extra={"account_id": account_id, "old_role": previous, "new_role": role},
    )
    return user


def delete_account(db: Session, account_id: int) -> AccountOut:
    """Delete an account and return a snapshot of it as it was."""
    user = _get_account(db, account_id)
    snapshot = AccountOut.model_validate(user)
    db.delete(user)
    commit_or_raise(db, logger, "Delete account", account_id=account_id)
    logger.info("Account deleted", extra={"account_id": account_id})
    return snapshot
