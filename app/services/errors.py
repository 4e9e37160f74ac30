"""Service-level error taxonomy, and translation of store failures into StorageError."""

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

T = TypeVar("T")


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(ServiceError):
    """Caller-supplied input failed a precondition (missing field, malformed body)."""

    status_code = 400


class AuthenticationError(ServiceError):
    """No credential presented, or the credential does not establish identity."""

    status_code = 401


class AuthorizationError(ServiceError):
    """Identity lacks privilege, or the presented token is invalid or expired."""

    status_code = 403


class NotFoundError(ServiceError):
    """Referenced entity does not exist."""

    status_code = 404


class IntegrityError(ServiceError):
    """A stored record is in an impossible state. Opaque to the caller."""

    status_code = 500


class StorageError(ServiceError):
    """Unclassified backing-store failure. Opaque to the caller."""

    status_code = 500

    def __init__(self, message: str = "Database error", cause: Exception | None = None) -> None:
        super().__init__(message, cause)


def commit_or_raise(db: Session, logger: logging.Logger, action: str, **context: object) -> None:
    """Commit the session; on failure roll back, log the cause on logger and raise StorageError."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s failed", action, extra=context)
        raise StorageError(cause=e) from e


def fetch_or_raise(logger: logging.Logger, action: str, query_fn: Callable[[], T], **context: object) -> T:
    """Run a read query; store failures are logged on logger and raised as StorageError."""
    try:
        return query_fn()
    except SQLAlchemyError as e:
        logger.exception("%s failed", action, extra=context)
        raise StorageError(cause=e) from e
