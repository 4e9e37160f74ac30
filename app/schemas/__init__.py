"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AccountDeletedResponse,
    AccountEnvelope,
    AccountOut,
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileUpdateRequest,
    RegisterRequest,
    RoleUpdateRequest,
)
from app.schemas.health import HealthResponse
from app.schemas.properties import (
    PropertyBatchCreate,
    PropertyBatchItem,
    PropertyCreate,
    PropertyOut,
    PropertyUpdate,
    TemplateCheckRequest,
    TemplateCheckResponse,
    TemplateCreate,
    TemplateOut,
)

__all__ = [
    "AccountDeletedResponse",
    "AccountEnvelope",
    "AccountOut",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProfileUpdateRequest",
    "PropertyBatchCreate",
    "PropertyBatchItem",
    "PropertyCreate",
    "PropertyOut",
    "PropertyUpdate",
    "RegisterRequest",
    "RoleUpdateRequest",
    "TemplateCheckRequest",
    "TemplateCheckResponse",
    "TemplateCreate",
    "TemplateOut",
]
