"""Request/response schemas for account, session and admin endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """New account details. role defaults to 'user' when omitted."""

    username: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    role: str | None = Field(default=None, min_length=1, max_length=32, description="Role")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class LoginResponse(BaseModel):
    """Signed bearer token returned after successful login."""

    success: bool = True
    message: str = "Login successful"
    token: str = Field(..., description="JWT access token, valid for one hour")


class ProfileUpdateRequest(BaseModel):
    """Self-service profile changes. A new password requires the current one."""

    model_config = ConfigDict(populate_by_name=True)

    username: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    current_password: str | None = Field(default=None, alias="currentPassword", max_length=128)
    new_password: str | None = Field(default=None, alias="newPassword", max_length=128)


class RoleUpdateRequest(BaseModel):
    """New role for an account (admin only)."""

    role: str = Field(..., min_length=1, max_length=32)


class CurrentUser(BaseModel):
    """Identity resolved from a bearer token (id and role as embedded at login)."""

    id: int
    role: str


class AccountOut(BaseModel):
    """Account as returned to clients; the password digest is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: str
    created_at: datetime | None = None


class AccountEnvelope(BaseModel):
    """Response wrapping a created or updated account."""

    message: str
    user: AccountOut


class AccountDeletedResponse(BaseModel):
    """Response for DELETE /admin/{id}."""

    message: str
    deleted: AccountOut


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
