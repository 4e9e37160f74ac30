"""Account endpoints: register, login, own profile, logout."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import (
    AccountEnvelope,
    AccountOut,
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileUpdateRequest,
    RegisterRequest,
)
from app.services import accounts

router = APIRouter()


@router.post("/register", response_model=AccountEnvelope, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AccountEnvelope:
    """Create an account. The password digest is never returned."""
    user = accounts.register(db, body.username, body.email, body.password, body.role)
    return AccountEnvelope(message="User registered", user=AccountOut.model_validate(user))


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = accounts.login(db, body.email, body.password)
    return LoginResponse(token=token)


@router.get("/profile", response_model=AccountOut)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> AccountOut:
    return AccountOut.model_validate(accounts.get_profile(db, current_user))


@router.patch("/profile", response_model=AccountEnvelope)
def update_profile(
    body: ProfileUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> AccountEnvelope:
    """Change username and/or email; change password by also sending currentPassword."""
    user = accounts.update_profile(
        db,
        current_user,
        username=body.username,
        email=body.email,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    return AccountEnvelope(message="Profile updated", user=AccountOut.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Tokens are not tracked server-side; the client discards its copy."""
    return MessageResponse(message="Logout successful")
