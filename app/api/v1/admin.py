"""
Admin endpoints: account listing, role changes and deletion.

Every route depends on require_admin, so a valid token carrying any other
role receives 403 before the handler runs.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.schemas.auth import (
    AccountDeletedResponse,
    AccountEnvelope,
    AccountOut,
    CurrentUser,
    RoleUpdateRequest,
)
from app.services import accounts

router = APIRouter()


@router.get("", response_model=list[AccountOut])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=accounts.ADMIN_PAGE_MAX_LIMIT)] = 10,
    role: Annotated[str | None, Query(max_length=32)] = None,
) -> list[AccountOut]:
    """List accounts newest first, paginated, optionally filtered by role."""
    users = accounts.list_accounts(db, page=page, limit=limit, role=role)
    return [AccountOut.model_validate(u) for u in users]


@router.patch("/{user_id}/role", response_model=AccountEnvelope)
def change_role(
    user_id: int,
    body: RoleUpdateRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AccountEnvelope:
    """
    Change another account's role. Tokens already issued to that account keep
    the role they were signed with until they expire.
    """
    user = accounts.change_role(db, user_id, body.role)
    return AccountEnvelope(message="Role updated", user=AccountOut.model_validate(user))


@router.delete("/{user_id}", response_model=AccountDeletedResponse)
def delete_user(
    user_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AccountDeletedResponse:
    deleted = accounts.delete_account(db, user_id)
    return AccountDeletedResponse(message="User deleted", deleted=deleted)
