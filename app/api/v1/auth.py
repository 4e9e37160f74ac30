"""Bearer-token auth dependencies (get_current_user, require_roles, require_admin)."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.models.user import ROLE_ADMIN
from app.schemas.auth import CurrentUser
from app.services.accounts import verify_token
from app.services.role_gate import authorize

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    401 when no token is presented, 403 when it is malformed, mis-signed or expired.
    """
    token = credentials.credentials if credentials is not None else None
    return verify_token(token)


def require_roles(*roles: str):
    """Build a dependency that runs get_current_user, then the role gate for roles."""
    allowed = frozenset(roles)

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        authorize(current_user.role, allowed)
        return current_user

    return dependency


require_admin = require_roles(ROLE_ADMIN)
