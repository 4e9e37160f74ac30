"""Role gate: allow or deny a resolved role against a route's allowed roles."""

from collections.abc import Iterable

from app.services.errors import AuthorizationError

INSUFFICIENT_ROLE = "Insufficient role"


def _as_role_set(allowed_roles: str | Iterable[str]) -> frozenset[str]:
    """Accept a single role ('admin') or a collection (['admin', 'geologist'])."""
    if isinstance(allowed_roles, str):
        return frozenset({allowed_roles})
    return frozenset(allowed_roles)


def is_allowed(role: str | None, allowed_roles: str | Iterable[str]) -> bool:
    """True when role is present and a member of allowed_roles. An empty set allows nobody."""
    if not role:
        return False
    return role in _as_role_set(allowed_roles)


def authorize(role: str | None, allowed_roles: str | Iterable[str]) -> None:
    """Raise AuthorizationError unless is_allowed(role, allowed_roles)."""
    if not is_allowed(role, allowed_roles):
        raise AuthorizationError(INSUFFICIENT_ROLE)
