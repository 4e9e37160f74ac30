"""ORM model for application accounts (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLE_GEOLOGIST = "geologist"

# Roles the application knows about; the column accepts any other value too.
KNOWN_ROLES = (ROLE_USER, ROLE_ADMIN, ROLE_GEOLOGIST)


class User(Base):
    """
    Account for JWT authentication and role-based access control.

    email is unique and stored lowercase. role is an open set; see KNOWN_ROLES.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER, server_default=ROLE_USER)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
