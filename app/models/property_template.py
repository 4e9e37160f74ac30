"""ORM model for per-commodity property templates."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false, func

from app.models.base import Base


class PropertyTemplate(Base):
    """
    One recognised attribute for a commodity type (e.g. gold/grain_size).

    (commodity_type, property_name) is a natural key but is not enforced.
    """

    __tablename__ = "property_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    commodity_type = Column(String(64), nullable=False, index=True)
    property_name = Column(String(255), nullable=False)
    units = Column(String(64), nullable=True)
    property_category = Column(String(64), nullable=True)
    is_required = Column(Boolean, nullable=False, default=False, server_default=false())
    display_order = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
