"""ORM model for recorded sample property values."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text, func

from app.models.base import Base


class SampleProperty(Base):
    """
    One attribute value recorded against a sample.

    sample_id references the samples table owned by the resource layer; it is
    not declared as a foreign key here. property_value holds a JSON scalar so
    numbers come back as numbers and text as text.
    """

    __tablename__ = "sample_properties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sample_id = Column(Integer, nullable=False, index=True)
    property_name = Column(String(255), nullable=False)
    property_value = Column(JSON(none_as_null=True), nullable=True)
    units = Column(String(64), nullable=True)
    property_category = Column(String(64), nullable=True, index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
