"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.property_template import PropertyTemplate
from app.models.sample_property import SampleProperty
from app.models.user import User

__all__ = ["Base", "PropertyTemplate", "SampleProperty", "User"]
