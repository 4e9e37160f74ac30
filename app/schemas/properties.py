"""Pydantic schemas for property templates and sample properties."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# Opaque scalar: numeric or text. Booleans and numeric strings are not coerced.
PropertyValue = StrictInt | StrictFloat | StrictStr


class TemplateCreate(BaseModel):
    """Body for POST /propertyTemplates/templates."""

    commodity_type: str = Field(..., min_length=1, max_length=64, description="e.g. gold, coal")
    property_name: str = Field(..., min_length=1, max_length=255)
    units: str | None = Field(default=None, max_length=64)
    property_category: str | None = Field(
        default=None,
        max_length=64,
        description="Grouping such as physical or chemical.",
    )
    is_required: bool | None = None
    display_order: int | None = Field(
        default=None,
        description="Ascending sort key for forms; ties keep insertion order.",
    )


class TemplateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    commodity_type: str
    property_name: str
    units: str | None = None
    property_category: str | None = None
    is_required: bool = False
    display_order: int | None = None
    created_at: datetime | None = None


class TemplateCreatedResponse(BaseModel):
    message: str
    template: TemplateOut


class TemplateCheckRequest(BaseModel):
    """Property names a caller intends to record for a sample of this commodity."""

    property_names: list[str] = Field(default_factory=list)


class TemplateCheckResponse(BaseModel):
    """Advisory comparison of property names against the commodity's templates."""

    commodity_type: str
    unknown: list[str] = Field(
        default_factory=list,
        description="Names with no template for the commodity type.",
    )
    missing_required: list[str] = Field(
        default_factory=list,
        description="Required template names that were not supplied.",
    )
    valid: bool


class PropertyFields(BaseModel):
    """Value fields shared by single and batch property creation."""

    property_value: PropertyValue | None = None
    units: str | None = Field(default=None, max_length=64)
    property_category: str | None = Field(default=None, max_length=64)
    notes: str | None = None


class PropertyCreate(PropertyFields):
    """Body for POST /sampleProperties."""

    sample_id: int
    property_name: str = Field(..., min_length=1, max_length=255)


class PropertyBatchItem(PropertyFields):
    """One element of a batch; sample_id comes from the enclosing request."""

    property_name: str = Field(..., min_length=1, max_length=255)


class PropertyBatchCreate(BaseModel):
    """Body for POST /sampleProperties/batch."""

    sample_id: int
    properties: list[PropertyBatchItem]


class PropertyUpdate(BaseModel):
    """Partial update; omitted or null fields keep their stored values."""

    sample_id: int | None = None
    property_name: str | None = Field(default=None, min_length=1, max_length=255)
    property_value: PropertyValue | None = None
    units: str | None = Field(default=None, max_length=64)
    property_category: str | None = Field(default=None, max_length=64)
    notes: str | None = None


class PropertyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sample_id: int
    property_name: str
    property_value: PropertyValue | None = None
    units: str | None = None
    property_category: str | None = None
    notes: str | None = None
    created_at: datetime | None = None


class PropertyEnvelope(BaseModel):
    message: str
    property: PropertyOut


class PropertyBatchResponse(BaseModel):
    message: str
    properties: list[PropertyOut]


class PropertyDeletedResponse(BaseModel):
    message: str
    deleted: PropertyOut
