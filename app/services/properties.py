"""Property template engine: per-commodity templates and generic sample property rows."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import PropertyTemplate, SampleProperty
from app.schemas.properties import PropertyOut, TemplateCheckResponse
from app.services.errors import (
    NotFoundError,
    StorageError,
    ValidationError,
    commit_or_raise,
    fetch_or_raise,
)

logger = logging.getLogger(__name__)

# Columns a caller may set on a sample property.
PROPERTY_FIELDS = (
    "sample_id",
    "property_name",
    "property_value",
    "units",
    "property_category",
    "notes",
)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


def list_templates(db: Session, commodity_type: str) -> list[PropertyTemplate]:
    """
    Templates for one commodity type, ascending by display_order.

    Rows without a display_order come last; ties keep insertion order.
    Each call issues a fresh query.
    """
    return fetch_or_raise(
        logger,
        "Listing property templates",
        lambda: db.query(PropertyTemplate)
        .filter(PropertyTemplate.commodity_type == commodity_type)
        .order_by(PropertyTemplate.display_order.asc().nulls_last(), PropertyTemplate.id.asc())
        .all(),
    )


def create_template(
    db: Session,
    commodity_type: str | None,
    property_name: str | None,
    units: str | None = None,
    property_category: str | None = None,
    is_required: bool | None = None,
    display_order: int | None = None,
) -> PropertyTemplate:
    """Insert a template row. commodity_type and property_name are required."""
    if not commodity_type or not property_name:
        raise ValidationError("Commodity type and property name are required")
    template = PropertyTemplate(
        commodity_type=commodity_type,
        property_name=property_name,
        units=units,
        property_category=property_category,
        is_required=bool(is_required),
        display_order=display_order,
    )
    db.add(template)
    commit_or_raise(db, logger, "Creating property template", commodity_type=commodity_type)
    db.refresh(template)
    logger.info(
        "Property template created",
        extra={"template_id": template.id, "commodity_type": commodity_type},
    )
    return template


def check_properties(
    db: Session,
    commodity_type: str,
    property_names: Iterable[str],
) -> TemplateCheckResponse:
    """
    Compare property names against the commodity's templates. Advisory only:
    nothing here blocks property creation.
    """
    templates = list_templates(db, commodity_type)
    known = {t.property_name for t in templates}
    supplied = list(dict.fromkeys(property_names))
    unknown = [name for name in supplied if name not in known]
    missing_required = [
        t.property_name
        for t in templates
        if t.is_required and t.property_name not in supplied
    ]
    return TemplateCheckResponse(
        commodity_type=commodity_type,
        unknown=unknown,
        missing_required=missing_required,
        valid=not unknown and not missing_required,
    )


# ---------------------------------------------------------------------------
# Sample properties
# ---------------------------------------------------------------------------


def _new_property(sample_id: int, fields: Mapping[str, Any]) -> SampleProperty:
    return SampleProperty(
        sample_id=sample_id,
        property_name=fields.get("property_name"),
        property_value=fields.get("property_value"),
        units=fields.get("units"),
        property_category=fields.get("property_category"),
        notes=fields.get("notes"),
    )


def create_property(
    db: Session,
    sample_id: int | None,
    property_name: str | None,
    property_value: Any = None,
    units: str | None = None,
    property_category: str | None = None,
    notes: str | None = None,
) -> SampleProperty:
    """Insert one property row for a sample."""
    if sample_id is None or not property_name:
        raise ValidationError("Sample ID and property name are required")
    row = _new_property(
        sample_id,
        {
            "property_name": property_name,
            "property_value": property_value,
            "units": units,
            "property_category": property_category,
            "notes": notes,
        },
    )
    db.add(row)
    commit_or_raise(db, logger, "Creating sample property", sample_id=sample_id)
    db.refresh(row)
    return row


def create_properties_batch(
    db: Session,
    sample_id: int | None,
    properties: Any,
) -> list[SampleProperty]:
    """
    Insert many property rows for one sample in a single transaction.

    Every element is validated before anything is written; if any insert
    fails the whole batch is rolled back.
    """
    if sample_id is None or not isinstance(properties, list):
        raise ValidationError("Sample ID and properties array are required")
    for i, prop in enumerate(properties):
        if not isinstance(prop, Mapping) or not prop.get("property_name"):
            raise ValidationError(f"Property at index {i} must have a property_name")

    rows = [_new_property(sample_id, prop) for prop in properties]
    try:
        for row in rows:
            db.add(row)
            db.flush()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(
            "Batch property insert rolled back",
            extra={"sample_id": sample_id, "batch_size": len(rows)},
        )
        raise StorageError(cause=e) from e

    for row in rows:
        db.refresh(row)
    logger.info(
        "Batch properties created",
        extra={"sample_id": sample_id, "batch_size": len(rows)},
    )
    return rows


def list_properties(
    db: Session,
    sample_id: int | None = None,
    category: str | None = None,
) -> list[SampleProperty]:
    """
    List property rows.

    By sample: ordered by category then name. By category: ordered by sample.
    Otherwise every row ordered by id.
    """
    query = db.query(SampleProperty)
    if sample_id is not None:
        query = query.filter(SampleProperty.sample_id == sample_id).order_by(
            SampleProperty.property_category, SampleProperty.property_name, SampleProperty.id
        )
    elif category is not None:
        query = query.filter(SampleProperty.property_category == category).order_by(
            SampleProperty.sample_id, SampleProperty.id
        )
    else:
        query = query.order_by(SampleProperty.id)
    return fetch_or_raise(logger, "Listing sample properties", query.all)


def get_property(db: Session, property_id: int) -> SampleProperty:
    row = fetch_or_raise(
        logger,
        "Fetching sample property",
        lambda: db.query(SampleProperty).filter(SampleProperty.id == property_id).first(),
    )
    if row is None:
        raise NotFoundError("Sample property not found")
    return row


def update_property(db: Session, property_id: int, fields: Mapping[str, Any]) -> SampleProperty:
    """
    Overwrite only the supplied fields. A field that is absent or None keeps
    its stored value.
    """
    row = get_property(db, property_id)
    for name in PROPERTY_FIELDS:
        value = fields.get(name)
        if value is not None:
            setattr(row, name, value)
    commit_or_raise(db, logger, "Updating sample property", property_id=property_id)
    db.refresh(row)
    return row


def delete_property(db: Session, property_id: int) -> PropertyOut:
    """Delete a property row and return a snapshot of it."""
    row = get_property(db, property_id)
    snapshot = PropertyOut.model_validate(row)
    db.delete(row)
    commit_or_raise(db, logger, "Deleting sample property", property_id=property_id)
    return snapshot
