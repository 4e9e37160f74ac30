"""Sample property endpoints: generic key/value attributes for samples of any commodity."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.properties import (
    PropertyBatchCreate,
    PropertyBatchResponse,
    PropertyCreate,
    PropertyDeletedResponse,
    PropertyEnvelope,
    PropertyOut,
    PropertyUpdate,
)
from app.services import properties

router = APIRouter()


def _out(rows) -> list[PropertyOut]:
    return [PropertyOut.model_validate(r) for r in rows]


@router.post("", response_model=PropertyEnvelope, status_code=status.HTTP_201_CREATED)
def create_property(
    body: PropertyCreate,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyEnvelope:
    row = properties.create_property(
        db,
        body.sample_id,
        body.property_name,
        property_value=body.property_value,
        units=body.units,
        property_category=body.property_category,
        notes=body.notes,
    )
    return PropertyEnvelope(message="Sample property created", property=PropertyOut.model_validate(row))


@router.post("/batch", response_model=PropertyBatchResponse, status_code=status.HTTP_201_CREATED)
def create_properties_batch(
    body: PropertyBatchCreate,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyBatchResponse:
    """Create several properties for one sample; all rows are written or none are."""
    rows = properties.create_properties_batch(
        db,
        body.sample_id,
        [p.model_dump() for p in body.properties],
    )
    return PropertyBatchResponse(message=f"{len(rows)} properties created", properties=_out(rows))


@router.get("", response_model=list[PropertyOut])
def list_properties(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[PropertyOut]:
    return _out(properties.list_properties(db))


@router.get("/sample/{sample_id}", response_model=list[PropertyOut])
def list_properties_for_sample(
    sample_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[PropertyOut]:
    return _out(properties.list_properties(db, sample_id=sample_id))


@router.get("/category/{category}", response_model=list[PropertyOut])
def list_properties_for_category(
    category: str,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[PropertyOut]:
    """Properties in one category (e.g. physical, chemical) across all samples."""
    return _out(properties.list_properties(db, category=category))


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(
    property_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyOut:
    return PropertyOut.model_validate(properties.get_property(db, property_id))


@router.patch("/{property_id}", response_model=PropertyEnvelope)
def update_property(
    property_id: int,
    body: PropertyUpdate,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyEnvelope:
    """Partial update: omitted or null fields keep their stored values."""
    row = properties.update_property(db, property_id, body.model_dump(exclude_none=True))
    return PropertyEnvelope(message="Sample property updated", property=PropertyOut.model_validate(row))


@router.delete("/{property_id}", response_model=PropertyDeletedResponse)
def delete_property(
    property_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyDeletedResponse:
    deleted = properties.delete_property(db, property_id)
    return PropertyDeletedResponse(message="Sample property deleted", deleted=deleted)
