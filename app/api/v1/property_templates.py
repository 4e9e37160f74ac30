"""Property template endpoints: list per commodity, create, advisory name check."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.properties import (
    TemplateCheckRequest,
    TemplateCheckResponse,
    TemplateCreate,
    TemplateCreatedResponse,
    TemplateOut,
)
from app.services import properties

router = APIRouter()


@router.get("/templates/{commodity_type}", response_model=list[TemplateOut])
def list_templates(
    commodity_type: str,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[TemplateOut]:
    """Templates for a commodity type in display order."""
    return [
        TemplateOut.model_validate(t)
        for t in properties.list_templates(db, commodity_type)
    ]


@router.post(
    "/templates",
    response_model=TemplateCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_template(
    body: TemplateCreate,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TemplateCreatedResponse:
    template = properties.create_template(
        db,
        body.commodity_type,
        body.property_name,
        units=body.units,
        property_category=body.property_category,
        is_required=body.is_required,
        display_order=body.display_order,
    )
    return TemplateCreatedResponse(
        message="Property template created",
        template=TemplateOut.model_validate(template),
    )


@router.post("/templates/{commodity_type}/check", response_model=TemplateCheckResponse)
def check_properties(
    commodity_type: str,
    body: TemplateCheckRequest,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TemplateCheckResponse:
    """
    Compare property names against the commodity's templates. Advisory: the
    sample property endpoints do not call this and accept any name.
    """
    return properties.check_properties(db, commodity_type, body.property_names)
