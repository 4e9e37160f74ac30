"""Health check endpoint: process liveness plus backing-store connectivity."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Report service status and whether the database answers a trivial query.
    No authentication; used by load balancers and container probes.
    """
    connected = check_db_connected(db)
    if not connected:
        logger.warning("Health check: database unreachable")
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if connected else "disconnected",
    )
