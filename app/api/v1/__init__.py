"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import admin, health, property_templates, sample_properties, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(
    property_templates.router,
    prefix="/propertyTemplates",
    tags=["property-templates"],
)
router.include_router(
    sample_properties.router,
    prefix="/sampleProperties",
    tags=["sample-properties"],
)
