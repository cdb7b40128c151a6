"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes get
the translation service from app.api.v1.dependencies.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import health, translate, translation_metadata

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    translation_metadata.router,
    prefix="/translate/metadata",
    tags=["translation-metadata"],
)
api_router.include_router(translate.router, prefix="/translate", tags=["translation"])
