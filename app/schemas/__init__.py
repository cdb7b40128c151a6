"""Pydantic request/response schemas for the API."""

from app.schemas.health import (
    CacheStatsResponse,
    HealthResponse,
    TranslationHealthResponse,
)
from app.schemas.translation import TranslateRequest, TranslateResponse

__all__ = [
    "CacheStatsResponse",
    "HealthResponse",
    "TranslateRequest",
    "TranslateResponse",
    "TranslationHealthResponse",
]
