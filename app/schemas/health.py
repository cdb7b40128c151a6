"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class CacheStatsResponse(BaseModel):
    """Local translation cache counters."""

    size: int
    hits: int
    misses: int
    loads: int
    load_failures: int
    evictions: int
    in_flight: int


class TranslationHealthResponse(BaseModel):
    """Response for GET /translate/metadata/health."""

    enabled: bool
    source_language: str = Field(..., description="Language business content is written in")
    field_names_language: str = Field(..., description="Language field names are written in")
    entities_count: int
    entities: list[str]
    cache: CacheStatsResponse
