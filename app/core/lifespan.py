"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (shared HTTP client, Redis cache,
translation backend, translation service, telemetry shutdown).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.application.services.translation_service import TranslationService
from app.core.config import get_settings
from app.domain.schema import SchemaRegistry
from app.infrastructure.cache.redis_cache import CacheService
from app.infrastructure.external.translation import LibreTranslateClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: shared HTTP client, Redis cache (if enabled), translation
    service. Shutdown order: HTTP client close, cache disconnect, telemetry
    shutdown. Telemetry itself is set up in create_app (instrumentation adds
    middleware, which must happen before the app starts).
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for backend calls (connection reuse).
    app.state.translate_http_client = httpx.AsyncClient()

    if settings.redis_enabled:
        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    registry = getattr(app.state, "schema_registry", None)
    if registry is None:
        registry = SchemaRegistry()
    backend = LibreTranslateClient.from_settings(
        settings, http_client=app.state.translate_http_client
    )
    app.state.translation_service = TranslationService.build(
        settings,
        backend,
        shared_cache=app.state.cache,
        registry=registry,
    )

    yield

    # ---- Shutdown ----
    app.state.translation_service = None

    if getattr(app.state, "translate_http_client", None) is not None:
        await app.state.translate_http_client.aclose()
        app.state.translate_http_client = None
        logger.info("Translation HTTP client closed")

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        app.state.cache = None
        logger.info("Cache disconnected")

    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
