"""Pytest configuration and fixtures for autotranslate.

HTTP tests build the app with app.main.create_app and attach a
TranslationService wired to an in-process backend double (ASGITransport
does not run the lifespan). All imports use app.*.
"""

import asyncio
import os
from enum import Enum
from typing import Any

# Settings are read from the environment on first get_settings() call.
os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("TRANSLATE_SOURCE_LANGUAGE", "fr")
os.environ.setdefault("TRANSLATE_FIELD_NAMES_LANGUAGE", "en")

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from app.application.services.translation_service import TranslationService
from app.core.config import Settings
from app.domain.exceptions import TranslationBackendError
from app.domain.schema import SchemaRegistry, no_translate
from app.main import create_app


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    SUPER_USER = "SUPER_USER"
    VIEWER = "VIEWER"


class User(BaseModel):
    """Entity used across tests: protected name, free-text bio, enum role."""

    id: str
    firstName: str = no_translate()
    bio: str | None = None
    role: UserRole
    createdAt: str | None = None


# (text, source, target) -> translation
DICTIONARY: dict[tuple[str, str, str], str] = {
    ("Passionné de technologie", "fr", "en"): "Technology enthusiast",
    ("Administrateur système", "fr", "en"): "Administrator",
    ("Bonjour le monde", "fr", "en"): "Hello world",
    ("Bonjour le monde", "fr", "es"): "Hola mundo",
    ("First Name", "en", "fr"): "Prénom",
    ("Bio", "en", "fr"): "Biographie",
    ("Role", "en", "fr"): "Rôle",
    ("Super User", "en", "fr"): "Super utilisateur",
    ("Viewer", "en", "fr"): "Lecteur",
}


class FakeBackend:
    """TranslationBackend double: dictionary lookups, call log, optional failure."""

    def __init__(
        self,
        dictionary: dict[tuple[str, str, str], str] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.dictionary = dict(DICTIONARY if dictionary is None else dictionary)
        self.delay = delay
        self.calls: list[tuple[str, str, str]] = []
        self.fail = False

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise TranslationBackendError("HTTP 503", source_lang, target_lang, 503)
        return self.dictionary.get(
            (text, source_lang, target_lang), f"[{target_lang}] {text}"
        )


class InMemoryCache:
    """CacheProtocol double for the distributed tier."""

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.data: dict[str, Any] = {}
        self.ttls: dict[str, int] = {}
        self.fail_reads = False
        self.fail_writes = False

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> Any | None:
        if self.fail_reads:
            raise ConnectionError("redis down")
        return self.data.get(key)

    async def set(self, key: str, value: Any, ttl: int = 86400) -> bool:
        if self.fail_writes:
            raise ConnectionError("redis down")
        self.data[key] = value
        self.ttls[key] = ttl
        return True


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "translate_source_language": "fr",
        "translate_field_names_language": "en",
        "translate_enum_labels": {"UserRole": {"ADMIN": "Administrateur système"}},
        "redis_enabled": False,
        "telemetry_enabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def shared_cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def registry() -> SchemaRegistry:
    reg = SchemaRegistry()
    reg.register_model("User", User)
    return reg


@pytest.fixture
def service(
    backend: FakeBackend, shared_cache: InMemoryCache, registry: SchemaRegistry
) -> TranslationService:
    """TranslationService wired from settings with test doubles."""
    return TranslationService.build(
        make_settings(), backend, shared_cache=shared_cache, registry=registry
    )


@pytest.fixture
def app(service: TranslationService, registry: SchemaRegistry):
    application = create_app(registry)
    application.state.translation_service = service
    return application


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
