"""LibreTranslate client using httpx.

POST {base_url}/translate with {q, source, target, format: "text"} and read
translatedText from the JSON response. Every failure is raised as
TranslationBackendError; retrying and falling back are the caller's concern.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import httpx

from app.domain.exceptions import TranslationBackendError

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class LibreTranslateClient:
    """LibreTranslate (or API-compatible) translation backend."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
        self._shared_http = http_client

    @classmethod
    def from_settings(
        cls, settings: "Settings", http_client: httpx.AsyncClient | None = None
    ) -> LibreTranslateClient:
        """Build a client from LIBRETRANSLATE_* and TRANSLATE_*_TIMEOUT settings."""
        return cls(
            settings.libretranslate_url,
            api_key=(
                settings.libretranslate_api_key.get_secret_value()
                if settings.libretranslate_api_key
                else None
            ),
            connect_timeout=settings.translate_connect_timeout_seconds,
            read_timeout=settings.translate_read_timeout_seconds,
            http_client=http_client,
        )

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate text; raise TranslationBackendError on any failure."""
        payload: dict[str, Any] = {
            "q": text,
            "source": source_lang,
            "target": target_lang,
            "format": "text",
        }
        if self._api_key:
            payload["api_key"] = self._api_key
        url = f"{self.base_url}/translate"
        try:
            async with self._http_cm() as client:
                response = await client.post(url, json=payload, timeout=self._timeout)
        except httpx.TimeoutException as e:
            raise TranslationBackendError("timeout", source_lang, target_lang) from e
        except httpx.HTTPError as e:
            raise TranslationBackendError(
                f"transport error ({type(e).__name__})", source_lang, target_lang
            ) from e

        if not response.is_success:
            raise TranslationBackendError(
                f"HTTP {response.status_code}",
                source_lang,
                target_lang,
                status_code=response.status_code,
            )
        try:
            body = response.json()
        except ValueError as e:
            raise TranslationBackendError(
                "response is not JSON", source_lang, target_lang, response.status_code
            ) from e
        translated = body.get("translatedText") if isinstance(body, dict) else None
        if not isinstance(translated, str):
            raise TranslationBackendError(
                "response missing 'translatedText'",
                source_lang,
                target_lang,
                response.status_code,
            )
        logger.debug("LibreTranslate %s -> %s: %d chars", source_lang, target_lang, len(text))
        return translated
