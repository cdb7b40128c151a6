"""Translation cache coordinator: the only path to the cache tiers and the backend.

Resolution order for one (source, target, text):

1. opaque text and same-language requests return the text untouched;
2. local tier (in-process LRU, short TTL) with single-flight loading, so
   concurrent misses on one key make one load;
3. inside that load, the distributed tier (Redis, long TTL);
4. the remote backend; a success is written to Redis, then the local tier.

A backend failure is logged and every caller of that load gets the original
text back. Failures are never cached: the next call tries the backend again.
Distributed-tier failures count as misses.

Keys hash the text (TranslationKey.text_hash) without storing it, so two
colliding strings share one cache slot and one of them is served the
other's translation. Accepted for short display phrases.
"""

from __future__ import annotations

import logging
from typing import Any

from app.application.services.text_classifier import is_opaque
from app.domain.exceptions import TranslationBackendError
from app.domain.value_objects import TranslationKey
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.local_cache import CacheStats, LocalCache
from app.infrastructure.external.translation.protocol import TranslationBackend
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class TranslationCoordinator:
    """Two-tier, single-flight translation resolver."""

    def __init__(
        self,
        backend: TranslationBackend,
        *,
        source_language: str,
        local_cache: LocalCache[str] | None = None,
        shared_cache: CacheProtocol | None = None,
        shared_ttl_seconds: int = 86400,
    ) -> None:
        """Initialize the coordinator.

        Args:
            backend: Remote translation backend.
            source_language: Content source language used when no override is given.
            local_cache: In-process tier; a default-sized one is created if omitted.
            shared_cache: Distributed tier; None runs with the local tier only.
            shared_ttl_seconds: TTL for distributed-tier writes.
        """
        self._backend = backend
        self.source_language = source_language
        self._local = local_cache if local_cache is not None else LocalCache()
        self._shared = shared_cache
        self._shared_ttl = shared_ttl_seconds

    async def translate(self, text: str, target_lang: str) -> str:
        """Translate text from the content source language to target_lang."""
        return await self.resolve(text, None, target_lang)

    async def resolve(
        self, text: str, source_lang: str | None, target_lang: str
    ) -> str:
        """Return text translated to target_lang, or text itself when not applicable.

        Args:
            text: Source text.
            source_lang: Explicit source language; None means the content
                source language.
            target_lang: Target language code.

        Returns:
            Translated text; the original text for opaque input, same-language
            requests and backend failures.
        """
        if is_opaque(text):
            return text
        effective_source = source_lang or self.source_language
        if effective_source == target_lang:
            return text

        try:
            key = TranslationKey.for_text(effective_source, target_lang, text)
            return await self._local.get_or_load(
                key, lambda: self._load(key, text)
            )
        except TranslationBackendError as e:
            logger.warning(
                "Translation failed for %r (%s -> %s): %s; returning original text",
                text,
                effective_source,
                target_lang,
                e.message,
            )
            return text
        except Exception:
            logger.exception(
                "Unexpected translation error (%s -> %s); returning original text",
                effective_source,
                target_lang,
            )
            return text

    @traced("translation.load")
    async def _load(self, key: TranslationKey, text: str) -> str:
        """Single-flight body: distributed tier, then backend with write-through."""
        cache_key = key.cache_key()
        add_span_attributes(
            **{"translation.source": key.source_lang, "translation.target": key.target_lang}
        )
        cached = await self.get_shared(cache_key)
        if isinstance(cached, str):
            logger.debug("L2 cache HIT: %s", cache_key)
            add_span_attributes(**{"translation.cache": "l2"})
            return cached

        logger.info(
            "Calling translation backend (L1+L2 MISS): %s -> %s, %d chars",
            key.source_lang,
            key.target_lang,
            len(text),
        )
        add_span_attributes(**{"translation.cache": "miss"})
        translated = await self._backend.translate(text, key.source_lang, key.target_lang)
        await self.set_shared(cache_key, translated)
        return translated

    async def get_shared(self, key: str) -> Any | None:
        """Read key from the distributed tier; any failure is a miss."""
        if self._shared is None or not self._shared.is_available():
            return None
        try:
            return await self._shared.get(key)
        except Exception:
            logger.warning("Distributed cache read failed for %s; treating as miss", key, exc_info=True)
            return None

    async def set_shared(self, key: str, value: Any) -> bool:
        """Write key to the distributed tier with its TTL; failures are logged only."""
        if self._shared is None or not self._shared.is_available():
            return False
        try:
            return bool(await self._shared.set(key, value, ttl=self._shared_ttl))
        except Exception:
            logger.warning("Distributed cache write failed for %s", key, exc_info=True)
            return False

    def stats(self) -> CacheStats:
        """Local tier counters."""
        return self._local.stats()
