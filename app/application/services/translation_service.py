"""Translation facade: the contract offered to HTTP layers.

Composes coordinator, enum label resolver, tree walker and metadata
generator. Every public method is total: unexpected errors are logged and
the original (untranslated) content is returned, so a translation problem
never fails a response.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from app.application.services.enum_label_resolver import EnumLabelResolver
from app.application.services.field_metadata_service import FieldMetadataService
from app.application.services.translation_coordinator import TranslationCoordinator
from app.application.services.tree_translator import TreeTranslator
from app.domain.enum_labels import EnumLabelRules
from app.domain.schema import SchemaRegistry
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.local_cache import CacheStats, LocalCache
from app.infrastructure.external.translation.protocol import TranslationBackend

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class TranslationService:
    """Entry point for text, tree and metadata translation."""

    def __init__(
        self,
        coordinator: TranslationCoordinator,
        trees: TreeTranslator,
        metadata: FieldMetadataService,
        *,
        enabled: bool = True,
        identifier_language: str = "en",
    ) -> None:
        self._coordinator = coordinator
        self._trees = trees
        self._metadata = metadata
        self.enabled = enabled
        self.identifier_language = identifier_language

    @classmethod
    def build(
        cls,
        settings: "Settings",
        backend: TranslationBackend,
        shared_cache: CacheProtocol | None = None,
        registry: SchemaRegistry | None = None,
    ) -> TranslationService:
        """Wire the engine from settings (composition root helper)."""
        registry = registry if registry is not None else SchemaRegistry()
        excluded = settings.excluded_fields
        coordinator = TranslationCoordinator(
            backend,
            source_language=settings.translate_source_language,
            local_cache=LocalCache(
                max_size=settings.local_cache_max_size,
                ttl_seconds=settings.local_cache_ttl_seconds,
            ),
            shared_cache=shared_cache,
            shared_ttl_seconds=settings.cache_ttl_seconds,
        )
        enum_labels = EnumLabelResolver(
            coordinator,
            EnumLabelRules(settings.enum_labels),
            content_language=settings.translate_source_language,
            identifier_language=settings.translate_field_names_language,
        )
        service = cls(
            coordinator,
            TreeTranslator(coordinator, enum_labels, registry, excluded),
            FieldMetadataService(
                coordinator,
                registry,
                identifier_language=settings.translate_field_names_language,
                excluded_fields=excluded,
            ),
            enabled=settings.translate_enabled,
            identifier_language=settings.translate_field_names_language,
        )
        logger.info(
            "Translation service initialized: source=%s, field_names=%s, entities=%d, "
            "local_cache=%d/%ss, shared_ttl=%ss",
            settings.translate_source_language,
            settings.translate_field_names_language,
            len(registry),
            settings.local_cache_max_size,
            settings.local_cache_ttl_seconds,
            settings.cache_ttl_seconds,
        )
        return service

    @property
    def source_language(self) -> str:
        return self._coordinator.source_language

    async def translate(
        self, text: str, target_lang: str, source_lang: str | None = None
    ) -> str:
        """Translate one string (content source language unless source_lang is given)."""
        if not self.enabled or not isinstance(text, str):
            return text
        try:
            return await self._coordinator.resolve(text, source_lang, target_lang)
        except Exception:
            logger.exception("Text translation failed; returning original")
            return text

    async def translate_tree(
        self, tree: Any, target_lang: str, entity: str | None = None
    ) -> Any:
        """Translate a JSON-like tree; see TreeTranslator."""
        if not self.enabled or tree is None:
            return tree
        try:
            return await self._trees.translate_tree(tree, target_lang, entity)
        except Exception:
            logger.exception("Tree translation failed; returning original")
            return tree

    async def translate_object(
        self,
        obj: BaseModel | Sequence[BaseModel],
        target_lang: str,
        entity: str | None = None,
    ) -> Any:
        """Serialize pydantic model(s) to JSON data and translate the result."""
        if isinstance(obj, BaseModel):
            data: Any = obj.model_dump(mode="json", by_alias=True)
        else:
            data = [
                item.model_dump(mode="json", by_alias=True)
                if isinstance(item, BaseModel)
                else item
                for item in obj
            ]
        return await self.translate_tree(data, target_lang, entity)

    async def metadata_for(self, entity: str, target_lang: str) -> dict[str, str]:
        """Field labels for entity in target_lang; {} when unknown or disabled."""
        if not self.enabled:
            return {}
        try:
            return await self._metadata.metadata_for(entity, target_lang)
        except Exception:
            logger.exception("Metadata generation failed for %s/%s", entity, target_lang)
            return {}

    def registered_entities(self) -> list[str]:
        """Registered entity names ([] when disabled)."""
        if not self.enabled:
            return []
        return self._metadata.registered_entities()

    def cache_stats(self) -> CacheStats:
        """Local tier counters."""
        return self._coordinator.stats()
