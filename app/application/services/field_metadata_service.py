"""Field metadata: translated form labels per entity and language.

For every declared field of a registered entity, except excluded technical
fields, the label is derived from the field name (firstName -> "First Name")
and translated from the identifier language. no_translate fields are
included: the marker protects values, not labels.

Results are cached as a whole map under metadata:{entity}:{lang} in the
distributed tier, read and written through the translation coordinator.
"""

from __future__ import annotations

import logging

from app.application.services.label_generator import identifier_to_label
from app.application.services.translation_coordinator import TranslationCoordinator
from app.domain.schema import SchemaRegistry
from app.infrastructure.cache.keys import metadata_key

logger = logging.getLogger(__name__)


class FieldMetadataService:
    """Builds and caches field label maps for registered entities."""

    def __init__(
        self,
        coordinator: TranslationCoordinator,
        registry: SchemaRegistry,
        *,
        identifier_language: str,
        excluded_fields: frozenset[str],
    ) -> None:
        self._coordinator = coordinator
        self._registry = registry
        self.identifier_language = identifier_language
        self._excluded = excluded_fields

    def registered_entities(self) -> list[str]:
        """Names of entities with field metadata, sorted."""
        return self._registry.names()

    async def metadata_for(self, entity: str, target_lang: str) -> dict[str, str]:
        """Return {field name: translated label} for entity in target_lang.

        Returns an empty dict for unknown entities; empty results are not cached.
        """
        schema = self._registry.get(entity)
        if schema is None:
            logger.warning("Unknown entity for metadata: %s", entity)
            return {}

        cache_key = metadata_key(entity, target_lang)
        cached = await self._coordinator.get_shared(cache_key)
        if isinstance(cached, dict):
            logger.debug("Cache HIT for metadata: %s/%s", entity, target_lang)
            return {str(k): str(v) for k, v in cached.items()}

        metadata: dict[str, str] = {}
        for descriptor in schema.fields:
            if descriptor.name in self._excluded:
                continue
            label = identifier_to_label(descriptor.name)
            metadata[descriptor.name] = await self._coordinator.resolve(
                label, self.identifier_language, target_lang
            )

        if metadata:
            await self._coordinator.set_shared(cache_key, metadata)
        return metadata
