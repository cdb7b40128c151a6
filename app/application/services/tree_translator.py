"""Object tree walker: translates JSON-like payloads.

Walks dicts, lists and scalars produced by json.loads or
model_dump(mode="json") and returns a new tree of the same shape:

* free-text string values are translated from the content language;
* enum-like string values keep their value and gain a sibling
  ``<key>Label`` holding the translated display label;
* keys in the exclusion set, keys already ending in ``Label`` and
  non-string scalars (numbers, booleans, None) are copied as is, except
  that a generated label replaces an existing ``<key>Label`` value;
* fields marked no_translate keep their value but still get enum labels.

The input is never mutated. Field markers and enum types come from the
EntitySchema registered under the entity name; nested objects are looked up
in the same schema by field name.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from app.application.services.enum_label_resolver import EnumLabelResolver
from app.application.services.text_classifier import classify
from app.application.services.translation_coordinator import TranslationCoordinator
from app.core.constants import LABEL_SUFFIX
from app.domain.schema import EntitySchema, SchemaRegistry
from app.domain.value_objects import TextKind

logger = logging.getLogger(__name__)


class TreeTranslator:
    """Recursive translator for generic value trees."""

    def __init__(
        self,
        coordinator: TranslationCoordinator,
        enum_labels: EnumLabelResolver,
        registry: SchemaRegistry,
        excluded_fields: frozenset[str],
    ) -> None:
        self._coordinator = coordinator
        self._enum_labels = enum_labels
        self._registry = registry
        self._excluded = excluded_fields

    async def translate_tree(
        self, tree: Any, target_lang: str, entity: str | None = None
    ) -> Any:
        """Return a translated copy of tree.

        Args:
            tree: dict, list, str or any JSON scalar.
            target_lang: Target language code.
            entity: Registered entity name describing the top-level objects.

        Returns:
            New tree with the same shape plus injected label keys.
        """
        schema = self._registry.get(entity)
        if entity and schema is None:
            logger.debug("No schema registered for entity %r; no field markers apply", entity)
        return await self._node(tree, target_lang, schema, protected=False)

    async def _node(
        self,
        node: Any,
        target_lang: str,
        schema: EntitySchema | None,
        protected: bool,
    ) -> Any:
        if isinstance(node, dict):
            return await self._object(node, target_lang, schema)
        if isinstance(node, list):
            return [
                await self._node(item, target_lang, schema, protected) for item in node
            ]
        if isinstance(node, str):
            if not protected and classify(node) is TextKind.TRANSLATABLE:
                return await self._coordinator.translate(node, target_lang)
            return node
        return node

    async def _object(
        self, node: dict[str, Any], target_lang: str, schema: EntitySchema | None
    ) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in list(node.items()):
            if not isinstance(key, str) or key.endswith(LABEL_SUFFIX) or key in self._excluded:
                out.setdefault(key, copy.deepcopy(value))
                continue
            protected = schema.is_protected(key) if schema else False
            if isinstance(value, str):
                kind = classify(value)
                out[key] = value
                if kind is TextKind.ENUMISH:
                    enum_type = schema.enum_type(key) if schema else None
                    out[key + LABEL_SUFFIX] = await self._enum_labels.label_for(
                        enum_type, value, target_lang
                    )
                elif kind is TextKind.TRANSLATABLE and not protected:
                    out[key] = await self._coordinator.translate(value, target_lang)
            elif isinstance(value, (dict, list)):
                out[key] = await self._node(value, target_lang, schema, protected)
            else:
                out[key] = value
        return out
