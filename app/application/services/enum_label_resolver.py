"""Display labels for enum-like values.

An operator rule for (enum type, constant) wins and is translated from the
content source language. Without a rule the label is synthesised from the
constant (SUPER_USER -> "Super User"); that text is spelled in the
identifier language, so it is translated from there. The two languages are
independent, which is why a label may need translating even when the
request targets the content language.
"""

from __future__ import annotations

import logging

from app.application.services.label_generator import enum_constant_to_label
from app.application.services.translation_coordinator import TranslationCoordinator
from app.domain.enum_labels import EnumLabelRules

logger = logging.getLogger(__name__)


class EnumLabelResolver:
    """Resolves translated labels for enum constants. Never raises."""

    def __init__(
        self,
        coordinator: TranslationCoordinator,
        rules: EnumLabelRules,
        *,
        content_language: str,
        identifier_language: str,
    ) -> None:
        self._coordinator = coordinator
        self._rules = rules
        self.content_language = content_language
        self.identifier_language = identifier_language

    async def label_for(
        self, enum_type: str | None, constant: str, target_lang: str
    ) -> str:
        """Translated label for constant of enum_type in target_lang.

        Args:
            enum_type: Business enum type name (e.g. "UserRole"); None when
                the field's type is unknown, which skips rule lookup.
            constant: Enum constant as serialized (e.g. "ADMIN").
            target_lang: Target language code.

        Returns:
            Translated label, or the untranslated synthesised label on failure.
        """
        generated = enum_constant_to_label(constant)
        try:
            custom = self._rules.get(enum_type, constant)
            if custom is not None:
                logger.debug("Using configured label %s.%s -> %r", enum_type, constant, custom)
                return await self._coordinator.resolve(
                    custom, self.content_language, target_lang
                )
            return await self._coordinator.resolve(
                generated, self.identifier_language, target_lang
            )
        except Exception:
            logger.exception("Enum label resolution failed for %s.%s", enum_type, constant)
            return generated
