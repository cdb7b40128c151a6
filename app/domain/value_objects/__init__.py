"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    TextKind,
    TranslationKey,
    text_hash,
    validate_language,
)

__all__ = [
    "TextKind",
    "TranslationKey",
    "text_hash",
    "validate_language",
]
