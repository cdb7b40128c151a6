"""Domain layer: value objects, entity schemas, enum label rules, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enum_labels import EnumLabelRules
from app.domain.exceptions import (
    EntityNotFoundException,
    TranslateException,
    TranslationBackendError,
    ValidationException,
)
from app.domain.schema import (
    EntitySchema,
    FieldDescriptor,
    SchemaRegistry,
    no_translate,
)
from app.domain.value_objects import TextKind, TranslationKey

__all__ = [
    "EntityNotFoundException",
    "EntitySchema",
    "EnumLabelRules",
    "FieldDescriptor",
    "SchemaRegistry",
    "TextKind",
    "TranslateException",
    "TranslationBackendError",
    "TranslationKey",
    "ValidationException",
    "no_translate",
]
