"""Application services: classification, labels, coordinator, walker, metadata."""

from app.application.services.enum_label_resolver import EnumLabelResolver
from app.application.services.field_metadata_service import FieldMetadataService
from app.application.services.label_generator import (
    enum_constant_to_label,
    identifier_to_label,
)
from app.application.services.text_classifier import (
    classify,
    is_opaque,
    looks_like_enum,
)
from app.application.services.translation_coordinator import TranslationCoordinator
from app.application.services.translation_service import TranslationService
from app.application.services.tree_translator import TreeTranslator

__all__ = [
    "EnumLabelResolver",
    "FieldMetadataService",
    "TranslationCoordinator",
    "TranslationService",
    "TreeTranslator",
    "classify",
    "enum_constant_to_label",
    "identifier_to_label",
    "is_opaque",
    "looks_like_enum",
]
