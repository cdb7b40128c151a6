"""HTTP middleware: response translation.

Applied in main app. Import and use from app.main.
"""

from app.middleware.translation import (
    TranslationMiddleware,
    extract_language,
    set_translate_entity,
)

__all__ = [
    "TranslationMiddleware",
    "extract_language",
    "set_translate_entity",
]
