"""Remote translation backends (LibreTranslate over HTTP)."""

from app.infrastructure.external.translation.libretranslate import (
    LibreTranslateClient,
)
from app.infrastructure.external.translation.protocol import TranslationBackend

__all__ = ["LibreTranslateClient", "TranslationBackend"]
