"""Translation backend protocol (DIP). Implementation: LibreTranslateClient."""

from typing import Protocol


class TranslationBackend(Protocol):
    """Protocol for remote machine translation backends."""

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Return text translated from source_lang to target_lang.

        Raises:
            TranslationBackendError: On timeout, transport error, non-2xx
                response, or a payload without translated text.
        """
        ...
