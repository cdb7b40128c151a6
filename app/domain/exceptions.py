"""Domain exceptions for the translation service.

Defines domain-level exceptions that represent failures of the translation
engine and its metadata API. These exceptions are independent of
infrastructure concerns. Presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class TranslateException(Exception):
    """Base exception for all translation service errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. entity, language).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TranslateException):
    """Raised when input validation fails (e.g. malformed language code)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class EntityNotFoundException(TranslateException):
    """Raised when field metadata is requested for an unregistered entity."""

    def __init__(self, entity: str) -> None:
        """Initialize with the unknown entity name.

        Args:
            entity: Entity name that has no registered schema.
        """
        super().__init__(
            f"No metadata found for entity '{entity}'",
            "ENTITY_NOT_FOUND",
            {"entity": entity},
        )


class TranslationBackendError(TranslateException):
    """Raised when the remote translation backend fails.

    Covers timeouts, transport errors, non-2xx responses and payloads
    without a translatedText field. Never escapes the translation
    coordinator: callers receive the original text instead.
    """

    def __init__(
        self,
        reason: str,
        source_lang: str,
        target_lang: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize with failure reason and language pair.

        Args:
            reason: Short description (e.g. 'timeout', 'HTTP 503').
            source_lang: Source language of the failed request.
            target_lang: Target language of the failed request.
            status_code: HTTP status when the backend answered.
        """
        details: dict[str, Any] = {"source": source_lang, "target": target_lang}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Translation backend failed: {reason}",
            "TRANSLATION_BACKEND_ERROR",
            details,
        )
