"""Translation API schemas."""

from pydantic import BaseModel, Field, field_validator

from app.domain.value_objects import validate_language


def _language(value: str | None, field_name: str) -> str | None:
    if value is None:
        return None
    value = value.strip().lower()
    validate_language(value, field_name)
    return value


class TranslateRequest(BaseModel):
    """Request body for POST /translate."""

    text: str = Field(..., max_length=5000, description="Text to translate")
    target_lang: str = Field(..., min_length=2, max_length=16, examples=["en"])
    source_lang: str | None = Field(
        default=None,
        min_length=2,
        max_length=16,
        description="Defaults to the configured content language",
    )

    @field_validator("target_lang")
    @classmethod
    def _check_target(cls, v: str) -> str:
        return _language(v, "target_lang")

    @field_validator("source_lang")
    @classmethod
    def _check_source(cls, v: str | None) -> str | None:
        return _language(v, "source_lang")


class TranslateResponse(BaseModel):
    """Response for POST /translate. Original text when translation failed."""

    translated_text: str
