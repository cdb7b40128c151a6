"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Languages, backend URL and cache sizes are validated at
load time; enum label rules are read from a JSON string.
"""

import json
import logging
from functools import lru_cache
from typing import Any

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import DEFAULT_EXCLUDED_FIELDS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. validate_languages_and_cache
    rejects malformed language codes and non-positive cache sizes so that a
    misconfigured process fails at startup, not on the first request.
    """

    # App
    app_name: str = "autotranslate"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Translation
    translate_enabled: bool = True
    # Language business content (messages, descriptions) is authored in.
    translate_source_language: str = "fr"
    # Language field names and enum constants are spelled in.
    translate_field_names_language: str = "en"
    # Operator-supplied labels, authored in the content source language:
    # {"UserRole": {"ADMIN": "Administrateur système"}}
    translate_enum_labels: str = ""
    translate_excluded_fields: str = ",".join(sorted(DEFAULT_EXCLUDED_FIELDS))

    # LibreTranslate backend
    libretranslate_url: str = "http://localhost:5000"
    libretranslate_api_key: SecretStr | None = None
    translate_connect_timeout_seconds: float = 5.0
    translate_read_timeout_seconds: float = 10.0

    # Local (in-process) tier
    local_cache_max_size: int = 10_000
    local_cache_ttl_seconds: int = 1800

    # Redis (distributed tier)
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    cache_ttl_seconds: int = 86400

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_jaeger_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("translate_enum_labels", mode="before")
    @classmethod
    def serialize_enum_labels(cls, value: Any) -> Any:
        """Accept the rule table as a JSON string (env) or a mapping (tests, DI)."""
        if value is None:
            return ""
        if isinstance(value, dict):
            return json.dumps(value, ensure_ascii=False)
        return value

    @field_validator("translate_source_language", "translate_field_names_language")
    @classmethod
    def normalize_language(cls, value: str) -> str:
        """Lower-case and strip language codes ("FR " -> "fr")."""
        return value.strip().lower()

    @model_validator(mode="after")
    def validate_languages_and_cache(self) -> "Settings":
        """Validate language codes, backend URL and cache sizing; warn on malformed enum labels."""
        for name in ("translate_source_language", "translate_field_names_language"):
            code = getattr(self, name)
            if len(code) < 2:
                raise ValueError(
                    f"{name.upper()} must be a language code such as 'fr' or 'en', got: {code!r}"
                )
        if not self.libretranslate_url.startswith(("http://", "https://")):
            raise ValueError(
                "LIBRETRANSLATE_URL must start with http:// or https://, "
                f"got: {self.libretranslate_url!r}"
            )
        if self.local_cache_max_size <= 0:
            raise ValueError("LOCAL_CACHE_MAX_SIZE must be positive")
        if self.local_cache_ttl_seconds <= 0 or self.cache_ttl_seconds <= 0:
            raise ValueError("LOCAL_CACHE_TTL_SECONDS and CACHE_TTL_SECONDS must be positive")
        # Malformed entries are dropped by EnumLabelRules; those constants get generated labels.
        for enum_type, constants in self.enum_labels.items():
            if not isinstance(constants, dict):
                logger.warning(
                    "TRANSLATE_ENUM_LABELS[%r] is not an object; ignoring it", enum_type
                )
                continue
            for constant, label in constants.items():
                if not isinstance(label, str):
                    logger.warning(
                        "TRANSLATE_ENUM_LABELS[%r][%r] is not a string; ignoring it",
                        enum_type,
                        constant,
                    )
        return self

    @property
    def enum_labels(self) -> dict[str, dict[str, str]]:
        """Operator enum label table parsed from TRANSLATE_ENUM_LABELS JSON."""
        if not self.translate_enum_labels.strip():
            return {}
        parsed = json.loads(self.translate_enum_labels)
        if not isinstance(parsed, dict):
            raise ValueError("TRANSLATE_ENUM_LABELS must be a JSON object")
        return parsed

    @property
    def excluded_fields(self) -> frozenset[str]:
        """Field names never translated and never listed in metadata."""
        return frozenset(
            f.strip() for f in self.translate_excluded_fields.split(",") if f.strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
