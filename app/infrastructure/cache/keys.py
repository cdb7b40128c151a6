"""Cache key builders. Single place for key format (DRY).

Key components (entity names, language codes) must not contain
CACHE_KEY_SEP to avoid ambiguous or colliding keys. Translation keys are
rendered by TranslationKey.cache_key() in the domain layer.
"""

from app.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_METADATA


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value contains CACHE_KEY_SEP.
    """
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def metadata_key(entity: str, lang: str) -> str:
    """Cache key for an entity's field labels in lang."""
    _validate_key_component(entity, "entity")
    _validate_key_component(lang, "lang")
    return f"{CACHE_PREFIX_METADATA}{CACHE_KEY_SEP}{entity}{CACHE_KEY_SEP}{lang}"
