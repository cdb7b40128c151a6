"""Domain value objects for the translation engine.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass
from enum import Enum

from app.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_TRANSLATION

_LANG_RE = re.compile(r"^[a-z]{2,3}(-[a-z0-9]+)*$")


def validate_language(value: str, field_name: str = "language") -> None:
    """Raise ValueError unless value looks like a lowercase language code."""
    if not value:
        raise ValueError(f"{field_name} must be a non-empty string")
    if not _LANG_RE.match(value):
        raise ValueError(
            f"{field_name} must be a lowercase language code (e.g. 'fr', 'en'), got {value!r}"
        )


def text_hash(text: str) -> int:
    """Stable 32-bit hash of text.

    Same value as Java's String.hashCode (31-polynomial over UTF-16 code
    units, signed 32-bit), so keys written by any process sharing the Redis
    tier agree. Python's hash() is salted per process and cannot be used.
    Distinct strings may collide ("Aa" and "BB"); collisions are accepted.
    """
    h = 0
    data = text.encode("utf-16-be", "surrogatepass")
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & 0xFFFFFFFF
    return h - (1 << 32) if h & 0x80000000 else h


class TextKind(str, Enum):
    """Classification of a string leaf."""

    OPAQUE = "opaque"
    ENUMISH = "enumish"
    TRANSLATABLE = "translatable"


@dataclass(frozen=True)
class TranslationKey:
    """Identifies one unit of cacheable translation work.

    Two keys are equal when source, target and text hash are equal; the
    text itself is not part of the key.
    """

    source_lang: str
    target_lang: str
    text_hash: int

    @classmethod
    def for_text(cls, source_lang: str, target_lang: str, text: str) -> "TranslationKey":
        """Build the key for text translated from source_lang to target_lang."""
        return cls(source_lang, target_lang, text_hash(text))

    def cache_key(self) -> str:
        """Namespaced key used in both cache tiers (trans:fr:en:12345)."""
        return CACHE_KEY_SEP.join(
            (CACHE_PREFIX_TRANSLATION, self.source_lang, self.target_lang, str(self.text_hash))
        )
