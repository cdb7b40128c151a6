"""Text classification for translation routing.

Decides whether a string is opaque (identifiers, emails, URLs, numbers,
timestamps), enum-like (short, no whitespace, mostly upper-case), or free
text to translate. Pure and total over every str, including "" and
non-ASCII input.

The enum rule is a shape heuristic, not a type check: a short upper-case
acronym in free text ("NASA") is classified ENUMISH.
"""

import re

from app.core.constants import ENUM_MAX_LENGTH, ENUM_UPPERCASE_RATIO
from app.domain.value_objects import TextKind

_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
_DIGITS_RE = re.compile(r"[0-9]+")
_ISO_DATE_PREFIX_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_URL_PREFIXES = ("http://", "https://")


def is_opaque(text: str) -> bool:
    """True for text that must be passed through untouched."""
    if not text or not text.strip():
        return True
    if "@" in text and "." in text:
        return True
    if _UUID_RE.fullmatch(text):
        return True
    if text.startswith(_URL_PREFIXES):
        return True
    if _DIGITS_RE.fullmatch(text):
        return True
    return _ISO_DATE_PREFIX_RE.match(text) is not None


def looks_like_enum(text: str) -> bool:
    """True for enum-constant shaped text: ADMIN, SUPER_USER, LEVEL_1.

    Rules: at most ENUM_MAX_LENGTH characters, no whitespace, at least one
    ASCII letter, and more than ENUM_UPPERCASE_RATIO of the ASCII letters
    upper-case.
    """
    if not text or len(text) > ENUM_MAX_LENGTH:
        return False
    if any(ch.isspace() for ch in text):
        return False
    letters = [ch for ch in text if ("A" <= ch <= "Z") or ("a" <= ch <= "z")]
    if not letters:
        return False
    upper = sum(1 for ch in letters if "A" <= ch <= "Z")
    return upper / len(letters) > ENUM_UPPERCASE_RATIO


def classify(text: str) -> TextKind:
    """Classify text; opaque wins over enum-like."""
    if is_opaque(text):
        return TextKind.OPAQUE
    if looks_like_enum(text):
        return TextKind.ENUMISH
    return TextKind.TRANSLATABLE
