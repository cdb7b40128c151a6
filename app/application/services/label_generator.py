"""Human labels from machine identifiers.

firstName -> "First Name", date_creation -> "Date Creation",
SUPER_USER -> "Super User". Both transforms are total: empty input is
returned unchanged and nothing here raises.
"""

import re

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def _title_words(text: str) -> str:
    """Upper-case the first character of each whitespace-separated word."""
    return " ".join(_capitalize_first(w) for w in text.split())


def identifier_to_label(name: str) -> str:
    """Field name (camelCase or snake_case) to a Title Case label.

    Only the first letter of each word changes case, so upper-case runs are
    kept ("URLValue" -> "URLValue", "userID" -> "User ID").
    """
    if not name:
        return name
    spaced = _CAMEL_BOUNDARY_RE.sub(r"\1 \2", name.replace("_", " "))
    return _title_words(spaced)


def enum_constant_to_label(value: str) -> str:
    """Enum constant to a Title Case label ("LEVEL_1" -> "Level 1")."""
    if not value:
        return value
    return _title_words(value.replace("_", " ").lower())
