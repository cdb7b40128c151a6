"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure and the label naming
convention. Used by the cache layer and the translation services.
"""

# Cache key prefixes
CACHE_PREFIX_TRANSLATION = "trans"
CACHE_PREFIX_METADATA = "metadata"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Suffix of the sibling key carrying a generated enum label (role -> roleLabel).
LABEL_SUFFIX = "Label"

# Technical fields: never translated, never listed in field metadata.
DEFAULT_EXCLUDED_FIELDS = frozenset({
    "id",
    "uuid",
    "password",
    "token",
    "keycloakId",
    "createdAt",
    "updatedAt",
    "dateCreation",
    "dateModification",
    "url",
    "uri",
    "sub",
    "iss",
})

# Enum heuristic bounds (see text_classifier).
ENUM_MAX_LENGTH = 50
ENUM_UPPERCASE_RATIO = 0.7
