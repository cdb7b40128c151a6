"""Operator-supplied enum label rules.

Labels are authored in the content source language and keyed by business
enum type and constant (never by display text). The table is frozen at
construction and shared read-only between tasks.
"""

from collections.abc import Mapping
from types import MappingProxyType


class EnumLabelRules:
    """Immutable (enum type, constant) -> label table."""

    def __init__(self, labels: Mapping[str, Mapping[str, str]] | None = None) -> None:
        frozen: dict[str, Mapping[str, str]] = {}
        for enum_type, constants in (labels or {}).items():
            if not isinstance(constants, Mapping):
                continue
            frozen[enum_type] = MappingProxyType(
                {k: v for k, v in constants.items() if isinstance(v, str)}
            )
        self._labels: Mapping[str, Mapping[str, str]] = MappingProxyType(frozen)

    def get(self, enum_type: str | None, constant: str) -> str | None:
        """Return the configured label, or None when no rule exists."""
        if not enum_type:
            return None
        constants = self._labels.get(enum_type)
        if constants is None:
            return None
        return constants.get(constant)

    def has_type(self, enum_type: str) -> bool:
        """True if any rule is configured for enum_type."""
        return enum_type in self._labels

    def labels_for(self, enum_type: str) -> dict[str, str]:
        """Copy of all configured labels for enum_type (empty if none)."""
        return dict(self._labels.get(enum_type, {}))

    def __len__(self) -> int:
        return sum(len(c) for c in self._labels.values())
