"""Tests for text classification (opaque / enum-like / translatable)."""

import pytest

from app.application.services.text_classifier import classify, is_opaque, looks_like_enum
from app.domain.value_objects import TextKind


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "jean.dupont@example.com",
        "550e8400-e29b-41d4-a716-446655440000",
        "https://example.com/a b",
        "http://x",
        "12345",
        "2024-01-15",
        "2024-01-15T10:30:00Z",
    ],
)
def test_opaque_values(text: str) -> None:
    """Identifiers, emails, URLs, digits and ISO dates are opaque."""
    assert is_opaque(text)
    assert classify(text) is TextKind.OPAQUE


def test_uppercase_uuid_is_not_opaque() -> None:
    """Only lower-case hex UUIDs are recognised."""
    assert not is_opaque("550E8400-E29B-41D4-A716-446655440000")


def test_at_sign_without_dot_is_not_opaque() -> None:
    assert not is_opaque("rendez-vous @ midi")


def test_signed_number_is_not_opaque() -> None:
    assert not is_opaque("-12")


@pytest.mark.parametrize("text", ["ADMIN", "SUPER_USER", "LEVEL_1", "NASA", "ADMINs"])
def test_enum_like_values(text: str) -> None:
    assert looks_like_enum(text)
    assert classify(text) is TextKind.ENUMISH


def test_enum_ratio_boundary() -> None:
    """Exactly 70% upper-case letters is not enough; above is."""
    assert not looks_like_enum("ABCDEFGhij")  # 7/10
    assert looks_like_enum("ABCDEFGHij")  # 8/10


def test_enum_length_boundary() -> None:
    assert looks_like_enum("A" * 50)
    assert not looks_like_enum("A" * 51)


def test_enum_requires_letters_and_no_whitespace() -> None:
    assert not looks_like_enum("___")
    assert not looks_like_enum("SUPER USER")


def test_opaque_wins_over_enum() -> None:
    """Digits-only strings never become enum candidates."""
    assert classify("2024") is TextKind.OPAQUE


@pytest.mark.parametrize(
    "text", ["Bonjour le monde", "Admin", "Passionné de technologie", "é"]
)
def test_translatable_values(text: str) -> None:
    assert classify(text) is TextKind.TRANSLATABLE
