"""Tests for translation keys, text hashing and language validation."""

import pytest

from app.domain.value_objects import TranslationKey, text_hash, validate_language


def test_text_hash_matches_reference_values() -> None:
    """Same values as the 31-polynomial 32-bit string hash."""
    assert text_hash("") == 0
    assert text_hash("a") == 97
    assert text_hash("hello") == 99162322
    assert text_hash("Hello World") == -862545276


def test_text_hash_is_stable_and_signed() -> None:
    text = "Passionné de technologie" * 10
    assert text_hash(text) == text_hash(text)
    assert -(2**31) <= text_hash(text) < 2**31


def test_text_hash_accepts_lone_surrogates() -> None:
    """Unpaired UTF-16 code units (valid after json.loads) hash as raw units."""
    assert text_hash("\ud800") == 55296
    assert text_hash("a\ud800") == 97 * 31 + 55296


def test_text_hash_collision_is_shared_key() -> None:
    """Colliding strings map to the same cache slot."""
    assert text_hash("Aa") == text_hash("BB") == 2112
    assert TranslationKey.for_text("fr", "en", "Aa") == TranslationKey.for_text("fr", "en", "BB")


def test_cache_key_format() -> None:
    key = TranslationKey.for_text("fr", "en", "a")
    assert key.cache_key() == "trans:fr:en:97"


def test_cache_key_keeps_negative_sign() -> None:
    key = TranslationKey.for_text("fr", "en", "Hello World")
    assert key.cache_key() == "trans:fr:en:-862545276"


@pytest.mark.parametrize("code", ["fr", "en", "pt-br", "zh-hant"])
def test_validate_language_accepts_codes(code: str) -> None:
    validate_language(code)


@pytest.mark.parametrize("code", ["", "f", "FR", "fr_FR", "12"])
def test_validate_language_rejects_bad_codes(code: str) -> None:
    with pytest.raises(ValueError):
        validate_language(code)
