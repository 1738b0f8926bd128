"""Tests for deterministic image seeds."""

from app.utils.seed import string_hash, term_seed


def test_string_hash_known_values():
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("ab") == 97 * 31 + 98
    assert string_hash("gato") == 3165397
    assert string_hash("hello") == 99162322


def test_string_hash_wraps_to_signed_32_bit():
    assert string_hash("polygenelubricants") == -2147483648
    assert term_seed("polygenelubricants") == 2147483647


def test_string_hash_accepts_lone_surrogates():
    assert string_hash("\ud83d") == 0xD83D
    assert term_seed("gato\ud83d") == abs(string_hash("gato\ud83d"))


def test_string_hash_uses_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert string_hash("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_term_seed_is_deterministic():
    assert term_seed("perro") == term_seed("perro")


def test_term_seed_normalizes_case_and_whitespace():
    assert term_seed("  Gato ") == term_seed("gato")
    assert term_seed("GATO") == term_seed("gato")


def test_term_seed_is_non_negative():
    for term in ["gato", "perro", "mañana", "polygenelubricants", "una palabra muy larga de verdad"]:
        assert term_seed(term) >= 0


def test_term_seed_usually_differs_between_terms():
    seeds = {term_seed(term) for term in ["gato", "perro", "casa", "libro", "agua"]}
    assert len(seeds) == 5
