import pytest

from symtab.hashing import HASH_MULTIPLIER, hash_key, hash_string


def reference_hash(key: str) -> int:
    hash = 0
    for byte in key.encode("utf-8", "surrogatepass"):
        hash = hash * HASH_MULTIPLIER + byte
    return hash % 2**32


def test_hash_string():
    assert hash_string("") == 0
    assert hash_string("a") == 97
    assert hash_string("ab") == 97 * 65599 + 98
    # wraps around at 32 bits
    assert hash_string("abc") == 807794786
    # hashes utf-8 bytes, not code points
    assert hash_string("é") == 195 * 65599 + 169
    # lone surrogates hash as their utf-8 style bytes
    assert hash_string("\udcff") == ((0xED * 65599 + 0xB3) * 65599 + 0xBF) % 2**32


def test_hash_string_matches_unbounded_arithmetic():
    for key in ["symtab", "hello world", "x" * 100, "ключ", "0123456789" * 7]:
        assert hash_string(key) == reference_hash(key)
        assert 0 <= hash_string(key) < 2**32


def test_hash_is_order_sensitive():
    assert hash_string("ab") != hash_string("ba")


def test_hash_key():
    assert hash_key(519, "") == 0
    assert hash_key(519, "a") == 97
    assert hash_key(519, "ab") == 261
    assert hash_key(1, "anything") == 0

    for key in ["a", "abc", "symbol", "é"]:
        for buckets in [519, 1021, 65521]:
            index = hash_key(buckets, key)
            assert 0 <= index < buckets
            assert index == hash_string(key) % buckets


def test_hash_preconditions():
    with pytest.raises(TypeError):
        hash_string(None)  # type: ignore
    with pytest.raises(TypeError):
        hash_string(b"bytes")  # type: ignore
    with pytest.raises(ValueError):
        hash_key(0, "a")
