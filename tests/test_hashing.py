"""Tests for the seeded hash families."""
import mmh3
import pytest
import xxhash

from wordbloom.hashing import (
    HASH_FAMILIES,
    Murmur3HashFunction,
    XXH64HashFunction,
    _to_signed64,
    make_hash_family,
)


def test_to_signed64():
    assert _to_signed64(0) == 0
    assert _to_signed64((1 << 63) - 1) == (1 << 63) - 1
    assert _to_signed64(1 << 63) == -(1 << 63)
    assert _to_signed64((1 << 64) - 1) == -1


def test_murmur3_is_low_half_of_128_bit_digest():
    h = Murmur3HashFunction(7)
    assert h("hello") == mmh3.hash64(b"hello", 7, True, True)[0]


def test_xxh64_matches_library():
    h = XXH64HashFunction(3)
    expected = _to_signed64(xxhash.xxh64(b"hello", seed=3).intdigest())
    assert h("hello") == expected


@pytest.mark.parametrize("family", sorted(HASH_FAMILIES))
def test_values_are_signed_64_bit(family):
    for function in make_hash_family(8, family):
        for word in ("", "a", "hello", "naïve", "x" * 1000):
            value = function(word)
            assert -(1 << 63) <= value < (1 << 63)


@pytest.mark.parametrize("family", sorted(HASH_FAMILIES))
def test_seeds_give_distinct_outputs(family):
    functions = make_hash_family(16, family)
    assert [f.seed for f in functions] == list(range(16))
    assert len({f("bloom") for f in functions}) == 16


@pytest.mark.parametrize("family", sorted(HASH_FAMILIES))
def test_deterministic(family):
    first = make_hash_family(4, family)
    second = make_hash_family(4, family)
    assert first == second
    assert [f("word") for f in first] == [f("word") for f in second]


def test_unknown_family():
    with pytest.raises(KeyError):
        make_hash_family(2, "sha1")


def test_negative_seed_rejected():
    with pytest.raises(ValueError):
        Murmur3HashFunction(-1)
