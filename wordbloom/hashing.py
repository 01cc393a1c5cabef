"""Seeded hash functions for the Bloom filter hash family.

Each function maps a string to a signed 64-bit integer. Two families are
available: MurmurHash3 x64-128 via mmh3 (low 64 bits of the digest) and
xxHash64 via xxhash. Seeding a family with ``0..k-1`` yields ``k`` independent
draws.
"""
from __future__ import annotations

from typing import Callable, Dict, Tuple

import mmh3
import xxhash


_SIGN_BIT = 1 << 63
_MOD64 = 1 << 64


def _to_signed64(value: int) -> int:
    """Reinterpret an unsigned 64-bit value as two's-complement."""
    return value - _MOD64 if value >= _SIGN_BIT else value


class HashFunction:
    """Base class for a seeded string hash."""

    name = "abstract"

    __slots__ = ("seed",)

    def __init__(self, seed: int) -> None:
        if seed < 0:
            raise ValueError("seed must be non-negative")
        self.seed = seed

    def __call__(self, word: str) -> int:
        return self.hash_bytes(word.encode("utf-8"))

    def hash_bytes(self, data: bytes) -> int:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashFunction):
            return NotImplemented
        return type(self) is type(other) and self.seed == other.seed

    def __hash__(self) -> int:
        return hash((self.name, self.seed))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"


class Murmur3HashFunction(HashFunction):
    """MurmurHash3 x64-128, truncated to the low 64 bits."""

    name = "murmur3"

    __slots__ = ()

    def hash_bytes(self, data: bytes) -> int:
        low, _high = mmh3.hash64(data, self.seed, True, True)
        return low


class XXH64HashFunction(HashFunction):
    """xxHash64 keyed by seed."""

    name = "xxh64"

    __slots__ = ()

    def hash_bytes(self, data: bytes) -> int:
        return _to_signed64(xxhash.xxh64(data, seed=self.seed).intdigest())


HASH_FAMILIES: Dict[str, Callable[[int], HashFunction]] = {
    Murmur3HashFunction.name: Murmur3HashFunction,
    XXH64HashFunction.name: XXH64HashFunction,
}


def make_hash_family(count: int, family: str = "murmur3") -> Tuple[HashFunction, ...]:
    """Return ``count`` hash functions of ``family`` seeded ``0..count-1``.

    Raises:
        KeyError: If ``family`` is not a registered hash family.
    """
    factory = HASH_FAMILIES[family]
    return tuple(factory(seed) for seed in range(count))
