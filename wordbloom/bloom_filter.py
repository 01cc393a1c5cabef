"""Bloom filter sized from an expected element count and false positive rate.

The bit array size ``m`` and the number of hash functions ``k`` are derived
once from ``(n, p)`` using the closed-form optimum for a standard Bloom
filter (https://en.wikipedia.org/wiki/Bloom_filter#Optimal_number_of_hash_functions):

    m = ceil(-(n * ln p) / (ln 2) ** 2)
    k = ceil((m / n) * ln 2)

Each of the ``k`` hash functions is seeded with its position, so two filters
built from the same parameters and fed the same words hold the same bits.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, Tuple

from .hashing import HASH_FAMILIES, HashFunction, make_hash_family


logger = logging.getLogger(__name__)

_LN2 = math.log(2)


class InvalidParameter(ValueError):
    """Raised when a filter or partition is configured with bad parameters."""


def optimal_size(n: int, p: float) -> int:
    """Return the bit array size minimising false positives for ``n`` and ``p``."""
    if p <= 0:
        raise InvalidParameter("p must be greater than 0 to size a filter")
    m = math.ceil(-(n * math.log(p)) / (_LN2 ** 2))
    return max(1, m)


def optimal_num_hashes(m: int, n: int) -> int:
    """Return the number of hash functions for ``m`` bits and ``n`` elements.

    Always rounded up; ``k == 0`` would answer every query with True.
    """
    return max(1, math.ceil((m / n) * _LN2))


class BloomFilter:
    """Bloom filter backed by a bytearray bitset."""

    def __init__(self, n: int, p: float, *, hash_family: str = "murmur3") -> None:
        """Initialize a Bloom filter.

        Args:
            n: Number of elements expected to be inserted.
            p: Target false positive probability, ``0 < p <= 1``.
            hash_family: Name of the seeded hash to use ("murmur3" or "xxh64").

        Raises:
            InvalidParameter: If ``n`` is not positive, ``p`` is outside
                ``(0, 1]`` or ``hash_family`` is unknown.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidParameter(f"n must be an integer, got {n!r}")
        if n <= 0:
            raise InvalidParameter("n must be positive")
        if not 0 <= p <= 1:
            raise InvalidParameter(f"p must be within [0, 1], got {p!r}")
        if p == 0:
            raise InvalidParameter("p == 0 cannot be met by a finite Bloom filter")
        if hash_family not in HASH_FAMILIES:
            raise InvalidParameter(
                f"unknown hash family {hash_family!r}, expected one of {sorted(HASH_FAMILIES)}"
            )

        self.n = n
        self.p = p
        self.m = optimal_size(n, p)
        self.k = optimal_num_hashes(self.m, n)
        self.hash_family = hash_family
        self.inserted = 0
        self._hash_functions = make_hash_family(self.k, hash_family)
        self._bit_array = bytearray((self.m + 7) // 8)

        logger.debug(
            "BloomFilter created: n=%d p=%g m=%d k=%d hash_family=%s",
            self.n,
            self.p,
            self.m,
            self.k,
            self.hash_family,
        )

    def insert(self, word: str) -> None:
        """Insert ``word`` into the filter."""
        for bit_index in self._indices(word):
            self._bit_array[bit_index >> 3] |= 1 << (bit_index & 7)
        self.inserted += 1

    add = insert

    def update(self, words: Iterable[str]) -> None:
        """Insert all ``words`` into the filter."""
        for word in words:
            self.insert(word)

    def contains(self, word: str) -> bool:
        """Return True if ``word`` may be present, False if definitely absent."""
        for bit_index in self._indices(word):
            if not (self._bit_array[bit_index >> 3] & (1 << (bit_index & 7))):
                return False
        return True

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def _indices(self, word: str) -> Iterator[int]:
        """Yield one bit position per hash function."""
        data = word.encode("utf-8")
        for function in self._hash_functions:
            yield abs(function.hash_bytes(data)) % self.m

    def indices(self, word: str) -> Tuple[int, ...]:
        """Return the ``k`` bit positions ``word`` maps to."""
        return tuple(self._indices(word))

    @property
    def hash_functions(self) -> Tuple[HashFunction, ...]:
        return self._hash_functions

    @property
    def bit_array(self) -> bytes:
        """Snapshot of the underlying bit array for inspection."""
        return bytes(self._bit_array)

    @property
    def bit_count(self) -> int:
        """Number of bits currently set."""
        return sum(bin(byte).count("1") for byte in self._bit_array)

    def estimated_false_positive_rate(self) -> float:
        """Theoretical false positive rate after ``inserted`` insertions."""
        if self.inserted == 0:
            return 0.0
        return (1 - math.exp(-self.k * self.inserted / self.m)) ** self.k

    def __repr__(self) -> str:
        return (
            f"BloomFilter(n={self.n}, p={self.p}, k={self.k}, m={self.m}, "
            f"set_bits={self.bit_count})"
        )
