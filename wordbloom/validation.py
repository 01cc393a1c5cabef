"""Empirical false positive measurement for the Bloom filter.

A word list is shuffled with a fixed seed and split into three subsets:

1. ``unknown_test``: words never inserted, used to count false positives
2. ``training``: words inserted into the filter
3. ``known_test``: a prefix of ``training``, used to count true positives

Sizes are whole percentages of ``len(words) // 100``; the remainder of a list
whose length is not a multiple of 100 is left out of every subset.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Sequence

from .bloom_filter import BloomFilter, InvalidParameter


logger = logging.getLogger(__name__)

DEFAULT_SEED = 1
P_TEST_SET_UNKNOWN = 50
P_TEST_SET_KNOWN = 50
NO_HOLDOUT_SUFFIX = "aajsoisjf"


class DataSet(NamedTuple):
    unknown_test: List[str]
    training: List[str]
    known_test: List[str]


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate counts from one validation run."""

    bloom: BloomFilter
    unknown_size: int
    training_size: int
    known_size: int
    false_positives: int
    true_positives: int

    @property
    def false_positive_rate(self) -> float:
        if self.unknown_size == 0:
            return 0.0
        return self.false_positives / self.unknown_size

    @property
    def true_positive_rate(self) -> float:
        if self.known_size == 0:
            return 0.0
        return self.true_positives / self.known_size


def _check_percent(name: str, value: int) -> None:
    if not 0 <= value <= 100:
        raise InvalidParameter(f"{name} must be within [0, 100], got {value!r}")


def partition(
    words: Sequence[str],
    *,
    seed: int = DEFAULT_SEED,
    unknown_percent: int = P_TEST_SET_UNKNOWN,
    known_percent: int = P_TEST_SET_KNOWN,
) -> DataSet:
    """Shuffle ``words`` deterministically and split them into a DataSet.

    ``words`` itself is left untouched. Each call shuffles with its own
    ``random.Random(seed)``, so equal arguments give equal partitions.
    """
    _check_percent("unknown_percent", unknown_percent)
    _check_percent("known_percent", known_percent)

    shuffled = list(words)
    random.Random(seed).shuffle(shuffled)

    one_percent = len(shuffled) // 100
    unknown_size = one_percent * unknown_percent
    training_size = one_percent * (100 - unknown_percent)
    known_size = one_percent * known_percent

    unknown_test = shuffled[:unknown_size]
    training = shuffled[unknown_size:unknown_size + training_size]
    known_test = training[:known_size]

    logger.info(
        "partitioned %d words: unknown_test=%d training=%d known_test=%d dropped=%d",
        len(shuffled),
        len(unknown_test),
        len(training),
        len(known_test),
        len(shuffled) - unknown_size - training_size,
    )
    return DataSet(unknown_test, training, known_test)


def measure(bloom: BloomFilter, queries: Iterable[str], expected: bool) -> int:
    """Count the ``queries`` for which ``bloom.contains`` equals ``expected``."""
    return sum(1 for word in queries if bloom.contains(word) == expected)


def validate(
    words: Sequence[str],
    p: float,
    *,
    seed: int = DEFAULT_SEED,
    hash_family: str = "murmur3",
    unknown_percent: int = P_TEST_SET_UNKNOWN,
    known_percent: int = P_TEST_SET_KNOWN,
) -> ValidationReport:
    """Build a filter from a training split of ``words`` and measure it.

    Raises:
        InvalidParameter: If the training split is empty or ``p`` is invalid.
    """
    data = partition(
        words,
        seed=seed,
        unknown_percent=unknown_percent,
        known_percent=known_percent,
    )
    if not data.training:
        raise InvalidParameter(
            f"training set is empty for {len(words)} words; at least 100 are required"
        )

    bloom = BloomFilter(len(data.training), p, hash_family=hash_family)
    bloom.update(data.training)

    report = ValidationReport(
        bloom=bloom,
        unknown_size=len(data.unknown_test),
        training_size=len(data.training),
        known_size=len(data.known_test),
        false_positives=measure(bloom, data.unknown_test, True),
        true_positives=measure(bloom, data.known_test, True),
    )
    logger.info(
        "validation: false_positives=%d/%d true_positives=%d/%d",
        report.false_positives,
        report.unknown_size,
        report.true_positives,
        report.known_size,
    )
    return report


def validate_without_holdout(
    words: Sequence[str],
    p: float,
    *,
    suffix: str = NO_HOLDOUT_SUFFIX,
    hash_family: str = "murmur3",
) -> ValidationReport:
    """Insert every word, then probe with suffixed variants of each word.

    The variants stand in for unknown words. Variants that happen to be in
    ``words`` are skipped so they cannot be counted as false positives.
    """
    if not words:
        raise InvalidParameter("words must not be empty")

    bloom = BloomFilter(len(words), p, hash_family=hash_family)
    bloom.update(words)

    present = set(words)
    variants = [word + suffix for word in words if word + suffix not in present]

    report = ValidationReport(
        bloom=bloom,
        unknown_size=len(variants),
        training_size=len(words),
        known_size=len(words),
        false_positives=measure(bloom, variants, True),
        true_positives=measure(bloom, words, True),
    )
    logger.info(
        "validation without holdout: false_positives=%d/%d",
        report.false_positives,
        report.unknown_size,
    )
    return report
