"""Command-line report for a Bloom filter built from a word list.

Reads one word per line, builds a filter sized for the training words and
prints:

1. Filter parameters and memory usage
2. Partition sizes
3. False positive rate on unknown words (should be around ``p``)
4. True positive rate on known words (should always be 1)

Run with:

    python -m wordbloom words.txt -p 0.1
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .bloom_filter import InvalidParameter
from .dataset import load_words
from .hashing import HASH_FAMILIES
from .validation import (
    DEFAULT_SEED,
    ValidationReport,
    validate,
    validate_without_holdout,
)


DEFAULT_P = 0.1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordbloom",
        description="Measure Bloom filter false positives on a word list.",
    )
    parser.add_argument("words_file", help="text file with one word per line")
    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        default=DEFAULT_P,
        help=f"target false positive probability (default {DEFAULT_P})",
    )
    parser.add_argument(
        "--no-validation",
        action="store_true",
        help="insert every word and probe with suffixed variants instead of a held-out split",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"shuffle seed for the held-out split (default {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--hash",
        dest="hash_family",
        choices=sorted(HASH_FAMILIES),
        default="murmur3",
        help="seeded hash family (default murmur3)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def show_report(report: ValidationReport, validation: bool) -> None:
    """Print filter properties and the measured rates."""
    bloom = report.bloom
    bytes_len = len(bloom.bit_array)

    print("=" * 60)
    print("Bloom filter report" + (" (cross validation)" if validation else " (no validation)"))
    print("=" * 60)
    print(f"  Expected elements (n): {bloom.n}")
    print(f"  Target FP probability (p): {bloom.p}")
    print(f"  Filter size (bits): {bloom.m}")
    print(f"  Filter size (bytes): {bytes_len}")
    print(f"  Number of hash functions: {bloom.k} ({bloom.hash_family})")
    print(f"  Bits set: {bloom.bit_count}")
    print()
    print(f"  Unknown test words: {report.unknown_size}")
    print(f"  Training words: {report.training_size}")
    print(f"  Known test words: {report.known_size}")
    print()
    fpr = report.false_positive_rate
    print(f"  False positives: {report.false_positives}")
    print(f"  Unknown false positive rate: {fpr:.6f} ({fpr*100:.4f}%)")
    print(f"  Theoretical false positive rate: {bloom.estimated_false_positive_rate():.6f}")
    print(f"  Known true positive rate: {report.true_positive_rate:.6f} (expected 1)")
    print("=" * 60)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        words = load_words(args.words_file)
        print(f"Read {len(words)} words.")
        if args.no_validation:
            report = validate_without_holdout(
                words, args.probability, hash_family=args.hash_family
            )
        else:
            report = validate(
                words, args.probability, seed=args.seed, hash_family=args.hash_family
            )
    except (FileNotFoundError, InvalidParameter) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    show_report(report, validation=not args.no_validation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
