"""Word list loading."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union


logger = logging.getLogger(__name__)


def load_words(path: Union[str, Path]) -> list[str]:
    """Load one word per line from a UTF-8 text file.

    Line terminators are stripped; empty lines are kept as empty words.
    """
    word_file = Path(path)

    if not word_file.exists():
        raise FileNotFoundError(f"Word list not found: {word_file}")

    words: List[str] = []
    with open(word_file, "r", encoding="utf-8", newline="") as f:
        for line in f:
            words.append(line.rstrip("\r\n"))

    logger.info("read %d words from %s", len(words), word_file)
    return words
