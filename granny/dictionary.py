"""
Word sources.

Words come either from a plain word list (one word per line) or from the
``wordfreq`` frequency list. Either way only lowercase ASCII letters and
digits are kept, 2 to 20 characters long, minus the denylist.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, List

from wordfreq import top_n_list

from .config import DENYLIST, WORD_PATTERN
from .passwords import Password, Passwords
from .utils import progress


def is_valid_word(word: str) -> bool:
    return WORD_PATTERN.match(word) is not None and word not in DENYLIST


def read_words(path: Path) -> Iterator[str]:
    """Lazily yield the valid words of a word list, top to bottom."""
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    return _iter_words(path)


def _iter_words(path: Path) -> Iterator[str]:
    # Undecodable bytes become U+FFFD, so those lines fail the pattern and are skipped
    with path.open("r", encoding="utf-8", errors="replace") as handle:
        for line in handle:
            word = line.strip().lower()
            if is_valid_word(word):
                yield word


def frequent_words(n: int) -> List[str]:
    """The ``n`` most frequent English words that are valid password words."""
    return [word for word in top_n_list('en', n, wordlist='best') if is_valid_word(word)]


def build_level(words: Iterable[str]) -> Passwords:
    """One-word passwords, one per word type, cheapest first."""
    level = Passwords()
    count = 0

    for word in progress(words, "Loading words"):
        level.push(Password.from_word(word))
        count += 1

    print(f"Loaded {count} words into {len(level)} word types.")
    return level
