"""
Passwords and password tables.

A password is an ordered list of words plus the metadata of their
concatenation. A table (``Passwords``) keeps, for each word type, only the
cheapest password of that type. Tables are combined level by level: crossing
a table of n-word passwords with a table of m-word passwords gives a table of
(n + m)-word passwords.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from multiprocessing import Pool
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import random

from .config import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, DEFAULT_WORDS_NUMBER
from .errors import EmptyTableError, InvalidSampleError, LevelMismatchError, UnsupportedGoalError
from .keyboard import distance, to_key
from .utils import progress
from .words import Metadata, Side, Type, derive_metadata


# ============================================================================ #
#                              GOAL                                            #
# ============================================================================ #

@dataclass(frozen=True)
class Goal:
    """Search goal. Defaults to a 4-word, 20-24 character password."""
    words_number: int = DEFAULT_WORDS_NUMBER
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH

    def validate(self) -> Goal:
        if self.words_number < 1:
            raise UnsupportedGoalError(
                f"Cannot combine {self.words_number} words, at least one is needed"
            )
        if self.min_length < 0 or self.min_length > self.max_length:
            raise UnsupportedGoalError(
                f"Empty length window [{self.min_length}, {self.max_length}]"
            )
        return self


# ============================================================================ #
#                              PASSWORD                                        #
# ============================================================================ #

@dataclass(frozen=True, eq=False)
class Password:
    """
    Password { words: ("granny",), metadata: Metadata(t=Type('G', 'Y', 6), cost=14) }

    Two passwords are equal if their string representations are equal.
    Costs are only comparable between passwords with the same number of words.
    """
    words: Tuple[str, ...]
    metadata: Metadata

    @classmethod
    def from_word(cls, word: str) -> Password:
        return cls(words=(word,), metadata=derive_metadata(word))

    @property
    def text(self) -> str:
        return "".join(self.words)

    @property
    def cost(self) -> int:
        return self.metadata.cost

    @property
    def length(self) -> int:
        return self.metadata.t.length

    def bound(self, side: Side) -> Password:
        return replace(self, metadata=replace(self.metadata, t=self.metadata.t.bound(side)))

    def __add__(self, other: Password) -> Password:
        # Junction keys come from the words, not the type: a bound side has no key.
        junction = distance(to_key(self.words[-1][-1]), to_key(other.words[0][0]))
        t = Type(
            first_key=self.metadata.t.first_key,
            last_key=other.metadata.t.last_key,
            length=self.metadata.t.length + other.metadata.t.length,
        )
        return Password(
            words=self.words + other.words,
            metadata=Metadata(t=t, cost=self.metadata.cost + other.metadata.cost + junction),
        )

    def __eq__(self, other):
        if not isinstance(other, Password):
            return NotImplemented
        return self.text == other.text

    def __hash__(self):
        return hash(self.text)

    def __lt__(self, other):
        if not isinstance(other, Password) or len(self.words) != len(other.words):
            return NotImplemented
        return self.metadata.cost < other.metadata.cost

    def __le__(self, other):
        if not isinstance(other, Password) or len(self.words) != len(other.words):
            return NotImplemented
        return self.metadata.cost <= other.metadata.cost

    def __str__(self):
        return "|".join(self.words)


# ============================================================================ #
#                              TABLE                                           #
# ============================================================================ #

def _cross_chunk(args: Tuple[Iterable[Password], List[Password], Optional[int], Optional[int]]) -> Passwords:
    """Worker: concatenate every left password of a chunk with every right one."""
    left, right, ceiling, max_length = args
    crossed = Passwords()

    # Yes, it's O(n^2)
    for p in left:
        for q in right:
            if max_length is not None and p.length + q.length > max_length:
                continue
            combined = p + q
            if ceiling is not None and combined.cost > ceiling:
                continue
            crossed.push(combined)

    return crossed


class Passwords:
    """Table of the cheapest known password for each word type."""

    def __init__(self, entries: Optional[Dict[Type, Password]] = None):
        self.entries: Dict[Type, Password] = dict(entries) if entries else {}

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Password]:
        return iter(self.entries.values())

    def __contains__(self, t: Type) -> bool:
        return t in self.entries

    def __getitem__(self, t: Type) -> Password:
        return self.entries[t]

    def __repr__(self):
        return f"Passwords({len(self.entries)} types)"

    def values(self) -> List[Password]:
        return list(self.entries.values())

    def copy(self) -> Passwords:
        return Passwords(self.entries)

    def push(self, p: Password) -> Passwords:
        """Keep ``p`` if its type is new or it is strictly cheaper than the current one."""
        t = p.metadata.t
        current = self.entries.get(t)

        if current is None:
            self.entries[t] = p
        elif len(current.words) != len(p.words):
            raise LevelMismatchError(
                f"Cannot compare {len(p.words)}-word {p} with {len(current.words)}-word {current}"
            )
        elif p < current:
            self.entries[t] = p

        return self

    def merge(self, other: Passwords) -> Passwords:
        for p in other.entries.values():
            self.push(p)
        return self

    def bind(self, side: Side) -> Passwords:
        """Unconstrain the first (LEFT) or last (RIGHT) key of every password."""
        bound = Passwords()
        for p in self.entries.values():
            bound.push(p.bound(side))
        return bound

    def cross(
        self,
        other: Passwords,
        workers: int = 1,
        ceiling: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> Passwords:
        """
        Concatenate every password of this table with every password of ``other``.

        With ``workers > 1`` the left side is split into chunks crossed in a
        process pool; the partial tables are merged afterwards. ``ceiling`` and
        ``max_length`` skip combinations that would be filtered out right away.
        """
        left = self.values()
        right = other.values()
        desc = f"Crossing {len(left)} x {len(right)} passwords"

        if workers <= 1 or len(left) < 2:
            return _cross_chunk((progress(left, desc), right, ceiling, max_length))

        size = max(1, -(-len(left) // (workers * 4)))
        chunks = [
            (left[i:i + size], right, ceiling, max_length)
            for i in range(0, len(left), size)
        ]

        crossed = Passwords()
        with Pool(workers) as pool:
            for partial in progress(pool.imap_unordered(_cross_chunk, chunks), desc, total=len(chunks)):
                crossed.merge(partial)

        return crossed

    def filter_by_cost(self, ceiling: int) -> int:
        """Drop passwords that cost more than ``ceiling``. Returns how many were dropped."""
        kept = {t: p for t, p in self.entries.items() if p.metadata.cost <= ceiling}
        dropped = len(self.entries) - len(kept)
        self.entries = kept
        return dropped

    def filter_by_length(self, goal: Goal) -> int:
        """
        Drop passwords that are too long. Passwords that already have
        ``goal.words_number`` words can't grow anymore, so drop them if they
        are too short as well. Returns how many were dropped.
        """
        def fits(p: Password) -> bool:
            if p.length > goal.max_length:
                return False
            if len(p.words) == goal.words_number and p.length < goal.min_length:
                return False
            return True

        kept = {t: p for t, p in self.entries.items() if fits(p)}
        dropped = len(self.entries) - len(kept)
        self.entries = kept
        return dropped

    def best(self) -> Password:
        if not self.entries:
            raise EmptyTableError("The table is empty, there is no best password")
        return min(self.entries.values(), key=lambda p: p.metadata.cost)

    def sample(self, n: int, rng: Optional[random.Random] = None) -> Passwords:
        """Randomly pick ``n`` types (without replacement) into a new table."""
        if n < 0:
            raise InvalidSampleError(f"Cannot sample {n} types, the sample size must not be negative")
        if not self.entries:
            raise EmptyTableError("Cannot sample from an empty table")

        rng = rng or random.Random()
        keys = rng.sample(list(self.entries), min(n, len(self.entries)))
        return Passwords({t: self.entries[t] for t in keys})
