"""
Word types and metadata.

A word's *type* is (first key, last key, length). Two words of the same type
behave identically when glued to other words: the cost of a junction only
depends on the keys at the boundary, and the length only adds up. So for each
type we only ever need to remember the cheapest word.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .errors import EmptyInputError
from .keyboard import cost, to_key


class Side(Enum):
    LEFT = "left"    # first key
    RIGHT = "right"  # last key


@dataclass(frozen=True)
class Type:
    """
    Word type. ``None`` in a key slot means the boundary is unconstrained:
    the word sits at the very start (or end) of the password and will never
    be matched against a neighbor on that side.
    """
    first_key: Optional[str]
    last_key: Optional[str]
    length: int

    def bound(self, side: Side) -> Type:
        if side is Side.LEFT:
            return replace(self, first_key=None)
        return replace(self, last_key=None)


@dataclass(frozen=True)
class Metadata:
    t: Type
    cost: int


def derive_type(word: str) -> Type:
    if not word:
        raise EmptyInputError("Cannot derive a type from an empty string")
    return Type(first_key=to_key(word[0]), last_key=to_key(word[-1]), length=len(word))


def derive_metadata(word: str) -> Metadata:
    return Metadata(t=derive_type(word), cost=cost(word))
