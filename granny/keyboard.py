"""
Keyboard geometry: keys, positions and finger travel.

Travel between two keys is counted in moves along the four sides of a key,
so going from "F" to "H" takes two moves and from "A" to "E" three.
Rows are not staggered here: "A" is one move away from "Q", "S" and "Z",
but two moves away from "W", which is not how a real keyboard feels.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Dict, Tuple

from .config import KEYBOARD_ROWS
from .errors import EmptyInputError, InvalidKeyError

Position = Tuple[int, int]

_POSITIONS: Dict[str, Position] = {
    key: (row, column)
    for row, keys in enumerate(KEYBOARD_ROWS)
    for column, key in enumerate(keys)
}


def to_key(c: str) -> str:
    """Normalize a character to its key: to_key('a') == 'A'."""
    return c.upper()


def position(key: str) -> Position:
    """Return (row, column) of a normalized key, bottom row first."""
    try:
        return _POSITIONS[key]
    except KeyError:
        raise InvalidKeyError(
            f"Key should be a capital letter or a digit, got {key!r}"
        ) from None


@lru_cache(maxsize=None)
def distance(k1: str, k2: str) -> int:
    (r1, c1), (r2, c2) = position(k1), position(k2)
    return abs(r1 - r2) + abs(c1 - c2)


def cost(word: str) -> int:
    """
    Total finger travel needed to type ``word``.

    cost("granny") == 14  # g -2> r -4> a -6> n -0> n -2> y
    """
    if not word:
        raise EmptyInputError("Cannot compute the cost of an empty string")

    total = 0
    last = to_key(word[0])
    for c in word[1:]:
        key = to_key(c)
        total += distance(last, key)
        last = key
    return total
