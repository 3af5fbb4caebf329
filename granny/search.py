"""
Level-by-level password assembly.

The password is built from one left-bound word, ``words_number - 2`` free
middle words and one right-bound word. After every cross product the table is
filtered by cost and length, which is what keeps the tables small enough to
cross again. The tighter the cost ceiling, the smaller the tables, so the
full search is usually preceded by a search over a random sample of the
dictionary whose result becomes the ceiling.
"""

from __future__ import annotations
from typing import Optional
import random

from .config import RESET, YELLOW
from .errors import EmptyTableError
from .passwords import Goal, Password, Passwords
from .words import Side


def drain(passwords: Passwords, goal: Goal, ceiling: Optional[int], label: str) -> Passwords:
    """Apply both filters in place and report what was dropped."""
    expensive = passwords.filter_by_cost(ceiling) if ceiling is not None else 0
    misfit = passwords.filter_by_length(goal)

    if expensive:
        print(f"Drained {expensive} {label} passwords (too expensive).")
    if misfit:
        print(f"Drained {misfit} {label} passwords (too long or too short).")

    return passwords


def find_best(
    level: Passwords,
    goal: Goal,
    ceiling: Optional[int] = None,
    workers: int = 1,
) -> Password:
    """
    Return the cheapest ``goal.words_number``-word password that fits the
    length window and costs at most ``ceiling`` (no limit if ``None``).

    ``level`` holds one-word passwords. Raises ``EmptyTableError`` when no
    password satisfies the goal.
    """
    goal.validate()
    max_length = goal.max_length

    left = drain(level.bind(Side.LEFT), goal, ceiling, "left-bound")
    if goal.words_number == 1:
        return left.best()

    center = drain(level.copy(), goal, ceiling, "1-word")

    passwords = left
    for n in range(2, goal.words_number):
        passwords = passwords.cross(center, workers=workers, ceiling=ceiling, max_length=max_length)
        print(f"Got {len(passwords)} {n}-word passwords.")
        drain(passwords, goal, ceiling, f"{n}-word")

    right = drain(level.bind(Side.RIGHT), goal, ceiling, "right-bound")

    passwords = passwords.cross(right, workers=workers, ceiling=ceiling, max_length=max_length)
    print(f"Got {len(passwords)} {goal.words_number}-word passwords.")
    drain(passwords, goal, ceiling, f"{goal.words_number}-word")

    return passwords.best()


def estimate_ceiling(
    level: Passwords,
    sample_size: int,
    goal: Goal,
    ceiling: Optional[int] = None,
    rng: Optional[random.Random] = None,
    workers: int = 1,
) -> int:
    """Cost of the best password over a random sample of ``level``."""
    sample = level.sample(sample_size, rng)
    print(f"Searching a random sample of {len(sample)} word types.")

    best = find_best(sample, goal, ceiling, workers)
    print(f"Found best password for a random sample: {best} (cost {best.cost}).")
    return best.cost


def find_best_sampled(
    level: Passwords,
    goal: Goal,
    sample_size: int,
    sample_ceiling: Optional[int] = None,
    ceiling: Optional[int] = None,
    rng: Optional[random.Random] = None,
    workers: int = 1,
) -> Password:
    """
    Two passes: estimate a ceiling on a sample, then search the whole table
    for passwords that are not more expensive than the estimate.

    If the sample holds no valid password the exact pass falls back to
    ``ceiling``.
    """
    try:
        estimate = estimate_ceiling(level, sample_size, goal, sample_ceiling, rng, workers)
    except EmptyTableError:
        print(f"{YELLOW}No valid password in the sample, searching without an estimate.{RESET}")
        estimate = None

    if estimate is not None and (ceiling is None or estimate < ceiling):
        ceiling = estimate

    print(f"Searching for passwords that cost at most {ceiling} on the whole dictionary.")
    return find_best(level, goal, ceiling, workers)
