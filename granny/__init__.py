"""Cheapest-to-type multi-word passwords."""

from .errors import (
    EmptyInputError, EmptyTableError, GrannyError, InvalidKeyError,
    InvalidSampleError, LevelMismatchError, UnsupportedGoalError,
)
from .keyboard import cost, distance, position, to_key
from .passwords import Goal, Password, Passwords
from .search import estimate_ceiling, find_best, find_best_sampled
from .words import Metadata, Side, Type, derive_metadata, derive_type

__version__ = "0.1.0"
