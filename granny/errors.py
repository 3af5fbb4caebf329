"""Exceptions raised by the password search."""


class GrannyError(Exception):
    """Base class for every error the search can surface."""


class EmptyInputError(GrannyError, ValueError):
    """A signature or a cost was requested for an empty string."""


class EmptyTableError(GrannyError, LookupError):
    """A best candidate or a sample was requested from an empty table."""


class UnsupportedGoalError(GrannyError, ValueError):
    """The goal cannot be expressed by the level-by-level assembly."""


class InvalidKeyError(GrannyError, ValueError):
    """The character has no position on the keyboard."""


class LevelMismatchError(GrannyError, ValueError):
    """Two candidates with different word counts competed for one table slot."""


class InvalidSampleError(GrannyError, ValueError):
    """A sample of negative size was requested."""
