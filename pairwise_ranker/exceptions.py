"""
Exception classes for the pairwise ranker.

Centralized location for all custom exceptions to avoid circular imports.
Every precondition violation raises a distinguishable kind so callers can
react without parsing messages.
"""


class RankingError(Exception):
    """Base exception for all ranking engine errors."""
    pass


class InsufficientItemsError(RankingError):
    """Raised when a session is built from fewer than two items."""
    pass


class UnknownItemError(RankingError):
    """Raised when a comparison names an item outside the session."""

    def __init__(self, name: str):
        super().__init__(f"Unknown item: {name!r}")
        self.name = name


class InvalidPairError(RankingError):
    """Raised when an item is paired with itself."""
    pass


class DuplicatePairError(RankingError):
    """Raised when a pair that was already judged is submitted again."""
    pass


class PairNotJudgedError(RankingError):
    """Raised when revising a pair that has no recorded outcome."""
    pass


class SessionCompleteError(RankingError):
    """Raised when submitting to a session that has already completed."""
    pass


class ValidationError(Exception):
    """Base exception for validation-related errors."""
    pass


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""
    pass


class JudgeError(Exception):
    """Base exception for all judge-related errors."""
    pass


class JudgeAbort(JudgeError):
    """Raised when the person judging asks to stop the session."""
    pass
