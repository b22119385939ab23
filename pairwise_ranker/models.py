"""
Core dataclasses for the pairwise ranker.

Defines Item, Pair, Comparison and RankingEntry models with validation.
"""

import time
from dataclasses import dataclass, field

from .exceptions import InvalidPairError, ValidationError

UNKNOWN_JUDGE = "unknown"


@dataclass
class Item:
    """A named item being ranked. Mutated in place by each comparison."""

    name: str
    score: float
    comparison_count: int = 0
    wins: int = 0

    def __post_init__(self) -> None:
        """Validate item data."""
        if not self.name:
            raise ValidationError("name cannot be empty")
        if self.comparison_count < 0:
            raise ValidationError("comparison_count cannot be negative")


@dataclass(frozen=True, order=True)
class Pair:
    """
    Unordered pair of two distinct item names.

    Stored normalized so that ``item_a < item_b``; build pairs through
    :meth:`Pair.of` when the argument order is arbitrary.
    """

    item_a: str
    item_b: str

    def __post_init__(self) -> None:
        if self.item_a == self.item_b:
            raise InvalidPairError(f"Cannot pair an item with itself: {self.item_a!r}")
        if self.item_a > self.item_b:
            raise ValidationError(
                f"Pair must be normalized, got ({self.item_a!r}, {self.item_b!r}); use Pair.of()"
            )

    @classmethod
    def of(cls, first: str, second: str) -> "Pair":
        """Build the normalized pair for two names in any order."""
        if first == second:
            raise InvalidPairError(f"Cannot pair an item with itself: {first!r}")
        if first < second:
            return cls(first, second)
        return cls(second, first)

    @property
    def key(self) -> tuple[str, str]:
        """Identity key."""
        return (self.item_a, self.item_b)

    @property
    def combined_key(self) -> str:
        """Both names joined as ``"a-b"``; selectors break ties on it."""
        return f"{self.item_a}-{self.item_b}"

    def other(self, name: str) -> str:
        """Return the opponent of ``name`` within this pair."""
        if name == self.item_a:
            return self.item_b
        if name == self.item_b:
            return self.item_a
        raise ValidationError(f"{name!r} is not part of pair {self.key}")

    def __contains__(self, name: object) -> bool:
        return name == self.item_a or name == self.item_b


@dataclass
class Comparison:
    """A recorded judgment: ``winner`` was preferred over ``loser``."""

    winner: str
    loser: str
    sequence: int
    timestamp: float = field(default_factory=time.time)
    judge_id: str = UNKNOWN_JUDGE

    def __post_init__(self) -> None:
        """Validate comparison data."""
        if self.winner == self.loser:
            raise InvalidPairError(f"Winner and loser must differ, got {self.winner!r} twice")
        if self.sequence < 1:
            raise ValidationError("sequence must be positive")

    @property
    def pair(self) -> Pair:
        return Pair.of(self.winner, self.loser)


@dataclass(frozen=True)
class RankingEntry:
    """One row of the ranked view handed to the presentation layer."""

    name: str
    score: float
    rank: int
    confidence: float
    comparisons: int = 0
    wins: int = 0
