"""
Abstract base classes defining the interfaces for the pairwise ranker.

All interfaces are synchronous; a session is driven by a single caller.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TypedDict

from .models import UNKNOWN_JUDGE, Item, Pair


class RatingUpdate(TypedDict):
    """Scores of both items before and after one comparison."""
    winner: str
    loser: str
    winner_before: float
    winner_after: float
    loser_before: float
    loser_after: float


class SessionProgress(TypedDict):
    """TypedDict for session progress reporting."""
    judged: int
    total: int
    remaining: int
    percent: int
    complete: bool
    exhausted: bool


class ComparisonRecord(TypedDict):
    """Serializable form of a comparison for the audit log."""
    sequence: int
    winner: str
    loser: str
    timestamp: float
    judge_id: str


class Ranker(ABC):
    """Interface for turning pairwise outcomes into item scores."""

    @abstractmethod
    def rate(self, winner: Item, loser: Item) -> tuple[float, float]:
        """
        Compute new scores for a comparison without mutating the items.

        Returns:
            Tuple of (new winner score, new loser score)
        """
        pass

    @abstractmethod
    def update_with_comparison(self, winner: Item, loser: Item) -> RatingUpdate:
        """Apply a comparison to both items' scores atomically."""
        pass


class ConfidenceEstimator(ABC):
    """Interface for deriving how settled an item's position is."""

    @abstractmethod
    def confidence_for_count(self, comparison_count: int) -> float:
        """Confidence in [0, 1) after ``comparison_count`` comparisons."""
        pass

    def confidence(self, item: Item) -> float:
        """Confidence of a single item."""
        return self.confidence_for_count(item.comparison_count)


class Selector(ABC):
    """Interface for selecting the next pairs to present."""

    @abstractmethod
    def select_matches(
        self, candidates: Sequence[Pair], items: Mapping[str, Item], n: int
    ) -> list[Pair]:
        """
        Select up to ``n`` item-disjoint pairs to judge next.

        Args:
            candidates: Un-judged pairs, sorted by pair key
            items: Current items keyed by name
            n: Maximum number of pairs to return

        Returns:
            Pairs in presentation order, empty if there are no candidates
        """
        pass

    def select_match(self, candidates: Sequence[Pair], items: Mapping[str, Item]) -> Pair | None:
        """Return the single best pair, or None if no candidates remain."""
        matches = self.select_matches(candidates, items, 1)
        return matches[0] if matches else None


class Judge(ABC):
    """Interface for deciding the winner of a pair."""

    judge_id: str = UNKNOWN_JUDGE  # recorded on every comparison this judge decides

    @abstractmethod
    def choose(self, pair: Pair) -> str:
        """
        Decide which item of ``pair`` is preferred.

        May block (for example while waiting for a person to answer).

        Returns:
            Name of the winning item
        """
        pass
