"""
Comparison ledger.

Keeps one outcome per unordered pair, in the order judgments were made, and
maintains the comparison and win counters of the items involved.
"""

import time
from collections.abc import Callable, Iterator, Mapping

from .exceptions import DuplicatePairError, InvalidPairError, PairNotJudgedError, UnknownItemError
from .logging_config import get_logger
from .models import UNKNOWN_JUDGE, Comparison, Item, Pair

# Module-level logger
logger = get_logger("ledger")


class ComparisonLedger:
    """
    Ordered record of every judgment made in a session.

    The ledger mutates ``comparison_count`` and ``wins`` on the items it was
    built with; scores are left to the ranker.
    """

    def __init__(self, items: Mapping[str, Item]):
        """
        Initialize an empty ledger.

        Args:
            items: Session items keyed by name, shared with the session
        """
        self._items = items
        self._by_pair = dict[Pair, Comparison]()
        self._history = list[Comparison]()
        self._next_sequence: int = 1

    def _pair_for(self, winner: str, loser: str) -> Pair:
        for name in (winner, loser):
            if name not in self._items:
                raise UnknownItemError(name)
        if winner == loser:
            raise InvalidPairError(f"Cannot compare an item with itself: {winner!r}")
        return Pair.of(winner, loser)

    def check(self, winner: str, loser: str) -> Pair:
        """
        Validate that ``winner`` beating ``loser`` can be recorded.

        Raises:
            UnknownItemError: Either name is not a session item
            InvalidPairError: The names are equal
            DuplicatePairError: The pair already has an outcome
        """
        pair = self._pair_for(winner, loser)
        if pair in self._by_pair:
            raise DuplicatePairError(f"Pair already judged: {pair.item_a!r} vs {pair.item_b!r}")
        return pair

    def record(self, winner: str, loser: str, judge_id: str = UNKNOWN_JUDGE) -> Comparison:
        """Store a new judgment and bump both items' counters."""
        pair = self.check(winner, loser)
        comparison = Comparison(
            winner=winner, loser=loser, sequence=self._next_sequence, judge_id=judge_id
        )
        self._next_sequence += 1
        self._by_pair[pair] = comparison
        self._count(comparison)
        logger.debug(f"Recorded #{comparison.sequence}: {winner} > {loser}")
        return comparison

    def revise(self, winner: str, loser: str, judge_id: str = UNKNOWN_JUDGE) -> Comparison:
        """
        Replace the outcome of an already judged pair.

        The revised comparison keeps the original sequence number so replays
        stay in judgment order; the superseded one is kept in :meth:`history`.
        Comparison counts do not change.

        Raises:
            PairNotJudgedError: The pair has no recorded outcome
        """
        pair = self._pair_for(winner, loser)
        previous = self._by_pair.get(pair)
        if previous is None:
            raise PairNotJudgedError(f"Pair was never judged: {pair.item_a!r} vs {pair.item_b!r}")

        revised = Comparison(
            winner=winner,
            loser=loser,
            sequence=previous.sequence,
            timestamp=time.time(),
            judge_id=judge_id,
        )
        self._history.append(previous)
        self._by_pair[pair] = revised
        if previous.winner != winner:
            self._items[previous.winner].wins -= 1
            self._items[winner].wins += 1
        logger.info(f"Revised #{previous.sequence}: {previous.winner} > {previous.loser} -> {winner} > {loser}")
        return revised

    def rebuild(self, on_comparison: Callable[[Item, Item], object] | None = None) -> None:
        """
        Reset item counters and replay every comparison in sequence order.

        ``on_comparison`` is called with (winner, loser) before their counters
        are incremented, which is the state a ranker expects.
        """
        for item in self._items.values():
            item.comparison_count = 0
            item.wins = 0
        for comparison in self.comparisons():
            if on_comparison is not None:
                _ = on_comparison(self._items[comparison.winner], self._items[comparison.loser])
            self._count(comparison)

    def _count(self, comparison: Comparison) -> None:
        winner = self._items[comparison.winner]
        loser = self._items[comparison.loser]
        winner.comparison_count += 1
        loser.comparison_count += 1
        winner.wins += 1

    def has_been_compared(self, pair: Pair) -> bool:
        return pair in self._by_pair

    def get(self, pair: Pair) -> Comparison | None:
        return self._by_pair.get(pair)

    def size(self) -> int:
        """Number of distinct pairs judged so far."""
        return len(self._by_pair)

    def comparisons(self) -> list[Comparison]:
        """Current outcomes in judgment order."""
        return sorted(self._by_pair.values(), key=lambda c: c.sequence)

    def history(self) -> list[Comparison]:
        """Outcomes that were superseded by a revision, oldest first."""
        return list(self._history)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Comparison]:
        return iter(self.comparisons())
