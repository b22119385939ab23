"""
Shuffled selector implementation.

Serves pairs in one fixed random order, the way a plain round-robin
questionnaire would. Baseline for measuring the informative selector.
"""

from collections.abc import Mapping, Sequence

import numpy as np
from typing_extensions import override

from ..interfaces import Selector
from ..logging_config import get_logger
from ..models import Item, Pair


class ShuffledSelector(Selector):
    """Seeded shuffled-order selector - for testing/baseline."""

    def __init__(self, seed: int | None = None):
        """Initialize shuffled selector.

        Args:
            seed: Seed for the shuffle; the same seed yields the same order
        """
        self.rng = np.random.default_rng(seed)
        self._order = dict[Pair, int]()
        self.logger = get_logger("shuffled_selector")

    def _assign_order(self, candidates: Sequence[Pair]) -> None:
        unseen = sorted(p for p in candidates if p not in self._order)
        if not unseen:
            return
        offset = len(self._order)
        for position, index in enumerate(self.rng.permutation(len(unseen))):
            self._order[unseen[int(index)]] = offset + position

    @override
    def select_matches(
        self, candidates: Sequence[Pair], items: Mapping[str, Item], n: int
    ) -> list[Pair]:
        """Return the next ``n`` item-disjoint pairs in shuffled order."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")

        self._assign_order(candidates)
        selected: list[Pair] = []
        used: set[str] = set()
        for pair in sorted(candidates, key=lambda p: self._order[p]):
            if pair.item_a in used or pair.item_b in used:
                continue
            selected.append(pair)
            used.update(pair.key)
            if len(selected) >= n:
                break

        self.logger.debug(f"Selected shuffled matches: {[p.key for p in selected]}")
        return selected
