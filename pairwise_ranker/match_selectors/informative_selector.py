"""
Informative selector implementation.

Scores every un-judged pair by how much a judgment on it is expected to
teach, combining rating closeness with the remaining uncertainty of both
items.
"""

from collections.abc import Mapping, Sequence

import numpy as np
from typing_extensions import override

from ..config import CLOSENESS_WEIGHT, NEED_WEIGHT
from ..exceptions import ConfigurationError
from ..interfaces import ConfidenceEstimator, Selector
from ..logging_config import get_logger
from ..models import Item, Pair
from ..rankers.elo import ELO_SCALE

# Module-level logger
logger = get_logger("informative_selector")


class InformativeSelector(Selector):
    """
    Deterministic selector prioritizing close, under-evidenced pairs.

    informativeness = closeness_weight * closeness + need_weight * need, where
    closeness is ``-|score(A) - score(B)| / 400`` and need is
    ``(1 - conf(A)) + (1 - conf(B))``. Ties go to the lexicographically
    smallest combined key (``"a-b"``), then to the smallest name tuple when
    two pairs join to the same string.
    """

    def __init__(
        self,
        estimator: ConfidenceEstimator,
        closeness_weight: float = CLOSENESS_WEIGHT,
        need_weight: float = NEED_WEIGHT,
    ):
        """
        Initialize informative selector.

        Args:
            estimator: Confidence estimator used for the need signal
            closeness_weight: Weight of the rating closeness signal
            need_weight: Weight of the uncertainty signal (must not exceed closeness_weight)
        """
        if need_weight > closeness_weight:
            raise ConfigurationError(
                f"need_weight ({need_weight}) must not exceed closeness_weight ({closeness_weight})"
            )
        self.estimator = estimator
        self.closeness_weight = closeness_weight
        self.need_weight = need_weight

    def score_pairs(self, candidates: Sequence[Pair], items: Mapping[str, Item]) -> np.ndarray:
        """Informativeness of each candidate, aligned with ``candidates``."""
        count = len(candidates)
        scores_a = np.fromiter((items[p.item_a].score for p in candidates), dtype=float, count=count)
        scores_b = np.fromiter((items[p.item_b].score for p in candidates), dtype=float, count=count)
        conf_a = np.fromiter(
            (self.estimator.confidence(items[p.item_a]) for p in candidates), dtype=float, count=count
        )
        conf_b = np.fromiter(
            (self.estimator.confidence(items[p.item_b]) for p in candidates), dtype=float, count=count
        )

        closeness = -np.abs(scores_a - scores_b) / ELO_SCALE
        need = (1.0 - conf_a) + (1.0 - conf_b)
        return self.closeness_weight * closeness + self.need_weight * need

    def rank_candidates(
        self, candidates: Sequence[Pair], items: Mapping[str, Item]
    ) -> list[tuple[Pair, float]]:
        """All candidates with their informativeness, best first."""
        ordered = sorted(candidates, key=lambda p: (p.combined_key, p.key))
        if not ordered:
            return []
        informativeness = self.score_pairs(ordered, items)
        # Stable sort keeps combined key order among equal scores
        order = np.argsort(-informativeness, kind="stable")
        return [(ordered[i], float(informativeness[i])) for i in order]

    @override
    def select_matches(
        self, candidates: Sequence[Pair], items: Mapping[str, Item], n: int
    ) -> list[Pair]:
        """Return up to ``n`` best pairs, no item appearing twice."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")

        ranked = self.rank_candidates(candidates, items)
        if not ranked:
            logger.debug("No candidate pairs left")
            return []

        selected: list[Pair] = []
        used: set[str] = set()
        for pair, value in ranked:
            if pair.item_a in used or pair.item_b in used:
                continue
            selected.append(pair)
            used.update(pair.key)
            logger.debug(f"Selected {pair.item_a} vs {pair.item_b} (informativeness {value:.4f})")
            if len(selected) >= n:
                break

        return selected
