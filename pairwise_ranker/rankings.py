"""
Rank aggregation.

Pure projection from items to the ranked view consumed by callers.
"""

from collections.abc import Iterable

from .config import RANK_EPSILON
from .interfaces import ConfidenceEstimator
from .models import Item, RankingEntry


def aggregate_rankings(
    items: Iterable[Item],
    estimator: ConfidenceEstimator,
    epsilon: float = RANK_EPSILON,
) -> list[RankingEntry]:
    """
    Rank items by score, highest first.

    Ranks are dense and 1-based: an item whose score is within ``epsilon`` of
    the highest score holding the current rank shares that rank, otherwise
    it opens the next rank. Near-ties therefore never chain across a gap
    wider than ``epsilon``. Equal scores are ordered by name. Items are not
    modified.
    """
    ordered = sorted(items, key=lambda item: (-item.score, item.name))

    rankings: list[RankingEntry] = []
    rank = 0
    rank_score: float | None = None
    for item in ordered:
        if rank_score is None or rank_score - item.score > epsilon:
            rank += 1
            rank_score = item.score
        rankings.append(
            RankingEntry(
                name=item.name,
                score=item.score,
                rank=rank,
                confidence=estimator.confidence(item),
                comparisons=item.comparison_count,
                wins=item.wins,
            )
        )
    return rankings
