"""
Elo ranker implementation.

Logistic expected score with an update magnitude that decays as an item
accumulates comparisons, so early judgments move ratings quickly and later
ones only refine them.
"""

import math
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from loguru import Logger

from ..config import K0
from ..interfaces import Ranker, RatingUpdate
from ..logging_config import get_logger
from ..models import Item

ELO_SCALE = 400.0
MAX_EXPONENT = 300.0  # 10**300 still fits in a float


def expected_score(rating_x: float, rating_y: float) -> float:
    """
    Probability that an item rated ``rating_x`` beats one rated ``rating_y``.

    Lies in [0, 1] for any finite ratings. Gaps beyond 120,000 points are
    treated as 120,000, where the result has already saturated.
    """
    exponent = min(max((rating_y - rating_x) / ELO_SCALE, -MAX_EXPONENT), MAX_EXPONENT)
    return 1.0 / (1.0 + 10.0 ** exponent)


def updated_rating(rating: float, expected: float, actual: float, k: float) -> float:
    """Return ``rating`` moved by ``k`` times the surprise ``actual - expected``."""
    return rating + k * (actual - expected)


def k_factor(k0: float, comparison_count: int) -> float:
    """Update magnitude for an item that has already been compared ``comparison_count`` times."""
    return k0 / math.sqrt(1 + comparison_count)


class EloRanker(Ranker):
    """
    Elo-based ranker with per-item decaying k.

    Each side of a comparison uses its own k, so the update is not zero-sum
    once the two items have different comparison counts.
    """

    def __init__(self, k0: float = K0):
        """
        Initialize Elo ranker.

        Args:
            k0: Update magnitude for an item's first comparison
        """
        self.k0: float = k0
        self.logger: Logger = get_logger("elo_ranker")
        self.logger.debug(f"Elo ranker initialized: k0={k0}")

    @override
    def rate(self, winner: Item, loser: Item) -> tuple[float, float]:
        """Compute new scores from the pre-comparison ratings and counts."""
        winner_expected = expected_score(winner.score, loser.score)
        loser_expected = expected_score(loser.score, winner.score)

        new_winner = updated_rating(
            winner.score, winner_expected, 1.0, k_factor(self.k0, winner.comparison_count)
        )
        new_loser = updated_rating(
            loser.score, loser_expected, 0.0, k_factor(self.k0, loser.comparison_count)
        )
        return new_winner, new_loser

    @override
    def update_with_comparison(self, winner: Item, loser: Item) -> RatingUpdate:
        """Apply ``winner`` beating ``loser`` to both scores."""
        new_winner, new_loser = self.rate(winner, loser)
        update: RatingUpdate = {
            "winner": winner.name,
            "loser": loser.name,
            "winner_before": winner.score,
            "winner_after": new_winner,
            "loser_before": loser.score,
            "loser_after": new_loser,
        }
        winner.score = new_winner
        loser.score = new_loser

        self.logger.info(f"Score update: {winner.name} beat {loser.name}")
        self.logger.debug(f"  {winner.name}: {update['winner_before']:.2f}->{new_winner:.2f}")
        self.logger.debug(f"  {loser.name}: {update['loser_before']:.2f}->{new_loser:.2f}")
        return update
