"""
Session controller for pairwise ranking.

Coordinates ledger, ranker, confidence estimator and selector components,
and owns the Active -> Complete state machine of one ranking run.
"""

import itertools
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .config import SessionConfig
from .confidence import EvidenceConfidence
from .exceptions import InsufficientItemsError, RankingError, SessionCompleteError, ValidationError
from .interfaces import ConfidenceEstimator, Ranker, Selector, SessionProgress
from .ledger import ComparisonLedger
from .logging_config import get_logger
from .match_selectors.informative_selector import InformativeSelector
from .models import UNKNOWN_JUDGE, Comparison, Item, Pair, RankingEntry
from .rankers.elo import EloRanker
from .rankings import aggregate_rankings

COMPLETED_EXHAUSTED = "exhausted"
COMPLETED_CONFIDENT = "confident"


class RankingSession:
    """
    One ranking run over a fixed set of uniquely named items.

    A session starts Active and becomes Complete once every pair has been
    judged, or once every item is confident enough and a minimum share of all
    pairs has been judged. Complete is terminal; start over by building a new
    session.
    """

    def __init__(
        self,
        names: Sequence[str],
        config: SessionConfig | None = None,
        selector: Selector | None = None,
        ranker: Ranker | None = None,
        estimator: ConfidenceEstimator | None = None,
    ):
        """
        Initialize session with all components.

        Args:
            names: Unique, non-empty item names (at least two)
            config: Policy constants; defaults to SessionConfig()
            selector: Match selector; defaults to an InformativeSelector built from config
            ranker: Rating model; defaults to an EloRanker built from config
            estimator: Confidence estimator; defaults to EvidenceConfidence built from config

        Raises:
            InsufficientItemsError: Fewer than two names
            ValidationError: Empty or duplicate names
        """
        self.logger: Logger = get_logger("session")
        self.config: SessionConfig = config or SessionConfig()

        names = list(names)
        if len(names) < 2:
            raise InsufficientItemsError(f"At least 2 items are required, got {len(names)}")
        if any(not name for name in names):
            raise ValidationError("Item names cannot be empty")
        if len(set(names)) != len(names):
            duplicates = sorted({name for name in names if names.count(name) > 1})
            raise ValidationError(f"Item names must be unique, duplicates: {duplicates}")

        self.estimator: ConfidenceEstimator = estimator or EvidenceConfidence(self.config.confidence_half_life)
        self.ranker: Ranker = ranker or EloRanker(self.config.k0)
        self.selector: Selector = selector or InformativeSelector(
            self.estimator,
            closeness_weight=self.config.closeness_weight,
            need_weight=self.config.need_weight,
        )

        self.items: dict[str, Item] = {
            name: Item(name=name, score=self.config.baseline_rating) for name in names
        }
        self.ledger = ComparisonLedger(self.items)

        # Sorted names give normalized pairs already in key order
        self._universe: list[Pair] = [Pair(a, b) for a, b in itertools.combinations(sorted(names), 2)]

        self._completion_reason: str | None = None

        self.logger.info(f"Session started with {len(names)} items and {len(self._universe)} pairs")

    # --- Queries ---

    def total_pair_count(self) -> int:
        return len(self._universe)

    def remaining_pairs(self) -> list[Pair]:
        """Un-judged pairs in key order."""
        return [pair for pair in self._universe if not self.ledger.has_been_compared(pair)]

    def remaining_pair_count(self) -> int:
        return self.total_pair_count() - self.ledger.size()

    def judged_fraction(self) -> float:
        return self.ledger.size() / self.total_pair_count()

    def is_session_complete(self) -> bool:
        return self._completion_reason is not None

    def is_exhausted(self) -> bool:
        """True once every pair in the universe has been judged."""
        return self.remaining_pair_count() == 0

    @property
    def completion_reason(self) -> str | None:
        """Why the session completed: "exhausted", "confident", or None while Active."""
        return self._completion_reason

    def confidence(self, name: str) -> float:
        return self.estimator.confidence(self.items[name])

    def progress_percent(self) -> int:
        """Judged pairs as a whole percentage, halves rounded up."""
        return math.floor(self.judged_fraction() * 100 + 0.5)

    def progress(self) -> SessionProgress:
        return {
            "judged": self.ledger.size(),
            "total": self.total_pair_count(),
            "remaining": self.remaining_pair_count(),
            "percent": self.progress_percent(),
            "complete": self.is_session_complete(),
            "exhausted": self.is_exhausted(),
        }

    def get_next_match(self) -> Pair | None:
        """
        The most informative un-judged pair.

        Returns None only when every pair has been judged. After an early stop
        pairs are still offered; check is_session_complete() before asking.
        """
        return self.selector.select_match(self.remaining_pairs(), self.items)

    def get_next_matches(self, n: int) -> list[Pair]:
        """Up to ``n`` item-disjoint pairs, best first; empty once exhausted."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        return self.selector.select_matches(self.remaining_pairs(), self.items, n)

    def get_rankings(self) -> list[RankingEntry]:
        return aggregate_rankings(self.items.values(), self.estimator, self.config.rank_epsilon)

    # --- Commands ---

    def submit_comparison(self, winner: str, loser: str, judge_id: str = UNKNOWN_JUDGE) -> Comparison:
        """
        Record that ``winner`` was preferred over ``loser``.

        ``judge_id`` names who decided and is kept on the recorded comparison.

        State is left untouched when the submission is rejected.

        Raises:
            SessionCompleteError: The session has already completed
            UnknownItemError: Either name is not part of the session
            InvalidPairError: The names are equal
            DuplicatePairError: The pair was already judged
        """
        if self.is_session_complete():
            self.logger.warning(f"Rejected {winner} > {loser}: session is complete")
            raise SessionCompleteError("Session is complete; no further comparisons are accepted")

        try:
            _ = self.ledger.check(winner, loser)
        except RankingError as e:
            self.logger.warning(f"Rejected {winner} > {loser}: {e}")
            raise

        _ = self.ranker.update_with_comparison(self.items[winner], self.items[loser])
        comparison = self.ledger.record(winner, loser, judge_id)

        self.logger.info(
            f"Comparison {self.ledger.size()}/{self.total_pair_count()}: {winner} > {loser}"
        )
        self._evaluate_completion()
        return comparison

    def revise_comparison(self, winner: str, loser: str, judge_id: str = UNKNOWN_JUDGE) -> Comparison:
        """
        Correct the outcome of an already judged pair.

        Ratings are recomputed by replaying the whole ledger from the baseline.
        Allowed in either state; completion is not re-evaluated since Complete
        is terminal and revising never changes comparison counts.

        Raises:
            UnknownItemError: Either name is not part of the session
            InvalidPairError: The names are equal
            PairNotJudgedError: The pair has not been judged yet
        """
        try:
            comparison = self.ledger.revise(winner, loser, judge_id)
        except RankingError as e:
            self.logger.warning(f"Rejected revision {winner} > {loser}: {e}")
            raise

        self._replay()
        return comparison

    def _replay(self) -> None:
        """Recompute every score from the baseline in judgment order."""
        for item in self.items.values():
            item.score = self.config.baseline_rating
        self.ledger.rebuild(self.ranker.update_with_comparison)
        self.logger.debug(f"Replayed {self.ledger.size()} comparisons")

    def _evaluate_completion(self) -> None:
        if self.is_session_complete():
            return

        if self.is_exhausted():
            self._completion_reason = COMPLETED_EXHAUSTED
            self.logger.info(f"Session complete: all {self.total_pair_count()} pairs judged")
            return

        threshold = self.config.confidence_threshold
        all_confident = all(
            self.estimator.confidence(item) >= threshold for item in self.items.values()
        )
        if all_confident and self.judged_fraction() >= self.config.min_judged_fraction:
            self._completion_reason = COMPLETED_CONFIDENT
            self.logger.info(
                f"Session complete early: every item at confidence >= {threshold} after "
                f"{self.ledger.size()}/{self.total_pair_count()} pairs ({self.progress_percent()}%)"
            )
