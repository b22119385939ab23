"""
Tests for SessionRunner.

Drive full sessions with simulated and scripted judges.
"""

import pytest
from typing_extensions import override

from pairwise_ranker.config import SessionConfig
from pairwise_ranker.exceptions import JudgeAbort, JudgeError
from pairwise_ranker.interfaces import Judge
from pairwise_ranker.judges.sim_judge import SimulatedJudge
from pairwise_ranker.models import Comparison, Pair
from pairwise_ranker.runner import SessionRunner
from pairwise_ranker.session import COMPLETED_CONFIDENT, COMPLETED_EXHAUSTED, RankingSession


class StopAfterJudge(Judge):
    """Picks item_a, then raises the given error once the budget is spent."""

    def __init__(self, budget: int, error: JudgeError):
        self.budget = budget
        self.error = error

    @override
    def choose(self, pair: Pair) -> str:
        if self.budget == 0:
            raise self.error
        self.budget -= 1
        return pair.item_a


class TestSessionRunner:
    def test_noiseless_run_judges_every_pair(self) -> None:
        # Arrange
        truth = {"a": 5.0, "b": 4.0, "c": 3.0, "d": 2.0, "e": 1.0}
        session = RankingSession(list(truth))
        judge = SimulatedJudge(truth, noise=0.0)
        runner = SessionRunner(session, judge)

        # Act
        rankings = runner.run()

        # Assert
        assert session.completion_reason == COMPLETED_EXHAUSTED
        assert runner.comparisons_made == 10
        assert judge.calls == 10
        assert not runner.aborted
        assert {entry.name: entry.wins for entry in rankings} == {"a": 4, "b": 3, "c": 2, "d": 1, "e": 0}
        assert len(rankings) == 5
        assert {c.judge_id for c in session.ledger.comparisons()} == {"simulated"}

    def test_run_stops_early_when_confident(self) -> None:
        truth = {f"item_{i}": float(4 - i) for i in range(4)}
        config = SessionConfig(confidence_threshold=0.5, min_judged_fraction=0.3)
        session = RankingSession(list(truth), config=config)

        runner = SessionRunner(session, SimulatedJudge(truth, noise=0.0))
        runner.run()

        assert session.completion_reason == COMPLETED_CONFIDENT
        assert runner.comparisons_made == 2

    def test_on_comparison_sees_each_accepted_comparison(self) -> None:
        session = RankingSession(["a", "b", "c"])
        seen: list[Comparison] = []

        SessionRunner(session, StopAfterJudge(3, JudgeAbort("done")), on_comparison=seen.append).run()

        assert [c.sequence for c in seen] == [1, 2, 3]
        assert seen == session.ledger.comparisons()

    def test_abort_keeps_partial_results(self) -> None:
        # Arrange
        session = RankingSession(["a", "b", "c", "d"])
        runner = SessionRunner(session, StopAfterJudge(2, JudgeAbort("stop")))

        # Act
        rankings = runner.run()

        # Assert
        assert runner.aborted
        assert runner.comparisons_made == 2
        assert not session.is_session_complete()
        assert session.ledger.size() == 2
        assert len(rankings) == 4

    def test_judge_error_propagates(self) -> None:
        session = RankingSession(["a", "b", "c"])
        runner = SessionRunner(session, StopAfterJudge(1, JudgeError("backend down")))

        with pytest.raises(JudgeError, match="backend down"):
            runner.run()
        assert session.ledger.size() == 1

    def test_progress_every_must_be_positive(self) -> None:
        session = RankingSession(["a", "b"])

        with pytest.raises(ValueError):
            SessionRunner(session, SimulatedJudge({}), progress_every=0)
