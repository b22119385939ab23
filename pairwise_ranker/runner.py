"""
Runner driving a ranking session with a judge.

Asks the session for the next match, has the judge pick a winner, submits it,
and repeats until the session completes, runs out of pairs, or the judge
stops.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import JudgeAbort, JudgeError
from .interfaces import Judge
from .logging_config import get_logger
from .models import Comparison, RankingEntry
from .session import RankingSession

PROGRESS_EVERY = 10  # log progress every N comparisons


class SessionRunner:
    """Feeds judge decisions into a session one comparison at a time."""

    def __init__(
        self,
        session: RankingSession,
        judge: Judge,
        progress_every: int = PROGRESS_EVERY,
        on_comparison: Callable[[Comparison], None] | None = None,
    ):
        """
        Initialize runner.

        Args:
            session: Session to drive
            judge: Judge deciding each match
            progress_every: Log progress every N comparisons
            on_comparison: Called with each accepted comparison (e.g. an audit log writer)
        """
        if progress_every <= 0:
            raise ValueError(f"progress_every must be positive, got {progress_every}")
        self.session = session
        self.judge = judge
        self.progress_every = progress_every
        self.on_comparison = on_comparison
        self.comparisons_made: int = 0
        self.aborted: bool = False
        self.logger: Logger = get_logger("runner")

    def run(self) -> list[RankingEntry]:
        """Run until the session stops offering matches; return final rankings."""
        self.logger.info(
            f"Starting ranking run with judge {self.judge.judge_id}: {self.session.progress()}"
        )

        while not self.session.is_session_complete():
            pair = self.session.get_next_match()
            if pair is None:
                self.logger.info("No more pairs to judge")
                break

            try:
                winner = self.judge.choose(pair)
            except JudgeAbort:
                self.aborted = True
                self.logger.warning(f"Run stopped by judge after {self.comparisons_made} comparisons")
                break
            except JudgeError as e:
                self.logger.error(f"Judge failed on {pair.item_a} vs {pair.item_b}: {e}")
                raise

            comparison = self.session.submit_comparison(winner, pair.other(winner), self.judge.judge_id)
            self.comparisons_made += 1
            if self.on_comparison is not None:
                self.on_comparison(comparison)

            if self.comparisons_made % self.progress_every == 0:
                self._log_progress()

        progress = self.session.progress()
        self.logger.info(
            f"Run finished: {progress['judged']}/{progress['total']} pairs judged "
            f"({progress['percent']}%), complete={progress['complete']}"
        )
        return self.session.get_rankings()

    def _log_progress(self) -> None:
        progress = self.session.progress()
        self.logger.info(f"Progress: {progress['judged']}/{progress['total']} pairs ({progress['percent']}%)")
        top = self.session.get_rankings()[:3]
        for entry in top:
            self.logger.debug(f"  {entry.rank}. {entry.name}: {entry.score:.1f} ({entry.confidence:.0%})")
