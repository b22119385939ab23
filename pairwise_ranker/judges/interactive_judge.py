"""
Interactive judge implementation.

Asks a person at the terminal to pick A or B.
"""

from collections.abc import Callable

from typing_extensions import override

from ..exceptions import JudgeAbort
from ..interfaces import Judge
from ..logging_config import get_logger
from ..models import Pair

# Module-level logger
logger = get_logger("interactive_judge")

HELP_TEXT = "Please answer A or B (Q to stop)."


class InteractiveJudge(Judge):
    """Judge that reads "a"/"b" answers, case-insensitive; "q" stops the session."""

    judge_id = "interactive"

    def __init__(
        self,
        prompt: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        """
        Initialize interactive judge.

        Args:
            prompt: Reads one answer after showing a question (input() by default)
            output: Shows a message to the person judging (print() by default)
        """
        self.prompt = prompt
        self.output = output

    @override
    def choose(self, pair: Pair) -> str:
        question = f"[A] {pair.item_a}   vs   [B] {pair.item_b}\nWhich is better? [a/b/q] "
        while True:
            try:
                answer = self.prompt(question).strip().lower()
            except EOFError as e:
                raise JudgeAbort("Input closed") from e

            if answer == "a":
                return pair.item_a
            if answer == "b":
                return pair.item_b
            if answer == "q":
                logger.info("Judge asked to stop")
                raise JudgeAbort("Stopped by user")
            self.output(HELP_TEXT)
