"""
Simulated judge implementation.

Picks winners from latent ground-truth scores with a noise parameter, for
testing and for measuring how quickly sessions converge.
"""

import numpy as np
from typing_extensions import override

from ..interfaces import Judge
from ..models import Pair


class SimulatedJudge(Judge):
    """
    Simulated judge for testing purposes.

    Compares ground truth scores after adding Gaussian noise scaled by each
    score's magnitude.
    """

    judge_id = "simulated"

    def __init__(self, ground_truth: dict[str, float], noise: float = 0.1, seed: int | None = None):
        """
        Initialize simulated judge.

        Args:
            ground_truth: Dict mapping item name to its true quality
            noise: Amount of noise to add (0-1, where 1 = full noise)
            seed: Seed for the noise generator
        """
        self.ground_truth = ground_truth
        self.noise = max(0.0, min(1.0, noise))  # Clamp to [0, 1]
        self.rng = np.random.default_rng(seed)
        self.calls = 0

    def _noisy_score(self, name: str) -> float:
        score = self.ground_truth.get(name, 0.0)
        if self.noise == 0:
            return score
        return score + float(self.rng.normal(0.0, abs(score) * self.noise))

    @override
    def choose(self, pair: Pair) -> str:
        """Return the item with the higher noisy score; ties go to item_a."""
        self.calls += 1
        score_a = self._noisy_score(pair.item_a)
        score_b = self._noisy_score(pair.item_b)
        return pair.item_b if score_b > score_a else pair.item_a

    def true_order(self) -> list[str]:
        """Names sorted by ground truth, best first."""
        return sorted(self.ground_truth, key=lambda name: (-self.ground_truth[name], name))
