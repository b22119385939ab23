"""
Confidence estimation from accumulated evidence.
"""

from typing_extensions import override

from .config import CONFIDENCE_HALF_LIFE
from .exceptions import ConfigurationError
from .interfaces import ConfidenceEstimator


class EvidenceConfidence(ConfidenceEstimator):
    """
    Confidence that grows with comparison count: ``n / (n + half_life)``.

    With the default half-life of 1 this is ``1 - 1 / (1 + n)``. It rises
    monotonically, approaches 1 without reaching it, and ignores score, so two
    items with the same comparison count are equally confident.
    """

    def __init__(self, half_life: float = CONFIDENCE_HALF_LIFE):
        if half_life <= 0:
            raise ConfigurationError(f"half_life must be positive, got {half_life}")
        self.half_life: float = half_life

    @override
    def confidence_for_count(self, comparison_count: int) -> float:
        if comparison_count <= 0:
            return 0.0
        return comparison_count / (comparison_count + self.half_life)

    def comparisons_needed(self, threshold: float) -> int:
        """Smallest comparison count whose confidence reaches ``threshold``."""
        if not (0.0 <= threshold < 1.0):
            raise ConfigurationError(f"threshold must be in [0, 1), got {threshold}")
        count = 0
        while self.confidence_for_count(count) < threshold:
            count += 1
        return count
