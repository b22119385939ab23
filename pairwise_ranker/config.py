"""
Tunable policy constants for a ranking session.
"""

from dataclasses import dataclass

from .exceptions import ConfigurationError

# Defaults
BASELINE_RATING = 1200.0
K0 = 32.0                     # initial Elo update magnitude
CONFIDENCE_HALF_LIFE = 1.0    # comparisons needed to reach 0.5 confidence
CLOSENESS_WEIGHT = 1.0
NEED_WEIGHT = 0.5
CONFIDENCE_THRESHOLD = 0.9    # early stop: every item at least this confident
MIN_JUDGED_FRACTION = 0.3     # early stop: at least this share of pairs judged
RANK_EPSILON = 1e-9           # scores closer than this share a rank


@dataclass
class SessionConfig:
    """Configuration for a ranking session."""

    baseline_rating: float = BASELINE_RATING
    k0: float = K0
    confidence_half_life: float = CONFIDENCE_HALF_LIFE
    closeness_weight: float = CLOSENESS_WEIGHT
    need_weight: float = NEED_WEIGHT
    confidence_threshold: float = CONFIDENCE_THRESHOLD
    min_judged_fraction: float = MIN_JUDGED_FRACTION
    rank_epsilon: float = RANK_EPSILON

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.k0 <= 0:
            raise ConfigurationError(f"k0 must be positive, got {self.k0}")
        if self.confidence_half_life <= 0:
            raise ConfigurationError(
                f"confidence_half_life must be positive, got {self.confidence_half_life}"
            )
        if self.closeness_weight < 0 or self.need_weight < 0:
            raise ConfigurationError(
                f"weights must be non-negative, got closeness={self.closeness_weight}, need={self.need_weight}"
            )
        if self.need_weight > self.closeness_weight:
            raise ConfigurationError(
                f"need_weight ({self.need_weight}) must not exceed closeness_weight ({self.closeness_weight})"
            )
        if not (0.0 < self.confidence_threshold < 1.0):
            raise ConfigurationError(
                f"confidence_threshold must be between 0 and 1 (exclusive), got {self.confidence_threshold}"
            )
        if not (0.0 <= self.min_judged_fraction <= 1.0):
            raise ConfigurationError(
                f"min_judged_fraction must be between 0 and 1, got {self.min_judged_fraction}"
            )
        if self.rank_epsilon < 0:
            raise ConfigurationError(f"rank_epsilon must be non-negative, got {self.rank_epsilon}")
