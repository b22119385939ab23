"""
Ranker implementations.

Provides implementations of the Ranker interface for turning pairwise
judgments into item scores.

Available implementations:
- EloRanker: Logistic Elo updates with a k that decays per comparison
"""

from .elo import EloRanker, expected_score, k_factor, updated_rating

__all__ = ["EloRanker", "expected_score", "k_factor", "updated_rating"]
