"""
Pairwise Ranker - Adaptive Pairwise Ranking Engine

Ranks named items from "A or B?" judgments using Elo ratings, picks the most
informative pair to ask next, and stops early once every item's position is
settled.
"""

from .config import SessionConfig
from .exceptions import (
    DuplicatePairError,
    InsufficientItemsError,
    InvalidPairError,
    PairNotJudgedError,
    RankingError,
    SessionCompleteError,
    UnknownItemError,
)
from .models import Comparison, Item, Pair, RankingEntry
from .session import RankingSession

__version__ = "0.1.0"
__all__ = [
    "SessionConfig",
    "RankingSession",
    "Item",
    "Pair",
    "Comparison",
    "RankingEntry",
    "RankingError",
    "InsufficientItemsError",
    "UnknownItemError",
    "InvalidPairError",
    "DuplicatePairError",
    "PairNotJudgedError",
    "SessionCompleteError",
]
