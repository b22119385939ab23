"""
Selector implementations.

Provides implementations of the Selector interface for choosing which pairs
to present next.

Available implementations:
- InformativeSelector: Deterministic closeness + uncertainty heuristic
- ShuffledSelector: Seeded fixed random order, for testing/baseline
"""

from .informative_selector import InformativeSelector
from .shuffled_selector import ShuffledSelector

__all__ = ["InformativeSelector", "ShuffledSelector"]
