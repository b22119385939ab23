"""
Judge implementations.

Provides implementations of the Judge interface for deciding pair winners.

Available implementations:
- InteractiveJudge: Asks a person at the terminal
- SimulatedJudge: Noisy ground truth, for testing and benchmarking
"""

from .interactive_judge import InteractiveJudge
from .sim_judge import SimulatedJudge

__all__ = ["InteractiveJudge", "SimulatedJudge"]
