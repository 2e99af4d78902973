"""
Lane Defense environment: lanes, units, economy and the match clock.
"""

from .environment import LaneDefenseEnv

__all__ = [
    "LaneDefenseEnv",
]
