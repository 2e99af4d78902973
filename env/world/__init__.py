"""
World state for the Lane Defense environment.

This module provides:
- Lane: Grid storage, geometry and occupancy
- Player: Currency ledger and purchase transactions
- Pricing: Unit costs and stats
"""

from .lane import Lane
from .player import Player, Pricing

__all__ = [
    "Lane",
    "Player",
    "Pricing",
]
