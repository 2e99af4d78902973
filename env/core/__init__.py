"""
Core types and constants for the Lane Defense environment.
"""

# Instead of from env.core.types import GridPos, you can do: from env.core import GridPos
from .types import (
    GridPos,
    Team,
    UnitKind,
    PurchaseResult,
)


__all__ = [
    "GridPos",
    "Team",
    "UnitKind",
    "PurchaseResult",
]
