"""
Core type definitions for the Lane Defense environment.

This module contains all fundamental types, enums, and constants used
throughout the system. No logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple
from dataclasses import dataclass

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Grid position: (x, y) in ENGINE coordinates where:
# - X increases to the RIGHT
# - Y increases DOWNWARD
# - Origin (0, 0) is at TOP-LEFT, next to the safety zone
GridPos = Tuple[int, int]


class Team(Enum):
    """Team affiliation for players and units."""
    BLUE = "BLUE"
    RED = "RED"

    def __str__(self) -> str:
        return self.value

    @property
    def opponent(self) -> Team:
        """Get the opposing team."""
        return Team.RED if self == Team.BLUE else Team.BLUE


# ============================================================================
# UNIT KINDS
# ============================================================================

class UnitKind(Enum):
    """Types of units that can occupy a lane cell."""
    TOWER = "tower"
    SOLDIER = "soldier"

    def __str__(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        """Get the display icon for this unit kind."""
        return {
            UnitKind.TOWER: "T",
            UnitKind.SOLDIER: "S",
        }[self]


# ============================================================================
# PURCHASE RESULT
# ============================================================================

@dataclass(frozen=True)
class PurchaseResult:
    """
    Structured result of a purchase attempt.

    A failed purchase is a normal outcome, not an error: strategies simply
    move on to their next candidate.

    Attributes:
        success: Whether the unit was bought and placed
        error_code: Machine-readable error code (None on success)
        message: Human-readable message explaining the result

    Error codes:
        - "INSUFFICIENT_FUNDS": Player cannot pay the next unit's cost
        - "CELL_OCCUPIED": Target cell already holds a unit
        - "SAFETY_ZONE": Towers cannot be built in the safety zone rows
    """
    success: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def ok(message: str = "") -> PurchaseResult:
        """Create a successful purchase result."""
        return PurchaseResult(success=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> PurchaseResult:
        """Create a failed purchase result."""
        return PurchaseResult(success=False, error_code=error_code, message=message)

    def to_dict(self) -> dict:
        return {"success": self.success, "error_code": self.error_code, "message": self.message}
