"""
Unit definitions for the Lane Defense environment.

A lane cell holds at most one unit. Units are a tagged variant:
- TOWER: stationary defense with a health value
- SOLDIER: offensive unit, no extra stats
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.types import Team, UnitKind

DEFAULT_TOWER_HEALTH = 10


@dataclass(frozen=True)
class Unit:
    """
    A unit occupying a lane cell.

    Use the `tower()` and `soldier()` constructors rather than building the
    variant by hand; they enforce that only towers carry health.

    Attributes:
        kind: Variant tag (TOWER or SOLDIER)
        team: Owner of the unit
        health: Tower health, None for soldiers
        id: Match-unique ID (None for units built outside a match)
    """
    kind: UnitKind
    team: Team
    health: Optional[int] = None
    id: Optional[int] = None

    def __post_init__(self):
        if self.kind == UnitKind.TOWER:
            if self.health is None or self.health <= 0:
                raise ValueError(f"Tower health must be positive: {self.health}")
        elif self.health is not None:
            raise ValueError("Soldiers do not carry health")

    @staticmethod
    def tower(team: Team, health: int = DEFAULT_TOWER_HEALTH, id: Optional[int] = None) -> Unit:
        """Create a tower unit."""
        return Unit(kind=UnitKind.TOWER, team=team, health=health, id=id)

    @staticmethod
    def soldier(team: Team, id: Optional[int] = None) -> Unit:
        """Create a soldier unit."""
        return Unit(kind=UnitKind.SOLDIER, team=team, id=id)

    @property
    def is_tower(self) -> bool:
        return self.kind == UnitKind.TOWER

    @property
    def is_soldier(self) -> bool:
        return self.kind == UnitKind.SOLDIER

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "team": self.team.value,
            "health": self.health,
        }

    def __str__(self) -> str:
        if self.is_tower:
            return f"{self.kind.icon}{self.id or ''}({self.team}, hp={self.health})"
        return f"{self.kind.icon}{self.id or ''}({self.team})"
