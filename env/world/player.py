"""
Player - Currency ledger and purchase transactions.

A Player owns a home lane (where its towers stand) and sends soldiers into
the enemy lane (the opponent's home lane). Every purchase goes through this
class; strategies never write into lanes directly.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional

from infra.logger import get_logger

from .lane import Lane
from ..core.types import PurchaseResult, Team, UnitKind
from ..entities.unit import Unit, DEFAULT_TOWER_HEALTH
from ..utils.id_generator import IDGenerator

log = get_logger(__name__)


@dataclass
class Pricing:
    """
    Unit prices and stats.

    The next tower costs `tower_base_cost + tower_cost_step * towers_built`,
    so every tower on the home lane makes the next one more expensive.
    """
    tower_base_cost: int = 10
    tower_cost_step: int = 2
    soldier_cost: int = 2
    tower_health: int = DEFAULT_TOWER_HEALTH

    def __post_init__(self):
        if self.tower_base_cost <= 0 or self.soldier_cost <= 0:
            raise ValueError("Unit costs must be positive")
        if self.tower_cost_step < 0:
            raise ValueError(f"Tower cost step cannot be negative: {self.tower_cost_step}")
        if self.tower_health <= 0:
            raise ValueError(f"Tower health must be positive: {self.tower_health}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "Pricing":
        return cls(**(data or {}))


class Player:
    """
    One side of a match.

    Attributes:
        team: Team this player controls
        gold: Current currency balance
        home_lane: Lane defended by this player's towers
        enemy_lane: Lane this player spawns soldiers into
        pricing: Unit prices
    """

    def __init__(
        self,
        team: Team,
        home_lane: Lane,
        enemy_lane: Lane,
        gold: int = 0,
        pricing: Optional[Pricing] = None,
        ids: Optional[IDGenerator] = None,
    ):
        if gold < 0:
            raise ValueError(f"Gold cannot be negative: {gold}")

        self.team = team
        self.home_lane = home_lane
        self.enemy_lane = enemy_lane
        self.gold = gold
        self.pricing = pricing or Pricing()
        self._ids = ids or IDGenerator()

    # ------------------------------------------------------------------
    # Economy queries
    # ------------------------------------------------------------------
    def next_cost(self, kind: UnitKind) -> int:
        """Cost of the next unit of the given kind."""
        if kind == UnitKind.TOWER:
            return (
                self.pricing.tower_base_cost
                + self.pricing.tower_cost_step * self.home_lane.tower_count()
            )
        return self.pricing.soldier_cost

    def can_afford(self, kind: UnitKind) -> bool:
        return self.gold >= self.next_cost(kind)

    def earn(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Income cannot be negative: {amount}")
        self.gold += amount

    # ------------------------------------------------------------------
    # Purchases
    # ------------------------------------------------------------------
    def try_buy_tower(self, x: int, y: int) -> PurchaseResult:
        """
        Buy a tower at engine cell (x, y) of the home lane.

        Raises:
            IndexError: If (x, y) lies outside the lane
        """
        lane = self.home_lane
        if not lane.in_bounds((x, y)):
            raise IndexError(f"Tower site ({x}, {y}) is outside {lane}")
        if lane.in_safety_zone(y):
            return self._rejected(PurchaseResult.fail("SAFETY_ZONE", f"Row {y} is in the safety zone"))
        return self._buy(
            UnitKind.TOWER,
            lane,
            x,
            y,
            lambda unit_id: Unit.tower(self.team, self.pricing.tower_health, id=unit_id),
        )

    def try_buy_soldier(self, x: int) -> PurchaseResult:
        """
        Spawn a soldier in column x at the entry row (engine row 0) of the enemy lane.

        Raises:
            IndexError: If x lies outside the lane
        """
        lane = self.enemy_lane
        if not lane.in_bounds((x, 0)):
            raise IndexError(f"Soldier column {x} is outside {lane}")
        return self._buy(
            UnitKind.SOLDIER,
            lane,
            x,
            0,
            lambda unit_id: Unit.soldier(self.team, id=unit_id),
        )

    def _buy(
        self,
        kind: UnitKind,
        lane: Lane,
        x: int,
        y: int,
        make_unit: Callable[[int], Unit],
    ) -> PurchaseResult:
        cost = self.next_cost(kind)
        if self.gold < cost:
            return self._rejected(
                PurchaseResult.fail("INSUFFICIENT_FUNDS", f"{kind} costs {cost}, have {self.gold}")
            )
        if not lane.is_empty(x, y):
            return self._rejected(PurchaseResult.fail("CELL_OCCUPIED", f"Cell ({x}, {y}) is occupied"))

        lane.place(x, y, make_unit(self._ids.next_id()))
        self.gold -= cost
        return PurchaseResult.ok(f"Bought {kind} at ({x}, {y}) for {cost}")

    def _rejected(self, result: PurchaseResult) -> PurchaseResult:
        log.debug("%s purchase rejected: %s", self.team, result.message)
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team": self.team.value,
            "gold": self.gold,
            "towers": self.home_lane.tower_count(),
            "soldiers": self.enemy_lane.unit_count(UnitKind.SOLDIER),
        }

    def __repr__(self) -> str:
        return f"Player(team={self.team.name}, gold={self.gold})"
