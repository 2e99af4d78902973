"""
Chessboard strategy: checkerboard defense first, then the safest lane.

Decision logic:
- Towers: fill the checkerboard from the defensive edge up to a fixed
  height, spending until the next tower is unaffordable
- Soldiers: only once the innermost rows are fully built; spawn into the
  column with the least tower danger on the enemy lane, preferring columns
  where soldiers are already massing, then sweep any empty entry cells
"""

from __future__ import annotations

import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple

from env.core.types import PurchaseResult
from env.world import Player
from infra.logger import get_logger
from ..base_agent import BaseStrategy
from ..registry import register_strategy
from .lane_selector import select_lane
from .placement import TowerAttempt, deploy_towers, first_open_site
from .threat import ADJACENT_DANGER_MULTIPLIER, scan_threats

log = get_logger(__name__)

SoldierAttempt = Tuple[int, PurchaseResult]


@dataclass
class ChessboardConfig:
    """
    Tunables for ChessboardStrategy.

    Attributes:
        danger_height: While any checkerboard site below this height is
            empty, no soldiers are bought
        max_soldiers: Soldier count on the enemy lane at which spawning stops
        max_tower_placement_height: Towers are never planned above this height
        adjacent_danger_multiplier: Share of tower health charged to the
            neighbouring columns
    """
    danger_height: int = 2
    max_soldiers: int = 80
    max_tower_placement_height: int = 3
    adjacent_danger_multiplier: float = ADJACENT_DANGER_MULTIPLIER

    def __post_init__(self):
        if self.danger_height < 0 or self.max_tower_placement_height < 0:
            raise ValueError("Heights cannot be negative")
        if self.max_soldiers < 0:
            raise ValueError(f"max_soldiers cannot be negative: {self.max_soldiers}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "ChessboardConfig":
        return cls(**(data or {}))


@register_strategy("chessboard")
class ChessboardStrategy(BaseStrategy):
    """
    Rule-based AI that builds a checkerboard wall and probes the weakest lane.
    """

    def __init__(
        self,
        player: Player,
        name: str | None = None,
        *,
        config: ChessboardConfig | Dict[str, Any] | None = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        **_: Any,
    ):
        """
        Initialize the chessboard strategy.

        Args:
            player: Player to control
            name: Optional strategy name (default: "ChessboardStrategy")
            config: Tunables, as a ChessboardConfig or its dict form
            seed: Seed for the initial spawn column (ignored when rng is given)
            rng: Random source to draw the initial spawn column from
        """
        super().__init__(player, name)
        if isinstance(config, dict) or config is None:
            config = ChessboardConfig.from_dict(config)
        self.config = config
        self.rng = rng or random.Random(seed)

    def deploy_towers(self) -> List[TowerAttempt]:
        return deploy_towers(self.player, self.config.max_tower_placement_height)

    def deploy_soldiers(self) -> List[SoldierAttempt]:
        open_site = first_open_site(self.player.home_lane, self.config.danger_height)
        if open_site is not None:
            log.debug("%s holds soldiers back: tower site %s still open", self.team, open_site)
            return []

        enemy_lane = self.player.enemy_lane
        attempts: List[SoldierAttempt] = []

        # One pass of up to `width` tries, sticking to the last lane that worked.
        previous_pick = self.rng.randrange(enemy_lane.width)
        tries = 0
        while not self._at_soldier_cap() and tries < enemy_lane.width:
            report = scan_threats(enemy_lane, self.config.adjacent_danger_multiplier)
            best_x = select_lane(report, previous_pick)
            result = self.player.try_buy_soldier(best_x)
            attempts.append((best_x, result))

            if result.success:
                previous_pick = best_x

            tries += 1

        if not self._at_soldier_cap():
            for x in range(enemy_lane.width):
                if not enemy_lane.is_empty(x, 0):
                    continue

                attempts.append((x, self.player.try_buy_soldier(x)))
                if self._at_soldier_cap():
                    break

        log.debug(
            "%s soldier pass: %d attempts, %d spawned, %d gold left",
            self.team,
            len(attempts),
            sum(1 for _, result in attempts if result.success),
            self.player.gold,
        )
        return attempts

    def _at_soldier_cap(self) -> bool:
        return self.player.enemy_lane.soldier_count() >= self.config.max_soldiers
