"""
Scenario - Serializable match configuration.

A scenario fully describes a match: lane geometry, economy, tick limit,
seed, and which strategy plays each team. Scenarios round-trip through
JSON so matches can be stored and replayed.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from agents.spec import StrategySpec
from .core.types import Team
from .world.player import Pricing


@dataclass
class Scenario:
    """
    Match configuration.

    Attributes:
        width: Lane width (both lanes share geometry)
        height: Lane height
        safety_zone_height: Top rows exempt from tower placement
        starting_gold: Gold each player starts with
        income_per_tick: Gold granted to each player after every tick
        max_ticks: Number of decision cycles before the match ends
        seed: Master seed; strategies without their own seed derive one from it
        pricing: Unit prices and stats
        strategies: One StrategySpec per team
    """
    width: int = 8
    height: int = 10
    safety_zone_height: int = 2
    starting_gold: int = 100
    income_per_tick: int = 10
    max_ticks: int = 50
    seed: Optional[int] = None
    pricing: Pricing = field(default_factory=Pricing)
    strategies: List[StrategySpec] = field(default_factory=list)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Lane dimensions must be positive: {self.width}x{self.height}")
        if not 0 <= self.safety_zone_height < self.height:
            raise ValueError(
                f"Safety zone height must be in [0, {self.height}): {self.safety_zone_height}"
            )
        if self.starting_gold < 0 or self.income_per_tick < 0:
            raise ValueError("Gold values cannot be negative")
        if self.max_ticks <= 0:
            raise ValueError(f"max_ticks must be positive: {self.max_ticks}")

    def spec_for(self, team: Team) -> StrategySpec:
        """Return the single strategy spec for a team."""
        matches = [spec for spec in self.strategies if spec.team == team]
        if not matches:
            raise ValueError(f"No StrategySpec found for team {team}")
        if len(matches) > 1:
            raise ValueError(f"Multiple StrategySpecs found for team {team}; expected exactly one.")
        return matches[0]

    def clone(self) -> "Scenario":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "width": self.width,
            "height": self.height,
            "safety_zone_height": self.safety_zone_height,
            "starting_gold": self.starting_gold,
            "income_per_tick": self.income_per_tick,
            "max_ticks": self.max_ticks,
            "seed": self.seed,
            "pricing": self.pricing.to_dict(),
            "strategies": [spec.to_dict() for spec in self.strategies],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Scenario":
        """Construct from a dict (e.g., loaded from JSON)."""
        known = {
            key: data[key]
            for key in (
                "width",
                "height",
                "safety_zone_height",
                "starting_gold",
                "income_per_tick",
                "max_ticks",
                "seed",
            )
            if key in data
        }
        return cls(
            **known,
            pricing=Pricing.from_dict(data.get("pricing")),
            strategies=[StrategySpec.from_dict(item) for item in data.get("strategies", []) or []],
        )

    def save_json(self, filepath: str | Path) -> Path:
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return path

    @classmethod
    def load_json(cls, filepath: str | Path) -> "Scenario":
        return cls.from_dict(json.loads(Path(filepath).read_text(encoding="utf-8")))

    def __str__(self) -> str:
        return (
            f"Scenario({self.width}x{self.height}, safety={self.safety_zone_height}, "
            f"ticks={self.max_ticks}, seed={self.seed})"
        )


def create_default_scenario(
    blue: str = "chessboard",
    red: str = "idle",
    seed: Optional[int] = 42,
) -> Scenario:
    """Chessboard AI against a do-nothing opponent on the default lanes."""
    return Scenario(
        seed=seed,
        strategies=[
            StrategySpec(type=blue, team=Team.BLUE, name=f"Blue {blue}"),
            StrategySpec(type=red, team=Team.RED, name=f"Red {red}"),
        ],
    )
