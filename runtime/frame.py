from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class Frame:
    """
    JSON-friendly snapshot of one decision cycle.

    Attributes:
        turn: Ticks completed after this cycle
        done: Whether the match is over
        players: Per-team ledger summary (gold, towers, soldiers)
        purchases: Per-team attempts made this cycle
        lanes: Per-team home lane dumps
    """
    turn: int
    done: bool
    players: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    purchases: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    lanes: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "done": self.done,
            "players": self.players,
            "purchases": self.purchases,
            "lanes": self.lanes,
        }
