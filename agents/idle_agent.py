"""
Idle strategy implementation for testing and baseline comparison.

This strategy never spends gold. It stands in for a disabled AI opponent.
"""

from typing import Any, List

from env.world import Player
from .base_agent import BaseStrategy
from .registry import register_strategy


@register_strategy("idle")
class IdleStrategy(BaseStrategy):
    """
    Strategy that does nothing.

    Useful as an opponent whose lane stays empty, so matches against it
    isolate the behaviour of the other side.
    """

    def __init__(self, player: Player, name: str = None, **_: Any):
        """
        Initialize idle strategy.

        Args:
            player: Player to control
            name: Strategy name (default: "IdleStrategy")
        """
        super().__init__(player, name)

    def deploy_towers(self) -> List[Any]:
        return []

    def deploy_soldiers(self) -> List[Any]:
        return []
