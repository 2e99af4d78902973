"""
Base strategy interface for the Lane Defense environment.

All strategies must implement this interface to play a match.
"""

from abc import ABC, abstractmethod
from typing import Any, List
from env.world import Player


class BaseStrategy(ABC):
    """
    Abstract base class for all strategies.

    A strategy controls one Player. Once per decision cycle the game calls
    deploy_towers() and deploy_soldiers(); each spends the player's gold
    through Player.try_buy_tower() / Player.try_buy_soldier().

    Subclasses must implement:
    - deploy_towers(): Build defenses on the home lane
    - deploy_soldiers(): Spawn soldiers into the enemy lane

    Attributes:
        player: The player this strategy controls
        name: Strategy name for logging/identification
    """

    def __init__(self, player: Player, name: str = None):
        """
        Initialize the strategy.

        Args:
            player: Player this strategy spends for
            name: Optional name for the strategy (defaults to class name)
        """
        self.player = player
        self.name = name or self.__class__.__name__

    @property
    def team(self):
        return self.player.team

    @abstractmethod
    def deploy_towers(self) -> List[Any]:
        """
        Buy towers on the home lane.

        Returns:
            The purchase attempts made this cycle (strategy-defined entries)
        """
        pass

    @abstractmethod
    def deploy_soldiers(self) -> List[Any]:
        """
        Buy soldiers on the enemy lane.

        Returns:
            The purchase attempts made this cycle (strategy-defined entries)
        """
        pass

    def sort_soldiers(self, soldiers: List[Any]) -> List[Any]:
        """
        Order this player's soldiers before the engine moves them.

        The default keeps the engine's order.
        """
        return soldiers

    def reset(self) -> None:
        """
        Reset strategy state between matches.

        Override if your strategy keeps internal state.
        """
        pass

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name} ({self.team.name})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"{self.__class__.__name__}(team={self.team.name}, name='{self.name}')"
