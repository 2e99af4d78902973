"""
LaneDefenseEnv - Main environment interface.

The environment owns both lanes and both players and advances the match
clock. It deliberately knows nothing about strategies: callers (usually
runtime.GameRunner) let each strategy spend gold between ticks.

Usage:
    from env import LaneDefenseEnv
    from env.scenario import create_default_scenario

    env = LaneDefenseEnv()
    state = env.reset(create_default_scenario())

    while not done:
        ...  # strategies buy towers / soldiers via state["players"][team]
        state, done = env.step()

State Structure:
    {
        "players": {Team.BLUE: Player, Team.RED: Player},
        "turn": int,
        "config": {"max_ticks": int, "income_per_tick": int},
    }
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

from infra.logger import get_logger

from .core.types import Team
from .utils.id_generator import IDGenerator
from .world import Lane, Player

if TYPE_CHECKING:
    from .scenario import Scenario

log = get_logger(__name__)


class LaneDefenseEnv:
    """
    Two-lane match environment.

    Each team has a home lane. A player's enemy lane is the opponent's home
    lane, so soldiers bought by BLUE appear on RED's lane and vice versa.

    Attributes:
        players: Players keyed by team (empty until reset())
        turn: Number of completed ticks
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the environment.

        Args:
            verbose: Log lane snapshots after each tick (default: False)
        """
        self.verbose = verbose
        self.players: Dict[Team, Player] = {}
        self.turn: int = 0
        self._max_ticks: Optional[int] = None
        self._income_per_tick: int = 0

    def reset(self, scenario: "Scenario") -> Dict[str, Any]:
        """
        Build fresh lanes and players from a scenario.

        Returns:
            The initial state dict
        """
        lanes = {
            team: Lane(scenario.width, scenario.height, scenario.safety_zone_height)
            for team in Team
        }
        ids = IDGenerator()
        self.players = {
            team: Player(
                team=team,
                home_lane=lanes[team],
                enemy_lane=lanes[team.opponent],
                gold=scenario.starting_gold,
                pricing=scenario.pricing,
                ids=ids,
            )
            for team in Team
        }
        self.turn = 0
        self._max_ticks = scenario.max_ticks
        self._income_per_tick = scenario.income_per_tick

        log.info("Environment reset: %s", scenario)
        return self.get_state()

    def step(self) -> Tuple[Dict[str, Any], bool]:
        """
        Close the current tick: pay income and advance the clock.

        Returns:
            (state, done) where done is True once max_ticks ticks have passed

        Raises:
            RuntimeError: If reset() has not been called
        """
        if not self.players:
            raise RuntimeError("Environment not initialized. Call reset() first.")

        for player in self.players.values():
            player.earn(self._income_per_tick)
        self.turn += 1

        if self.verbose:
            for team, player in self.players.items():
                log.info("Turn %d %s lane:\n%s", self.turn, team, player.home_lane.render())

        return self.get_state(), self.done

    @property
    def done(self) -> bool:
        return self._max_ticks is not None and self.turn >= self._max_ticks

    def get_state(self) -> Dict[str, Any]:
        return {
            "players": self.players,
            "turn": self.turn,
            "config": {
                "max_ticks": self._max_ticks,
                "income_per_tick": self._income_per_tick,
            },
        }
