from __future__ import annotations

from typing import Any, Dict, List

from agents import BaseStrategy, create_strategy_from_spec
from env import LaneDefenseEnv
from env.core.types import Team
from env.scenario import Scenario
from infra.logger import get_logger

from .frame import Frame

log = get_logger(__name__)


class GameRunner:
    """
    Step-by-step match runner that returns UI-friendly frames.

    Each step is one decision cycle: every team deploys towers and then
    soldiers (BLUE first), after which the environment pays income and
    advances the clock.
    """

    def __init__(self, scenario: Scenario, verbose: bool = False):
        self.scenario = scenario.clone()
        self.verbose = verbose

        self.env = LaneDefenseEnv(verbose=verbose)
        self._state = self.env.reset(self.scenario)

        self.strategies: Dict[Team, BaseStrategy] = {
            team: self._strategy_from_scenario(team) for team in Team
        }
        self._done = False

        log.info(
            "GameRunner initialized for scenario seed=%s (%s)",
            self.scenario.seed,
            ", ".join(str(strategy) for strategy in self.strategies.values()),
        )

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def step(self) -> Frame:
        """
        Run one decision cycle.

        Raises:
            RuntimeError: If the match has already finished
        """
        if self._done:
            raise RuntimeError("Match is over; start a new runner")

        purchases: Dict[str, Dict[str, Any]] = {}
        for team, strategy in self.strategies.items():
            towers = strategy.deploy_towers()
            soldiers = strategy.deploy_soldiers()
            purchases[team.value] = {
                "towers": _successes(towers),
                "soldiers": _successes(soldiers),
                "attempts": [
                    {"target": target, **result.to_dict()}
                    for target, result in towers + soldiers
                ],
            }

        self._state, self._done = self.env.step()

        if self._done:
            log.info("Match finished after %d ticks: %s", self.turn, self._summary())

        return Frame(
            turn=self.turn,
            done=self._done,
            players={team.value: player.to_dict() for team, player in self.env.players.items()},
            purchases=purchases,
            lanes={team.value: player.home_lane.to_dict() for team, player in self.env.players.items()},
        )

    def run(self) -> Frame:
        """Step until the match is over and return the last frame."""
        frame = self.step()
        while not frame.done:
            frame = self.step()
        return frame

    def abort(self) -> None:
        """Stop the match early (e.g. the UI closed it)."""
        if self._done:
            return
        self._done = True
        log.info("Match manually aborted at tick %d", self.turn)

    # ------------------------------------------------------------------#
    # Helpers
    # ------------------------------------------------------------------#
    @property
    def turn(self) -> int:
        return self._state["turn"]

    @property
    def done(self) -> bool:
        return self._done

    def _strategy_from_scenario(self, team: Team) -> BaseStrategy:
        spec = self.scenario.spec_for(team)
        if "seed" not in spec.init_params and self.scenario.seed is not None:
            # Derive distinct per-team seeds so replays are reproducible.
            spec = spec.with_team(team)
            spec.init_params["seed"] = self.scenario.seed + (0 if team == Team.BLUE else 1)
        return create_strategy_from_spec(spec, self.env.players[team])

    def _summary(self) -> Dict[str, Any]:
        return {team.value: player.to_dict() for team, player in self.env.players.items()}


def _successes(attempts: List[Any]) -> List[Any]:
    """Targets of the successful attempts in a strategy's attempt list."""
    return [target for target, result in attempts if result.success]
