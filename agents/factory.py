from __future__ import annotations

from env.world import Player

from .base_agent import BaseStrategy
from .registry import resolve_strategy_class
from .spec import StrategySpec


def create_strategy_from_spec(spec: StrategySpec, player: Player) -> BaseStrategy:
    """Instantiate a strategy for `player` from a StrategySpec."""
    if player.team != spec.team:
        raise ValueError(f"Spec is for team {spec.team}, player is {player.team}")

    cls = resolve_strategy_class(spec.type)

    init_kwargs = dict(spec.init_params)
    if spec.name is not None:
        init_kwargs.setdefault("name", spec.name)

    strategy = cls(player, **init_kwargs)
    if not isinstance(strategy, BaseStrategy):
        raise TypeError(f"Strategy {cls} is not a BaseStrategy")

    return strategy
