import pytest

from agents import (
    ChessboardStrategy,
    IdleStrategy,
    StrategySpec,
    create_strategy_from_spec,
    resolve_strategy_class,
)
from env.core.types import Team

from conftest import make_player


def test_registered_keys_resolve():
    assert resolve_strategy_class("chessboard") is ChessboardStrategy
    assert resolve_strategy_class("idle") is IdleStrategy


def test_import_path_resolves():
    assert resolve_strategy_class("agents.idle_agent.IdleStrategy") is IdleStrategy


def test_unknown_key_and_wrong_class_rejected():
    with pytest.raises(ValueError):
        resolve_strategy_class("nope")
    with pytest.raises(TypeError):
        resolve_strategy_class("env.world.lane.Lane")


def test_spec_roundtrip_and_team_required():
    spec = StrategySpec(type="chessboard", team=Team.RED, name="Red", init_params={"seed": 3})
    restored = StrategySpec.from_dict(spec.to_dict())
    assert restored == spec
    assert restored.with_team(Team.BLUE).team == Team.BLUE

    with pytest.raises(ValueError):
        StrategySpec.from_dict({"type": "idle"})


def test_factory_builds_configured_strategy():
    player = make_player()
    spec = StrategySpec(
        type="chessboard",
        team=Team.BLUE,
        name="Blue Board",
        init_params={"seed": 9, "config": {"danger_height": 1}},
    )

    strategy = create_strategy_from_spec(spec, player)

    assert isinstance(strategy, ChessboardStrategy)
    assert strategy.name == "Blue Board"
    assert strategy.player is player
    assert strategy.config.danger_height == 1


def test_factory_rejects_team_mismatch():
    with pytest.raises(ValueError):
        create_strategy_from_spec(StrategySpec(type="idle", team=Team.RED), make_player())


def test_unimportable_path_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_strategy_class("nosuch.Mod")
    with pytest.raises(ValueError):
        resolve_strategy_class("agents.idle_agent.NoSuchStrategy")
