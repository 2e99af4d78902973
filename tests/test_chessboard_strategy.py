import random

import pytest

from agents import ChessboardConfig, ChessboardStrategy, IdleStrategy
from env.core.types import Team
from env.entities import Unit

from conftest import fill_rows, make_player


def test_open_inner_site_blocks_soldiers():
    player = make_player(gold=100)
    fill_rows(player.home_lane, 2, skip={(7, 8)})
    strategy = ChessboardStrategy(player, seed=1)

    assert strategy.deploy_soldiers() == []
    assert player.enemy_lane.soldier_count() == 0
    assert player.gold == 100


def test_first_spawn_uses_seeded_column_when_lane_has_no_towers():
    player = make_player(gold=100)
    fill_rows(player.home_lane, 2)
    strategy = ChessboardStrategy(player, config={"max_soldiers": 3}, rng=random.Random(11))
    seed_column = random.Random(11).randrange(8)

    attempts = strategy.deploy_soldiers()

    # One pass of 8 tries keeps hitting the seeded column, then the sweep tops up.
    assert attempts[0] == (seed_column, attempts[0][1])
    assert attempts[0][1].success
    assert all(x == seed_column and not result.success for x, result in attempts[1:8])
    assert player.enemy_lane.soldier_count() == 3
    assert all(player.enemy_lane.cell_at(x, 0) is not None for x, result in attempts if result.success)


def test_sweep_fills_entry_row_when_cap_allows():
    player = make_player(gold=100)
    fill_rows(player.home_lane, 2)
    strategy = ChessboardStrategy(player, seed=5)

    strategy.deploy_soldiers()

    assert player.enemy_lane.soldier_count() == 8
    assert player.gold == 100 - 8 * 2


def test_spawns_into_least_defended_column():
    player = make_player(gold=100)
    fill_rows(player.home_lane, 2)
    for x in (0, 2, 4):
        player.enemy_lane.place(x, 9, Unit.tower(Team.RED, health=10))
    strategy = ChessboardStrategy(player, seed=0)

    attempts = strategy.deploy_soldiers()

    assert attempts[0][0] == 5
    assert attempts[0][1].success


def test_cap_reached_means_no_attempts():
    player = make_player(width=10, height=10, safety_zone_height=2, gold=100)
    fill_rows(player.home_lane, 2)
    for y in range(8):
        for x in range(10):
            player.enemy_lane.place(x, y, Unit.soldier(Team.BLUE))
    assert player.enemy_lane.soldier_count() == 80
    strategy = ChessboardStrategy(player, seed=2)

    assert strategy.deploy_soldiers() == []
    assert player.gold == 100


def test_sweep_stops_the_moment_cap_is_hit():
    player = make_player(gold=100)
    fill_rows(player.home_lane, 2)
    strategy = ChessboardStrategy(player, config=ChessboardConfig(max_soldiers=2), seed=3)

    strategy.deploy_soldiers()

    assert player.enemy_lane.soldier_count() == 2


def test_broke_player_tries_one_pass_and_one_sweep():
    player = make_player(gold=0)
    fill_rows(player.home_lane, 2)
    strategy = ChessboardStrategy(player, seed=4)

    attempts = strategy.deploy_soldiers()

    assert len(attempts) == 16
    assert {result.error_code for _, result in attempts} == {"INSUFFICIENT_FUNDS"}
    assert [x for x, _ in attempts[8:]] == list(range(8))


def test_deploy_towers_uses_configured_height():
    player = make_player(gold=10_000)
    strategy = ChessboardStrategy(player, config={"max_tower_placement_height": 1})

    attempts = strategy.deploy_towers()

    assert [site for site, _ in attempts] == [(0, 9), (2, 9), (4, 9), (6, 9)]


def test_config_validation_and_roundtrip():
    config = ChessboardConfig(danger_height=1, max_soldiers=10)
    assert ChessboardConfig.from_dict(config.to_dict()) == config
    with pytest.raises(ValueError):
        ChessboardConfig(max_soldiers=-1)


def test_idle_strategy_never_spends():
    player = make_player(gold=100)
    strategy = IdleStrategy(player)

    assert strategy.deploy_towers() == []
    assert strategy.deploy_soldiers() == []
    assert strategy.sort_soldiers([3, 1, 2]) == [3, 1, 2]
    assert player.gold == 100
    assert str(strategy) == "IdleStrategy (BLUE)"
