import pytest

from agents import StrategySpec
from env import LaneDefenseEnv
from env.core.types import Team
from env.scenario import Scenario, create_default_scenario
from env.world import Pricing


def test_scenario_roundtrip_persist_and_load(tmp_path):
    scenario = Scenario(
        width=6,
        height=12,
        safety_zone_height=3,
        starting_gold=50,
        income_per_tick=4,
        max_ticks=20,
        seed=123,
        pricing=Pricing(tower_base_cost=8, tower_cost_step=1, soldier_cost=3, tower_health=12),
        strategies=[
            StrategySpec(type="chessboard", team=Team.BLUE, init_params={"config": {"max_soldiers": 5}}),
            StrategySpec(type="idle", team=Team.RED, name="Red Idle"),
        ],
    )

    path = scenario.save_json(tmp_path / "scenario.json")
    loaded = Scenario.load_json(path)

    assert loaded.to_dict() == scenario.to_dict()
    assert loaded.spec_for(Team.RED).name == "Red Idle"


@pytest.mark.parametrize(
    "overrides",
    [{"width": 0}, {"height": 2, "safety_zone_height": 2}, {"max_ticks": 0}, {"starting_gold": -1}],
)
def test_invalid_scenarios_rejected(overrides):
    with pytest.raises(ValueError):
        Scenario(**overrides)


def test_spec_for_requires_exactly_one_per_team():
    scenario = create_default_scenario()
    scenario.strategies.append(StrategySpec(type="idle", team=Team.RED))
    with pytest.raises(ValueError):
        scenario.spec_for(Team.RED)
    with pytest.raises(ValueError):
        Scenario().spec_for(Team.BLUE)


def test_environment_links_lanes_and_pays_income():
    scenario = Scenario(max_ticks=2, starting_gold=5, income_per_tick=3)
    env = LaneDefenseEnv()
    state = env.reset(scenario)

    blue, red = state["players"][Team.BLUE], state["players"][Team.RED]
    assert blue.enemy_lane is red.home_lane
    assert red.enemy_lane is blue.home_lane

    state, done = env.step()
    assert not done and blue.gold == 8 and state["turn"] == 1
    state, done = env.step()
    assert done and red.gold == 11


def test_environment_requires_reset():
    with pytest.raises(RuntimeError):
        LaneDefenseEnv().step()
