from pathlib import Path
import sys

import pytest

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from env.core.types import Team
from env.entities import Unit
from env.world import Lane, Player


def make_player(
    width: int = 8,
    height: int = 10,
    safety_zone_height: int = 2,
    gold: int = 1000,
) -> Player:
    """BLUE player with fresh, identically shaped home and enemy lanes."""
    home = Lane(width, height, safety_zone_height)
    enemy = Lane(width, height, safety_zone_height)
    return Player(Team.BLUE, home_lane=home, enemy_lane=enemy, gold=gold)


def fill_rows(lane: Lane, rows: int, team: Team = Team.BLUE, skip=()) -> None:
    """Put a tower on every checkerboard site of the innermost `rows` rows."""
    for y in range(rows):
        engine_y = lane.translate_row(y)
        for x in range(y % 2, lane.width, 2):
            if (x, engine_y) not in skip:
                lane.place(x, engine_y, Unit.tower(team))


@pytest.fixture
def player() -> Player:
    return make_player()
