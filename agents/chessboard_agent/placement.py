"""
Checkerboard tower placement.

Towers are laid out row by row starting from the defensive edge. Even rows
(counted from that edge) use columns 0, 2, 4, ...; odd rows use 1, 3, 5, ...
so no two towers in a row are neighbours while consecutive rows still cover
every column.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from env.core.types import GridPos, PurchaseResult, UnitKind
from env.world import Lane, Player
from infra.logger import get_logger

log = get_logger(__name__)

TowerAttempt = Tuple[GridPos, PurchaseResult]


def checkerboard_sites(lane: Lane, max_height: int) -> Iterator[GridPos]:
    """
    Yield candidate tower sites in engine coordinates.

    Rows are clamped to the buildable band, so the safety zone is never
    produced.

    Args:
        lane: Lane to walk
        max_height: Rows, counted from the defensive edge, to consider

    Yields:
        (x, engine_y) in placement order
    """
    height = min(max_height, lane.buildable_height)
    for y in range(height):
        translated_y = lane.translate_row(y)
        start_x = 0 if y % 2 == 0 else 1
        for x in range(start_x, lane.width, 2):
            yield x, translated_y


def deploy_towers(player: Player, max_height: int) -> List[TowerAttempt]:
    """
    Spend gold on towers along the checkerboard until it runs out.

    Occupied sites are skipped, never retried. Spending stops the moment the
    player can no longer afford the next tower, whose price rises with every
    tower built.

    Returns:
        Every attempted (site, result) pair, in order
    """
    attempts: List[TowerAttempt] = []
    if not player.can_afford(UnitKind.TOWER):
        return attempts

    for x, y in checkerboard_sites(player.home_lane, max_height):
        result = player.try_buy_tower(x, y)
        attempts.append(((x, y), result))

        if not player.can_afford(UnitKind.TOWER):
            break

    built = sum(1 for _, result in attempts if result.success)
    log.debug(
        "%s tower pass: %d attempts, %d built, %d gold left",
        player.team, len(attempts), built, player.gold,
    )
    return attempts


def first_open_site(lane: Lane, height: int) -> Optional[GridPos]:
    """
    Find the first empty checkerboard site within `height` rows.

    Returns:
        (x, engine_y) of the first empty site, or None if all are built
    """
    for x, y in checkerboard_sites(lane, height):
        if lane.is_empty(x, y):
            return x, y
    return None
