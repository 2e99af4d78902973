"""
Threat scanning for soldier spawns.

Towers only ever stand on even columns under the checkerboard layout, so
only those columns are walked. A tower's health counts fully against its
own column and at a discount against the neighbouring columns, since its
reach is not confined to one column.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from env.core.types import UnitKind
from env.world import Lane

ADJACENT_DANGER_MULTIPLIER = 0.5
DANGER_TOLERANCE = 1e-9


@dataclass
class ThreatReport:
    """
    Per-column scores for one lane.

    Attributes:
        danger: Accumulated tower health per column (with neighbour bleed)
        interest: Number of friendly soldiers per column
        lowest_danger: Lowest value reached by any column a tower touched;
            math.inf when the scan saw no tower
    """
    danger: List[float]
    interest: List[float]
    lowest_danger: float = math.inf

    @property
    def width(self) -> int:
        return len(self.danger)

    def is_safest(self, x: int) -> bool:
        """True if column x carries the lowest recorded danger."""
        return abs(self.danger[x] - self.lowest_danger) <= DANGER_TOLERANCE


def scan_threats(
    lane: Lane,
    adjacent_multiplier: float = ADJACENT_DANGER_MULTIPLIER,
) -> ThreatReport:
    """
    Score every column of an enemy lane.

    Walks even columns across the buildable band. Each tower adds its
    health to its column and `health * adjacent_multiplier` to each
    existing neighbour; each soldier adds 1 to its column's interest.

    Args:
        lane: The lane soldiers will be spawned into
        adjacent_multiplier: Share of a tower's health charged to neighbours

    Returns:
        A fresh ThreatReport
    """
    report = ThreatReport(
        danger=[0.0] * lane.width,
        interest=[0.0] * lane.width,
    )

    for x in range(0, lane.width, 2):
        for y in range(lane.buildable_height):
            unit = lane.cell_at(x, lane.translate_row(y))
            if unit is None:
                continue

            if unit.kind == UnitKind.TOWER:
                _add_danger(report, x, unit.health)
                if x - 1 >= 0:
                    _add_danger(report, x - 1, unit.health * adjacent_multiplier)
                if x + 1 < lane.width:
                    _add_danger(report, x + 1, unit.health * adjacent_multiplier)
            elif unit.kind == UnitKind.SOLDIER:
                report.interest[x] += 1

    return report


def _add_danger(report: ThreatReport, x: int, amount: float) -> None:
    report.danger[x] += amount
    if report.danger[x] < report.lowest_danger:
        report.lowest_danger = report.danger[x]
