from __future__ import annotations

import math

from .threat import ThreatReport


def select_lane(report: ThreatReport, previous_pick: int) -> int:
    """
    Pick the column for the next soldier.

    Among the columns at the lowest danger, the one with the most friendly
    soldiers wins; equal interest goes to the lowest column index. When no
    column sits at the lowest danger (no tower was seen), the previous pick
    is kept.
    """
    best_interest = -math.inf
    best_x = previous_pick

    for x in range(report.width):
        if not report.is_safest(x):
            continue
        if report.interest[x] > best_interest:
            best_interest = report.interest[x]
            best_x = x

    return best_x
