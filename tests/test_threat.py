import math

from agents.chessboard_agent import scan_threats
from env.core.types import Team
from env.entities import Unit
from env.world import Lane


def test_single_tower_bleeds_half_into_neighbours():
    lane = Lane(8, 10, 2)
    lane.place(4, lane.translate_row(3), Unit.tower(Team.RED, health=10))

    report = scan_threats(lane)

    assert report.danger == [0, 0, 0, 5, 10, 5, 0, 0]
    assert report.interest == [0] * 8
    assert report.lowest_danger == 5


def test_edge_towers_only_bleed_inwards():
    lane = Lane(7, 10, 2)
    lane.place(0, 9, Unit.tower(Team.RED, health=8))
    lane.place(6, 9, Unit.tower(Team.RED, health=8))

    report = scan_threats(lane)

    assert report.danger == [8, 4, 0, 0, 0, 4, 8]


def test_overlapping_bleed_accumulates():
    lane = Lane(8, 10, 2)
    lane.place(2, 9, Unit.tower(Team.RED, health=10))
    lane.place(4, 9, Unit.tower(Team.RED, health=10))

    report = scan_threats(lane)

    assert report.danger == [0, 5, 10, 10, 10, 5, 0, 0]
    assert report.lowest_danger == 5


def test_soldiers_raise_interest_only():
    lane = Lane(8, 10, 2)
    lane.place(2, 5, Unit.soldier(Team.BLUE))
    lane.place(2, 6, Unit.soldier(Team.BLUE))
    lane.place(6, 9, Unit.soldier(Team.BLUE))

    report = scan_threats(lane)

    assert report.interest == [0, 0, 2, 0, 0, 0, 1, 0]
    assert report.danger == [0] * 8
    assert report.lowest_danger == math.inf


def test_odd_columns_and_safety_zone_are_not_scanned():
    lane = Lane(8, 10, 2)
    lane.place(3, 9, Unit.tower(Team.RED))
    lane.place(0, 1, Unit.tower(Team.RED))
    lane.place(2, 0, Unit.soldier(Team.BLUE))

    report = scan_threats(lane)

    assert report.danger == [0] * 8
    assert report.interest == [0] * 8
    assert report.lowest_danger == math.inf


def test_adjacent_multiplier_is_tunable():
    lane = Lane(5, 4, 0)
    lane.place(2, 0, Unit.tower(Team.RED, health=10))

    report = scan_threats(lane, adjacent_multiplier=0.25)

    assert report.danger == [0, 2.5, 10, 2.5, 0]
