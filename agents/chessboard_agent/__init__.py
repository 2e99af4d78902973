"""
Chessboard strategy: checkerboard tower placement plus threat-based lane selection.
"""

from .chessboard_agent import ChessboardConfig, ChessboardStrategy
from .lane_selector import select_lane
from .placement import checkerboard_sites, deploy_towers, first_open_site
from .threat import ThreatReport, scan_threats

__all__ = [
    "ChessboardConfig",
    "ChessboardStrategy",
    "ThreatReport",
    "checkerboard_sites",
    "deploy_towers",
    "first_open_site",
    "scan_threats",
    "select_lane",
]
