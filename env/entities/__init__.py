"""
Unit definitions for the Lane Defense environment.

This module exports:
- Unit (tagged TOWER / SOLDIER variant)
- DEFAULT_TOWER_HEALTH
"""

from .unit import Unit, DEFAULT_TOWER_HEALTH

__all__ = [
    "Unit",
    "DEFAULT_TOWER_HEALTH",
]
