"""
Strategy interface and implementations for the Lane Defense environment.

This module provides:
- BaseStrategy: Abstract interface for all strategies
- ChessboardStrategy: Checkerboard defense with threat-based soldier spawning
- IdleStrategy: Do-nothing baseline opponent
"""

from .base_agent import BaseStrategy
from .chessboard_agent import ChessboardConfig, ChessboardStrategy
from .factory import create_strategy_from_spec
from .idle_agent import IdleStrategy
from .registry import STRATEGY_REGISTRY, register_strategy, resolve_strategy_class
from .spec import StrategySpec

__all__ = [
    "BaseStrategy",
    "ChessboardConfig",
    "ChessboardStrategy",
    "IdleStrategy",
    "STRATEGY_REGISTRY",
    "StrategySpec",
    "create_strategy_from_spec",
    "register_strategy",
    "resolve_strategy_class",
]
