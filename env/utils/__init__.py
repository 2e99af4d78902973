"""
Utility functions and helpers for the Lane Defense environment.
"""

from .id_generator import IDGenerator

__all__ = [
    "IDGenerator",
]
