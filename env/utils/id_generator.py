"""
ID generation utilities for units.

Each match owns its own generator so unit IDs are reproducible per match.
"""

import itertools
from typing import Iterator


class IDGenerator:
    """
    Generates unique, sequential IDs for units bought during a match.

    This is a simple wrapper around itertools.count that makes
    testing easier and provides a clear contract.
    """

    def __init__(self, start: int = 1):
        """
        Initialize the ID generator.

        Args:
            start: The first ID to generate (default: 1)
        """
        self._counter: Iterator[int] = itertools.count(start)

    def next_id(self) -> int:
        """Generate the next unique ID."""
        return next(self._counter)
