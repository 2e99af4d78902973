"""
Lane - One player's grid-shaped battlefield.

The Lane handles:
- Coordinate validation
- Cell occupancy (at most one unit per cell)
- Unit counting per kind
- Coordinate system conversions

Coordinate System (engine):
- X increases to the RIGHT
- Y increases DOWNWARD
- Origin (0, 0) is at TOP-LEFT
- Rows [0, safety_zone_height) form the safety zone where towers cannot be built

Strategies usually reason in "defensive" rows where row 0 is the BOTTOM
edge; use translate_row() to move between the two.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.types import GridPos, UnitKind
from ..entities.unit import Unit


class Lane:
    """
    A 2D lane grid holding units.

    The lane owns every cell and unit. Callers outside the environment only
    read it; units are added through Player purchases.

    Attributes:
        width: Lane width (X dimension)
        height: Lane height (Y dimension)
        safety_zone_height: Number of top rows exempt from tower placement
    """

    def __init__(self, width: int, height: int, safety_zone_height: int = 0):
        """
        Initialize an empty lane.

        Args:
            width: Lane width (must be positive)
            height: Lane height (must be positive)
            safety_zone_height: Rows reserved at the top (0 <= value < height)

        Raises:
            ValueError: If dimensions are invalid
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Lane dimensions must be positive: {width}x{height}")
        if not 0 <= safety_zone_height < height:
            raise ValueError(
                f"Safety zone height must be in [0, {height}): {safety_zone_height}"
            )

        self.width = width
        self.height = height
        self.safety_zone_height = safety_zone_height
        self._cells: List[List[Optional[Unit]]] = [[None] * width for _ in range(height)]

    @property
    def buildable_height(self) -> int:
        """Number of rows (from the defensive edge) where towers may stand."""
        return self.height - self.safety_zone_height

    def in_bounds(self, pos: GridPos) -> bool:
        """
        Check if a position is within lane boundaries.

        Args:
            pos: Position to check (x, y)

        Returns:
            True if position is valid, False otherwise
        """
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def in_safety_zone(self, y: int) -> bool:
        """True if engine row y belongs to the safety zone."""
        return y < self.safety_zone_height

    def translate_row(self, y: int) -> int:
        """
        Convert between defensive rows (0 = bottom) and engine rows (0 = top).

        The mapping is its own inverse.

        Args:
            y: Row in one coordinate system

        Returns:
            The same row in the other coordinate system
        """
        return self.height - y - 1

    def cell_at(self, x: int, y: int) -> Optional[Unit]:
        """
        Get the unit occupying an engine cell.

        Raises:
            IndexError: If (x, y) lies outside the lane
        """
        self._check_bounds(x, y)
        return self._cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) is None

    def place(self, x: int, y: int, unit: Unit) -> bool:
        """
        Put a unit into an empty cell.

        Returns:
            True if placed, False if the cell was already occupied

        Raises:
            IndexError: If (x, y) lies outside the lane
        """
        if self.cell_at(x, y) is not None:
            return False
        self._cells[y][x] = unit
        return True

    def units(self) -> Iterator[Tuple[GridPos, Unit]]:
        """Iterate over ((x, y), unit) for every occupied cell, row by row."""
        for y, row in enumerate(self._cells):
            for x, unit in enumerate(row):
                if unit is not None:
                    yield (x, y), unit

    def unit_count(self, kind: UnitKind) -> int:
        return sum(1 for _, unit in self.units() if unit.kind == kind)

    def tower_count(self) -> int:
        return self.unit_count(UnitKind.TOWER)

    def soldier_count(self) -> int:
        return self.unit_count(UnitKind.SOLDIER)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "width": self.width,
            "height": self.height,
            "safety_zone_height": self.safety_zone_height,
            "units": [
                {"x": x, "y": y, **unit.to_dict()}
                for (x, y), unit in self.units()
            ],
        }

    def render(self) -> str:
        """ASCII view of the lane; safety zone rows are drawn with '~'."""
        lines = []
        for y, row in enumerate(self._cells):
            empty = "~" if self.in_safety_zone(y) else "."
            lines.append("".join(unit.kind.icon if unit else empty for unit in row))
        return "\n".join(lines)

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds((x, y)):
            raise IndexError(f"Cell ({x}, {y}) is outside {self}")

    def __str__(self) -> str:
        """String representation."""
        return f"Lane({self.width}x{self.height})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return (
            f"Lane(width={self.width}, height={self.height}, "
            f"safety_zone_height={self.safety_zone_height})"
        )
