"""
Grid - Spatial logic for the vision engine.

The Grid handles:
- Coordinate validation
- Cell index <-> (x, y) conversions
- Manhattan neighborhoods

Coordinate System:
- Cells are stored in a flat, row-major array
- X increases to the RIGHT (column)
- Y increases DOWNWARD (row)
- Origin (0, 0) is at TOP-LEFT, index = y * width + x
"""

from __future__ import annotations
from typing import Set, Tuple

from ..core.types import CellIndex


class Grid:
    """
    A bounded rectangular grid addressed by flat cell indices.

    Provides spatial queries without game logic or state.

    Attributes:
        width: Grid width (X dimension)
        height: Grid height (Y dimension)
    """

    def __init__(self, width: int, height: int):
        """
        Initialize a grid.

        Args:
            width: Grid width (must be positive)
            height: Grid height (must be positive)

        Raises:
            ValueError: If dimensions are invalid
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive: {width}x{height}")

        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        """Number of cells on the grid."""
        return self.width * self.height

    def in_bounds(self, index: CellIndex) -> bool:
        """Check if a cell index addresses a cell on the grid."""
        return 0 <= index < self.size

    def to_pos(self, index: CellIndex) -> Tuple[int, int]:
        """
        Decompose a cell index into (x, y).

        Works for indices past the end of the grid too; the resulting
        row is simply beyond the last one.
        """
        return index % self.width, index // self.width

    def to_index(self, x: int, y: int) -> CellIndex:
        """Compose (x, y) back into a flat cell index."""
        return y * self.width + x

    def manhattan_distance(self, a: CellIndex, b: CellIndex) -> int:
        """
        Calculate Manhattan (taxicab) distance between two cells.

        Args:
            a: First cell index
            b: Second cell index

        Returns:
            Manhattan distance as an integer
        """
        ax, ay = self.to_pos(a)
        bx, by = self.to_pos(b)
        return abs(ax - bx) + abs(ay - by)

    def neighbors(self, origin: CellIndex, distance: int) -> Set[CellIndex]:
        """
        Get every on-grid cell within a Manhattan distance of an origin.

        The origin itself need not be on the grid: it is decomposed into
        (x, y) first and the scan window is clipped afterwards, so an index
        just past the end still has neighbors on the last row while one far
        past the end has none.

        Args:
            origin: Center cell index
            distance: Maximum Manhattan distance (inclusive)

        Returns:
            Set of cell indices, including the origin when it is on the grid
        """
        if distance < 0:
            return set()

        x, y = self.to_pos(origin)
        neighbors: Set[CellIndex] = set()

        for h in range(max(0, y - distance), min(self.height, y + distance + 1)):
            dy = abs(h - y)
            for w in range(max(0, x - distance), min(self.width, x + distance + 1)):
                if abs(w - x) + dy <= distance:
                    neighbors.add(self.to_index(w, h))

        return neighbors

    def __str__(self) -> str:
        """String representation."""
        return f"Grid({self.width}x{self.height})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Grid(width={self.width}, height={self.height})"
