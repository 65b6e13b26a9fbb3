"""
TeamVisionTable - Per-cell, per-team visibility indicator.

The table has one row per map cell and one column per team. Each entry is
the set of cells that team perceives there; a non-empty entry means the
team currently sees that cell. The shape is fixed by the snapshot (cell
count x team count), independent of how many units contribute vision.
"""

from __future__ import annotations
from typing import Any, Dict, FrozenSet, List, Set

from ..core.types import CellIndex


class TeamVisionTable:
    """
    Aggregated visibility of every team over every cell.

    Attributes:
        cell_count: Number of rows (map cells)
        team_count: Number of columns (teams)
    """

    def __init__(self, cell_count: int, team_count: int):
        """
        Initialize an empty table.

        Args:
            cell_count: Number of cells on the map
            team_count: Number of teams in the partition
        """
        self.cell_count = cell_count
        self.team_count = team_count
        self._entries: List[List[Set[CellIndex]]] = [
            [set() for _ in range(team_count)] for _ in range(cell_count)
        ]

    def record(self, cell: CellIndex, team: int) -> None:
        """
        Mark a cell as seen by a team.

        Args:
            cell: Revealed cell index (must be on the map)
            team: Team index of the unit's owner
        """
        self._entries[cell][team].add(cell)

    def entry(self, cell: CellIndex, team: int) -> FrozenSet[CellIndex]:
        """Cells the team perceives at this row (empty when unseen)."""
        return frozenset(self._entries[cell][team])

    def sees(self, cell: CellIndex, team: int) -> bool:
        """Check if a team currently sees a cell."""
        return bool(self._entries[cell][team])

    def teams_seeing(self, cell: CellIndex) -> int:
        """Count the teams with non-empty visibility of a cell."""
        return sum(1 for seen in self._entries[cell] if seen)

    def seen_by_all(self, cell: CellIndex) -> bool:
        """Check if every team sees a cell."""
        return self.teams_seeing(cell) == self.team_count

    def team_cells(self, team: int) -> Set[CellIndex]:
        """All cells a single team sees."""
        return {cell for cell in range(self.cell_count) if self._entries[cell][team]}

    def __len__(self) -> int:
        """Number of rows (cells)."""
        return self.cell_count

    def __str__(self) -> str:
        """String representation."""
        return f"TeamVisionTable({self.cell_count} cells x {self.team_count} teams)"

    def __repr__(self) -> str:
        """Detailed representation."""
        return (f"TeamVisionTable(cell_count={self.cell_count}, "
                f"team_count={self.team_count}, "
                f"seen={[sorted(self.team_cells(t)) for t in range(self.team_count)]})")

    # ========================================================================
    # SERIALIZATION
    # ========================================================================
    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the table to a dictionary.

        Only the cells each team sees are stored; the full table can be
        rebuilt from them together with the shape.

        Returns:
            JSON-serializable dictionary
        """
        return {
            "cell_count": self.cell_count,
            "team_count": self.team_count,
            "seen": [sorted(self.team_cells(team)) for team in range(self.team_count)],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TeamVisionTable:
        """
        Deserialize a table from a dictionary.

        Args:
            data: Dictionary from to_dict()

        Returns:
            Reconstructed TeamVisionTable
        """
        table = cls(data["cell_count"], data["team_count"])
        for team, cells in enumerate(data["seen"]):
            for cell in cells:
                table.record(int(cell), team)
        return table
