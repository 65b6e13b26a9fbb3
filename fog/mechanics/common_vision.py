"""
Common vision - cells every team sees at the same time.

A unit only counts as a vision source while its own cell is visible to
all teams, yet that unit may be what makes other cells (and units)
visible in the first place. The solver resolves this cycle by pruning:

1. Start with every unit and every cell
2. Aggregate team vision over the remaining units
3. Drop every cell not seen by all teams, and the unit standing on it
4. Repeat until a pass drops no unit

Each pass that does not converge removes at least one unit, so the loop
ends within (unit count + 1) passes. Hitting that bound means the
invariant is broken; it is logged and reported rather than trusted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Set

from infra.logger import get_logger
from ..core.errors import ConvergenceError
from ..core.types import CellIndex
from .sensors import SensorSystem

if TYPE_CHECKING:
    from infra.settings import VisionSettings
    from ..world.state import GameState, UnitState

log = get_logger(__name__)


@dataclass
class CommonVisionResult:
    """
    Outcome of a common vision query.

    Attributes:
        cells: Cells visible to every team (empty if not converged)
        passes: Aggregation passes run
        converged: False only when the pass bound was hit
        removed_units: Cells whose units were pruned as vision sources
    """
    cells: Set[CellIndex]
    passes: int
    converged: bool
    removed_units: Set[CellIndex] = field(default_factory=set)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict."""
        return {
            "cells": sorted(self.cells),
            "passes": self.passes,
            "converged": self.converged,
            "removed_units": sorted(self.removed_units),
        }


class CommonVisionSolver:
    """
    Fixed-point solver for cells simultaneously visible to all teams.

    The solver keeps no state between queries; `strict` only decides how
    the (unreachable) pass-bound guard is surfaced.

    Usage:
        solver = CommonVisionSolver()
        visible = solver.solve(state).cells
    """

    def __init__(self, sensors: Optional[SensorSystem] = None, strict: bool = False):
        """
        Initialize the solver.

        Args:
            sensors: Sight resolver to use (default: a new SensorSystem)
            strict: Raise ConvergenceError instead of returning an empty
                result when the pass bound is hit
        """
        self._sensors = sensors or SensorSystem()
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: VisionSettings) -> CommonVisionSolver:
        """Build a solver honouring `settings.strict_convergence`."""
        return cls(strict=settings.strict_convergence)

    def solve(self, state: GameState) -> CommonVisionResult:
        """
        Compute the cells visible to every team.

        Args:
            state: Snapshot to read (never modified)

        Returns:
            CommonVisionResult with the visible cells and pass diagnostics

        Raises:
            ConvergenceError: Only in strict mode, if the pass bound is hit
        """
        visible_units: Dict[CellIndex, UnitState] = dict(state.units)
        visible_tiles: Set[CellIndex] = set(range(state.cell_count))
        removed_units: Set[CellIndex] = set()
        max_passes = len(state.units) + 1

        for passes in range(1, max_passes + 1):
            table = self._sensors.vision_for_units(state, visible_units)

            units_removed = False
            for cell in range(state.cell_count):
                if table.seen_by_all(cell):
                    continue
                visible_tiles.discard(cell)
                if visible_units.pop(cell, None) is not None:
                    removed_units.add(cell)
                    units_removed = True

            log.debug(
                "Common vision pass %d: %d cells, %d units remain",
                passes, len(visible_tiles), len(visible_units),
            )

            # Aggregation only depends on the unit set, so an unchanged
            # unit set means the next pass would prune nothing new.
            if not units_removed:
                log.debug("Common vision converged after %d passes", passes)
                return CommonVisionResult(
                    cells=visible_tiles,
                    passes=passes,
                    converged=True,
                    removed_units=removed_units,
                )

        log.error(
            "Common vision did not converge within %d passes for %s; returning no cells",
            max_passes, state,
        )
        if self.strict:
            raise ConvergenceError(max_passes, len(visible_units))
        return CommonVisionResult(
            cells=set(),
            passes=max_passes,
            converged=False,
            removed_units=removed_units,
        )


def common_vision(state: GameState) -> Set[CellIndex]:
    """
    Cells simultaneously visible to every team in a snapshot.

    Args:
        state: Snapshot to read

    Returns:
        Set of cell indices safe to show without leaking any team's view
    """
    return CommonVisionSolver().solve(state).cells
