"""
Common vision engine for grid wargames.

Usage:
    from fog import GameState, common_vision

    state = GameState.from_json(filepath="snapshot.json")
    visible = common_vision(state)
"""

from .core import ConvergenceError, CountryKind, OfficerKind, PowerKind, TileKind, UnitKind
from .world import GameState, Grid, PlayerSlot, TeamVisionTable, UnitState
from .mechanics import CommonVisionResult, CommonVisionSolver, SensorSystem, common_vision

__all__ = [
    "ConvergenceError",
    "CountryKind",
    "OfficerKind",
    "PowerKind",
    "TileKind",
    "UnitKind",
    "GameState",
    "Grid",
    "PlayerSlot",
    "TeamVisionTable",
    "UnitState",
    "CommonVisionResult",
    "CommonVisionSolver",
    "SensorSystem",
    "common_vision",
]
