"""
World state for the common vision engine.

This module provides:
- Grid: Spatial logic and geometry
- TeamVisionTable: Per-cell, per-team visibility indicator
- GameState: Immutable snapshot of map, units, players and teams
"""

from .grid import Grid
from .team_view import TeamVisionTable
from .state import GameState, PlayerSlot, UnitState

__all__ = [
    "Grid",
    "TeamVisionTable",
    "GameState",
    "PlayerSlot",
    "UnitState",
]
