"""
Mechanics module - Vision resolution systems.

This module provides stateless resolvers over a GameState snapshot:
- SensorSystem: Computes what units reveal and merges it per team
- CommonVisionSolver: Prunes down to cells every team sees

All resolvers are stateless - they take a GameState and return results
without modifying it or their own state.
"""

from .sensors import SensorSystem
from .common_vision import CommonVisionSolver, CommonVisionResult, common_vision

__all__ = [
    "SensorSystem",
    "CommonVisionSolver",
    "CommonVisionResult",
    "common_vision",
]
