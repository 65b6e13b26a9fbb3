"""
Core types and constants for the common vision engine.
"""

# Instead of from fog.core.types import TileKind, you can do: from fog.core import TileKind
from .types import (
    CellIndex,
    TileKind,
    UnitKind,
    OfficerKind,
    PowerKind,
    CountryKind,
    VisionModifier,
    StateValidation,
)
from .errors import ConvergenceError


__all__ = [
    "CellIndex",
    "TileKind",
    "UnitKind",
    "OfficerKind",
    "PowerKind",
    "CountryKind",
    "VisionModifier",
    "StateValidation",
    "ConvergenceError",
]
