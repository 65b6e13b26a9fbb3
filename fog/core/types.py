"""
Core type definitions for the common vision engine.

This module contains the closed vocabularies (terrain, units, officers,
powers, countries) and the small immutable values built from them.
No vision logic lives here, only the per-kind lookup tables.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple
from dataclasses import dataclass

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Cell index into the flat, row-major tile array:
# - index = row * width + col
# - Row 0 is the TOP row of the map
CellIndex = int


# ============================================================================
# TERRAIN
# ============================================================================

class TileKind(Enum):
    """Terrain variants a map cell can hold."""
    PLAIN = "plain"
    MOUNTAIN = "mountain"
    FOREST = "forest"
    RIVER = "river"
    ROAD = "road"
    BRIDGE = "bridge"
    SEA = "sea"
    SHOAL = "shoal"
    REEF = "reef"
    CITY = "city"
    BASE = "base"
    AIRPORT = "airport"
    HARBOUR = "harbour"
    HEADQUARTERS = "headquarters"
    PIPE = "pipe"
    SILO = "silo"
    COMMUNICATIONS_TOWER = "communications_tower"
    LABORATORY = "laboratory"

    def __str__(self) -> str:
        return self.value

    @property
    def conceals_units(self) -> bool:
        """True if units standing here are hidden from non-adjacent observers."""
        return self in _CONCEALING_TILES

    @property
    def icon(self) -> str:
        """Single character used by ASCII map dumps."""
        return _TILE_ICONS.get(self, ".")


_CONCEALING_TILES = frozenset({TileKind.FOREST, TileKind.REEF})

_TILE_ICONS: Dict[TileKind, str] = {
    TileKind.MOUNTAIN: "^",
    TileKind.FOREST: "T",
    TileKind.RIVER: "~",
    TileKind.SEA: "~",
    TileKind.REEF: "%",
    TileKind.CITY: "C",
    TileKind.BASE: "B",
    TileKind.AIRPORT: "A",
    TileKind.HARBOUR: "P",
    TileKind.HEADQUARTERS: "H",
}


# ============================================================================
# UNITS
# ============================================================================

class UnitKind(Enum):
    """All unit variants that can appear on the map."""
    ANTI_AIR = "anti_air"
    APC = "apc"
    ARTILLERY = "artillery"
    BATTLE_COPTER = "battle_copter"
    BATTLESHIP = "battleship"
    BLACK_BOAT = "black_boat"
    BLACK_BOMB = "black_bomb"
    BOMBER = "bomber"
    CARRIER = "carrier"
    CRUISER = "cruiser"
    FIGHTER = "fighter"
    INFANTRY = "infantry"
    LANDER = "lander"
    MEDIUM_TANK = "medium_tank"
    MECH = "mech"
    MEGA_TANK = "mega_tank"
    MISSILE = "missile"
    NEO_TANK = "neo_tank"
    PIPE_RUNNER = "pipe_runner"
    RECON = "recon"
    ROCKET = "rocket"
    STEALTH = "stealth"
    SUBMARINE = "submarine"
    TRANSPORT_COPTER = "transport_copter"
    TANK = "tank"

    def __str__(self) -> str:
        return self.value

    @property
    def vision(self) -> int:
        """Base vision range (Manhattan distance) of this unit kind."""
        return UNIT_VISION[self]


UNIT_VISION: Dict[UnitKind, int] = {
    UnitKind.ANTI_AIR: 2,
    UnitKind.APC: 1,
    UnitKind.ARTILLERY: 1,
    UnitKind.BATTLE_COPTER: 3,
    UnitKind.BATTLESHIP: 2,
    UnitKind.BLACK_BOAT: 1,
    UnitKind.BLACK_BOMB: 1,
    UnitKind.BOMBER: 2,
    UnitKind.CARRIER: 4,
    UnitKind.CRUISER: 3,
    UnitKind.FIGHTER: 2,
    UnitKind.INFANTRY: 2,
    UnitKind.LANDER: 1,
    UnitKind.MEDIUM_TANK: 1,
    UnitKind.MECH: 2,
    UnitKind.MEGA_TANK: 1,
    UnitKind.MISSILE: 5,
    UnitKind.NEO_TANK: 1,
    UnitKind.PIPE_RUNNER: 4,
    UnitKind.RECON: 5,
    UnitKind.ROCKET: 1,
    UnitKind.STEALTH: 4,
    UnitKind.SUBMARINE: 5,
    UnitKind.TRANSPORT_COPTER: 2,
    UnitKind.TANK: 3,
}


# ============================================================================
# OFFICERS & POWERS
# ============================================================================

class PowerKind(Enum):
    """Power level a player's officer is currently using."""
    NONE = "none"
    NORMAL = "normal"
    SUPER = "super"

    def __str__(self) -> str:
        return self.value


class OfficerKind(Enum):
    """Commanding officer identities a player can pick."""
    ANDY = "andy"
    HACHI = "hachi"
    JAKE = "jake"
    MAX = "max"
    NELL = "nell"
    RACHEL = "rachel"
    SAMI = "sami"
    COLIN = "colin"
    GRIT = "grit"
    OLAF = "olaf"
    SASHA = "sasha"
    DRAKE = "drake"
    EAGLE = "eagle"
    JAVIER = "javier"
    JESS = "jess"
    GRIMM = "grimm"
    KANBEI = "kanbei"
    SENSEI = "sensei"
    SONJA = "sonja"
    ADDER = "adder"
    FLAK = "flak"
    HAWKE = "hawke"
    JUGGER = "jugger"
    KINDLE = "kindle"
    KOAL = "koal"
    LASH = "lash"
    STURM = "sturm"
    VON_BOLT = "von_bolt"

    def __str__(self) -> str:
        return self.value

    def vision_modifier(self, power: PowerKind) -> VisionModifier:
        """Look up the passive vision effect of this officer at a power level."""
        return OFFICER_VISION_MODIFIERS.get((self, power), NO_VISION_MODIFIER)


@dataclass(frozen=True)
class VisionModifier:
    """
    Passive vision effect granted by an officer.

    Attributes:
        range_bonus: Extra cells added to every owned unit's vision range
        reveals_concealed: If True, concealing terrain (forest, reef) does
            not hide units from this player's extended range
    """
    range_bonus: int = 0
    reveals_concealed: bool = False


NO_VISION_MODIFIER = VisionModifier()

# Officers without an entry here have no passive vision effect.
OFFICER_VISION_MODIFIERS: Dict[Tuple[OfficerKind, PowerKind], VisionModifier] = {
    (OfficerKind.SONJA, PowerKind.NONE): VisionModifier(range_bonus=1, reveals_concealed=False),
    (OfficerKind.SONJA, PowerKind.NORMAL): VisionModifier(range_bonus=2, reveals_concealed=True),
    (OfficerKind.SONJA, PowerKind.SUPER): VisionModifier(range_bonus=2, reveals_concealed=True),
}


# ============================================================================
# COUNTRIES
# ============================================================================

class CountryKind(Enum):
    """Cosmetic army colour of a player slot. Not used by vision."""
    ORANGE_STAR = "orange_star"
    BLUE_MOON = "blue_moon"
    GREEN_EARTH = "green_earth"
    YELLOW_COMET = "yellow_comet"
    BLACK_HOLE = "black_hole"
    GREY_SKY = "grey_sky"
    BROWN_DESERT = "brown_desert"
    AMBER_BLAZE = "amber_blaze"
    JADE_SUN = "jade_sun"
    PINK_COSMOS = "pink_cosmos"
    TEAL_GALAXY = "teal_galaxy"
    PURPLE_LIGHTNING = "purple_lightning"
    ACID_RAIN = "acid_rain"
    WHITE_NOVA = "white_nova"

    def __str__(self) -> str:
        return self.value.replace("_", " ").title()


# ============================================================================
# SNAPSHOT VALIDATION
# ============================================================================

@dataclass
class StateValidation:
    """
    Structured result of one snapshot consistency check.

    Vision queries never fail on an inconsistent snapshot; they simply
    ignore what they cannot resolve. These results let the owning
    collaborator find out what was ignored.

    Attributes:
        valid: Whether the check passed
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "UNIT_OUT_OF_BOUNDS": A unit is keyed by an index off the map
        - "UNKNOWN_PLAYER": A unit's owner has no player slot
        - "UNKNOWN_TEAM_MEMBER": A team lists a player index with no slot
        - "PLAYER_IN_MULTIPLE_TEAMS": A player index appears in several teams
        - "UNASSIGNED_PLAYER": A player slot belongs to no team
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> StateValidation:
        """Create a validation success result."""
        return StateValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> StateValidation:
        """Create a validation failure result."""
        return StateValidation(valid=False, error_code=error_code, message=message)
