"""
GameState - Immutable snapshot consumed by the vision engine.

The snapshot is built and owned by an external collaborator (map loader,
match server, replay tool). The engine only reads it:
- Terrain of every cell (flat, row-major)
- Which unit stands on which cell
- Officer and power of every player slot
- The team partition of player slots
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from .grid import Grid
from ..core.types import CellIndex, CountryKind, OfficerKind, PowerKind, TileKind, UnitKind
from ..core.validation import StateValidation, validate_game_state


@dataclass(frozen=True)
class UnitState:
    """
    A unit occupying one cell.

    Attributes:
        player: Index into GameState.players of the owning player
        stealthed: If True, only adjacent observers can reveal it
        kind: Unit variant (determines base vision)
    """
    player: int
    stealthed: bool
    kind: UnitKind

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "player": self.player,
            "stealthed": self.stealthed,
            "kind": self.kind.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UnitState:
        """Deserialize from a dict produced by to_dict()."""
        return cls(
            player=int(data["player"]),
            stealthed=bool(data.get("stealthed", False)),
            kind=UnitKind[data["kind"]],
        )


@dataclass(frozen=True)
class PlayerSlot:
    """One seat at the table: army colour, officer and current power."""
    country: CountryKind
    officer: OfficerKind
    power: PowerKind = PowerKind.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "country": self.country.name,
            "officer": self.officer.name,
            "power": self.power.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PlayerSlot:
        """Deserialize from a dict produced by to_dict()."""
        return cls(
            country=CountryKind[data["country"]],
            officer=OfficerKind[data["officer"]],
            power=PowerKind[data.get("power", PowerKind.NONE.name)],
        )


@dataclass(frozen=True)
class GameState:
    """
    Read-only snapshot of everything vision depends on.

    Collections passed in are copied into immutable containers, so the
    caller may keep mutating its own lists and dicts afterwards.

    Attributes:
        tiles: Terrain per cell, row-major from the top-left
        width: Map width in cells
        height: Map height in cells
        units: Cell index -> unit standing there
        players: Player slots, addressed by player index
        teams: Partition of player indices into teams
    """
    tiles: Tuple[TileKind, ...]
    width: int
    height: int
    units: Mapping[CellIndex, UnitState] = field(default_factory=dict)
    players: Tuple[PlayerSlot, ...] = ()
    teams: Tuple[FrozenSet[int], ...] = ()

    def __post_init__(self):
        """
        Freeze the collections and check the map shape.

        Raises:
            ValueError: If dimensions are invalid or the tile count does
                not match width * height
        """
        grid = Grid(self.width, self.height)
        tiles = tuple(self.tiles)
        if len(tiles) != grid.size:
            raise ValueError(
                f"Tile count {len(tiles)} does not match map dimensions "
                f"{self.width}x{self.height}"
            )

        # Sorted so iteration order never depends on how the caller built the dict
        units = {int(index): self.units[index] for index in sorted(self.units)}

        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "units", MappingProxyType(units))
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "teams", tuple(frozenset(team) for team in self.teams))
        object.__setattr__(self, "_grid", grid)

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def grid(self) -> Grid:
        """Spatial helper for this map."""
        return self._grid  # type: ignore[attr-defined]

    @property
    def cell_count(self) -> int:
        """Number of cells on the map."""
        return len(self.tiles)

    @property
    def team_count(self) -> int:
        """Number of teams in the partition."""
        return len(self.teams)

    def tile_at(self, index: CellIndex) -> Optional[TileKind]:
        """Terrain at a cell, or None when the index is off the map."""
        if not self.grid.in_bounds(index):
            return None
        return self.tiles[index]

    def unit_at(self, index: CellIndex) -> Optional[UnitState]:
        """Unit standing on a cell, or None when the cell is empty."""
        return self.units.get(index)

    def player_slot(self, player: int) -> Optional[PlayerSlot]:
        """Player slot for an index, or None when no such player exists."""
        if 0 <= player < len(self.players):
            return self.players[player]
        return None

    def player_to_team(self) -> Dict[int, int]:
        """
        Build a player index -> team index lookup.

        If a player is listed in several teams the last one wins;
        validate() reports that case.
        """
        lookup: Dict[int, int] = {}
        for team_index, team in enumerate(self.teams):
            for player in team:
                lookup[player] = team_index
        return lookup

    def with_units(self, units: Mapping[CellIndex, UnitState]) -> GameState:
        """Return a copy of this snapshot with a different unit placement."""
        return GameState(
            tiles=self.tiles,
            width=self.width,
            height=self.height,
            units=dict(units),
            players=self.players,
            teams=self.teams,
        )

    def validate(self, log_problems: bool = False) -> List[StateValidation]:
        """
        Report soft consistency problems of this snapshot.

        See fog.core.validation.validate_game_state().
        """
        return validate_game_state(self, log_problems=log_problems)

    # ========================================================================
    # DEBUG OUTPUT
    # ========================================================================

    def render(self, highlighted: Optional[Iterable[CellIndex]] = None) -> str:
        """
        Render the map as ASCII, one text row per map row.

        Units are drawn as their owner's player index, terrain with its
        icon. Cells outside `highlighted` are drawn as '#' when a
        highlight set is given.
        """
        shown: Optional[Set[CellIndex]] = set(highlighted) if highlighted is not None else None
        rows: List[str] = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                index = self.grid.to_index(x, y)
                if shown is not None and index not in shown:
                    row.append("#")
                elif index in self.units:
                    row.append(str(self.units[index].player % 10))
                else:
                    row.append(self.tiles[index].icon)
            rows.append("".join(row))
        return "\n".join(rows)

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the snapshot to a dictionary.

        Returns:
            JSON-serializable dictionary (cell keys become strings)
        """
        return {
            "map": {
                "width": self.width,
                "height": self.height,
                "tiles": [tile.name for tile in self.tiles],
            },
            "units": {str(index): unit.to_dict() for index, unit in self.units.items()},
            "players": [slot.to_dict() for slot in self.players],
            "teams": [sorted(team) for team in self.teams],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        """
        Deserialize a snapshot from a dictionary.

        Args:
            data: Dictionary from to_dict()

        Returns:
            Reconstructed GameState

        Raises:
            KeyError: If a required key or an enum name is unknown
            ValueError: If the map shape is inconsistent
        """
        map_data = data["map"]
        return cls(
            tiles=tuple(TileKind[name] for name in map_data["tiles"]),
            width=int(map_data["width"]),
            height=int(map_data["height"]),
            units={
                int(index): UnitState.from_dict(unit_data)
                for index, unit_data in data.get("units", {}).items()
            },
            players=tuple(PlayerSlot.from_dict(slot) for slot in data.get("players", [])),
            teams=tuple(frozenset(int(p) for p in team) for team in data.get("teams", [])),
        )

    def to_json(self, filepath: Optional[str] = None, indent: int = 2) -> str:
        """
        Serialize to JSON.

        Args:
            filepath: If provided, write to file
            indent: JSON indentation (default: 2)

        Returns:
            JSON string
        """
        json_str = json.dumps(self.to_dict(), indent=indent, ensure_ascii=True)

        if filepath:
            with open(filepath, 'w') as f:
                f.write(json_str)

        return json_str

    @classmethod
    def from_json(cls, json_str: Optional[str] = None, filepath: Optional[str] = None) -> GameState:
        """
        Deserialize from JSON.

        Args:
            json_str: JSON string to parse
            filepath: If provided, read from file instead

        Returns:
            Reconstructed GameState

        Raises:
            ValueError: If neither json_str nor filepath provided
        """
        if filepath:
            with open(filepath, 'r') as f:
                json_str = f.read()

        if not json_str:
            raise ValueError("Must provide either json_str or filepath")

        data = json.loads(json_str)
        return cls.from_dict(data)

    def __str__(self) -> str:
        """String representation."""
        return (f"GameState({self.width}x{self.height}, units={len(self.units)}, "
                f"players={len(self.players)}, teams={len(self.teams)})")
