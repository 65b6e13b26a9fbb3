"""
SensorSystem - Per-unit sight and per-team aggregation.

This module handles:
- Resolving the vision modifier of a unit's owner
- Computing the cells a single unit reveals
- Merging every unit's reveals into a TeamVisionTable

Sight rules:
- Adjacent cells (distance <= 1) are ALWAYS revealed, even when they are
  concealing terrain or hold a stealthed unit
- Beyond adjacency, cells holding a stealthed unit are never revealed
- Beyond adjacency, concealing terrain is revealed only if the owner's
  officer modifier says so
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Mapping, Optional, Set, Tuple

from ..core.types import CellIndex, NO_VISION_MODIFIER, VisionModifier
from ..world.team_view import TeamVisionTable

if TYPE_CHECKING:
    from ..world.state import GameState, UnitState

# Point-blank detection distance
ADJACENT = 1


class SensorSystem:
    """
    Stateless resolver for unit vision.

    All state comes in through the GameState snapshot; nothing is cached
    between calls.

    Usage:
        sensors = SensorSystem()
        owner, cells = sensors.vision_from_tiles(state, location)
        table = sensors.vision_for_units(state, state.units)
    """

    def vision_modifier(self, state: GameState, player: int) -> VisionModifier:
        """
        Get the passive vision effect of a player's officer.

        Args:
            state: Snapshot holding the player slots
            player: Player index

        Returns:
            The officer's modifier at its current power, or no modifier
            when the player has no slot
        """
        slot = state.player_slot(player)
        if slot is None:
            return NO_VISION_MODIFIER
        return slot.officer.vision_modifier(slot.power)

    def vision_from_tiles(
            self,
            state: GameState,
            location: CellIndex
    ) -> Optional[Tuple[int, Set[CellIndex]]]:
        """
        Compute the cells revealed by the unit standing on a cell.

        Args:
            state: Snapshot to read
            location: Cell index of the observing unit

        Returns:
            (owning player index, revealed cells), or None if no unit
            stands on `location`
        """
        unit = state.unit_at(location)
        if unit is None:
            return None

        modifier = self.vision_modifier(state, unit.player)
        vision_range = unit.kind.vision + modifier.range_bonus

        revealed = state.grid.neighbors(location, ADJACENT)

        for cell in state.grid.neighbors(location, vision_range):
            occupant = state.unit_at(cell)
            if occupant is not None and occupant.stealthed:
                continue

            if state.tiles[cell].conceals_units and not modifier.reveals_concealed:
                continue

            revealed.add(cell)

        return unit.player, revealed

    def vision_for_units(
            self,
            state: GameState,
            units: Mapping[CellIndex, UnitState]
    ) -> TeamVisionTable:
        """
        Merge the vision of a set of units into a per-team table.

        `units` is usually a pruned working copy of `state.units`; only its
        keys are used as observer locations, unit details still come from
        the snapshot.

        Args:
            state: Snapshot to read
            units: Cell index -> unit of the observers to include

        Returns:
            TeamVisionTable shaped (state.cell_count x state.team_count)
        """
        player_to_team = state.player_to_team()
        table = TeamVisionTable(state.cell_count, state.team_count)

        for location in units:
            sight = self.vision_from_tiles(state, location)
            if sight is None:
                continue

            player, cells = sight
            team = player_to_team.get(player)
            if team is None:
                continue

            for cell in cells:
                table.record(cell, team)

        return table
