"""Snapshot builders shared by the test modules."""

from fog.core.types import CountryKind, OfficerKind, PowerKind, TileKind, UnitKind
from fog.world import GameState, PlayerSlot, UnitState

COUNTRIES = list(CountryKind)


def make_state(tiles, width, height, units=None, officers=None, teams=None):
    """
    Build a GameState.

    units:    {cell: (player, kind)} or {cell: (player, kind, stealthed)}
    officers: [(OfficerKind, PowerKind), ...] one per player
    teams:    [[player, ...], ...]
    """
    unit_states = {}
    for cell, spec in (units or {}).items():
        player, kind = spec[0], spec[1]
        stealthed = spec[2] if len(spec) > 2 else False
        unit_states[cell] = UnitState(player=player, stealthed=stealthed, kind=kind)

    players = [
        PlayerSlot(country=COUNTRIES[i % len(COUNTRIES)], officer=officer, power=power)
        for i, (officer, power) in enumerate(officers or [])
    ]
    return GameState(
        tiles=tuple(tiles),
        width=width,
        height=height,
        units=unit_states,
        players=tuple(players),
        teams=tuple(frozenset(team) for team in (teams or [])),
    )


def hq_corners(kind, officers):
    """2x2 map (HQ, Plain, Plain, HQ) with one `kind` per player on opposite corners."""
    return make_state(
        [TileKind.HEADQUARTERS, TileKind.PLAIN, TileKind.PLAIN, TileKind.HEADQUARTERS],
        2, 2,
        units={0: (0, kind), 3: (1, kind)},
        officers=officers,
        teams=[[0], [1]],
    )


def forest_corners(officers, kind=UnitKind.ARTILLERY):
    """All-forest 2x2 map with one `kind` per player on opposite corners."""
    return make_state(
        [TileKind.FOREST] * 4,
        2, 2,
        units={0: (0, kind), 3: (1, kind)},
        officers=officers,
        teams=[[0], [1]],
    )


NO_BONUS = [(OfficerKind.ANDY, PowerKind.NONE), (OfficerKind.OLAF, PowerKind.NONE)]
SONJA_NO_POWER = [(OfficerKind.SONJA, PowerKind.NONE), (OfficerKind.SONJA, PowerKind.NONE)]
SONJA_POWERED = [(OfficerKind.SONJA, PowerKind.NORMAL), (OfficerKind.SONJA, PowerKind.SUPER)]
