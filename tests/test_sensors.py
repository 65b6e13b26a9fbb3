from pathlib import Path
import sys

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from fog.core.types import OfficerKind, PowerKind, TileKind, UnitKind, VisionModifier
from fog.mechanics import SensorSystem
from tests.helpers import (
    NO_BONUS,
    SONJA_NO_POWER,
    SONJA_POWERED,
    forest_corners,
    hq_corners,
    make_state,
)

sensors = SensorSystem()


# -- Officer modifiers --


@pytest.mark.parametrize("power,expected", [
    (PowerKind.NONE, VisionModifier(1, False)),
    (PowerKind.NORMAL, VisionModifier(2, True)),
    (PowerKind.SUPER, VisionModifier(2, True)),
])
def test_sonja_vision_modifier(power, expected):
    assert OfficerKind.SONJA.vision_modifier(power) == expected


def test_other_officers_have_no_vision_modifier():
    for officer in OfficerKind:
        if officer is OfficerKind.SONJA:
            continue
        for power in PowerKind:
            assert officer.vision_modifier(power) == VisionModifier(0, False)


def test_unknown_player_gets_no_modifier():
    state = hq_corners(UnitKind.INFANTRY, NO_BONUS)
    assert sensors.vision_modifier(state, 7) == VisionModifier(0, False)


def test_every_unit_kind_has_positive_vision():
    assert all(kind.vision > 0 for kind in UnitKind)


def test_only_forest_and_reef_conceal():
    concealing = {tile for tile in TileKind if tile.conceals_units}
    assert concealing == {TileKind.FOREST, TileKind.REEF}


# -- vision_from_tiles --


def test_simple_2x2():
    state = hq_corners(UnitKind.INFANTRY, NO_BONUS)

    assert sensors.vision_from_tiles(state, 0) == (0, {0, 1, 2, 3})
    assert sensors.vision_from_tiles(state, 1) is None
    assert sensors.vision_from_tiles(state, 2) is None
    assert sensors.vision_from_tiles(state, 3) == (1, {0, 1, 2, 3})


def test_artillery_without_bonus_sees_adjacent_only():
    state = hq_corners(UnitKind.ARTILLERY, NO_BONUS)

    assert sensors.vision_from_tiles(state, 0) == (0, {0, 1, 2})
    assert sensors.vision_from_tiles(state, 3) == (1, {1, 2, 3})


def test_sonja_2x2():
    state = hq_corners(UnitKind.ARTILLERY, SONJA_NO_POWER)

    assert sensors.vision_from_tiles(state, 0) == (0, {0, 1, 2, 3})
    assert sensors.vision_from_tiles(state, 1) is None
    assert sensors.vision_from_tiles(state, 2) is None
    assert sensors.vision_from_tiles(state, 3) == (1, {0, 1, 2, 3})


def test_sonja_2x2_forest_no_power():
    state = forest_corners(SONJA_NO_POWER)

    assert sensors.vision_from_tiles(state, 0) == (0, {0, 1, 2})
    assert sensors.vision_from_tiles(state, 1) is None
    assert sensors.vision_from_tiles(state, 2) is None
    assert sensors.vision_from_tiles(state, 3) == (1, {1, 2, 3})


def test_sonja_2x2_forest_power():
    state = forest_corners(SONJA_POWERED)

    assert sensors.vision_from_tiles(state, 0) == (0, {0, 1, 2, 3})
    assert sensors.vision_from_tiles(state, 3) == (1, {0, 1, 2, 3})


def test_out_of_bounds_location_returns_none():
    state = hq_corners(UnitKind.INFANTRY, NO_BONUS)
    assert sensors.vision_from_tiles(state, 4) is None
    assert sensors.vision_from_tiles(state, 1000) is None


def test_stealthed_unit_hidden_beyond_adjacency():
    # 1x4 strip: recon at 0, stealthed enemy at 3 (distance 3)
    state = make_state(
        [TileKind.PLAIN] * 4, 4, 1,
        units={0: (0, UnitKind.RECON), 3: (1, UnitKind.STEALTH, True)},
        officers=NO_BONUS,
        teams=[[0], [1]],
    )
    _, cells = sensors.vision_from_tiles(state, 0)
    assert cells == {0, 1, 2}


def test_stealthed_unit_revealed_when_adjacent():
    state = make_state(
        [TileKind.PLAIN] * 4, 4, 1,
        units={0: (0, UnitKind.RECON), 1: (1, UnitKind.SUBMARINE, True)},
        officers=NO_BONUS,
        teams=[[0], [1]],
    )
    _, cells = sensors.vision_from_tiles(state, 0)
    assert cells == {0, 1, 2, 3}


def test_concealing_terrain_hidden_beyond_adjacency():
    tiles = [TileKind.PLAIN, TileKind.PLAIN, TileKind.REEF, TileKind.FOREST, TileKind.PLAIN]
    state = make_state(
        tiles, 5, 1,
        units={0: (0, UnitKind.RECON)},
        officers=NO_BONUS[:1],
        teams=[[0]],
    )
    _, cells = sensors.vision_from_tiles(state, 0)
    assert cells == {0, 1, 4}


def test_forest_override_reveals_concealing_terrain():
    tiles = [TileKind.PLAIN, TileKind.PLAIN, TileKind.REEF, TileKind.FOREST, TileKind.PLAIN]
    state = make_state(
        tiles, 5, 1,
        units={0: (0, UnitKind.ARTILLERY)},
        officers=[(OfficerKind.SONJA, PowerKind.SUPER)],
        teams=[[0]],
    )
    # Artillery 1 + Sonja 2 = range 3
    _, cells = sensors.vision_from_tiles(state, 0)
    assert cells == {0, 1, 2, 3}


def test_forest_override_does_not_break_stealth():
    state = make_state(
        [TileKind.PLAIN] * 5, 5, 1,
        units={0: (0, UnitKind.INFANTRY), 3: (1, UnitKind.STEALTH, True)},
        officers=[(OfficerKind.SONJA, PowerKind.NORMAL), (OfficerKind.ANDY, PowerKind.NONE)],
        teams=[[0], [1]],
    )
    _, cells = sensors.vision_from_tiles(state, 0)
    assert cells == {0, 1, 2, 4}


def test_adjacent_cells_always_revealed():
    # Everything around the unit is forest with stealthed units on it
    state = make_state(
        [TileKind.FOREST] * 9, 3, 3,
        units={
            4: (0, UnitKind.ARTILLERY),
            1: (1, UnitKind.STEALTH, True),
            3: (1, UnitKind.SUBMARINE, True),
            5: (1, UnitKind.INFANTRY),
            7: (1, UnitKind.MECH, True),
        },
        officers=NO_BONUS,
        teams=[[0], [1]],
    )
    _, cells = sensors.vision_from_tiles(state, 4)
    assert cells == state.grid.neighbors(4, 1)


def test_unit_owned_by_unknown_player_uses_base_range():
    state = make_state(
        [TileKind.PLAIN] * 5, 5, 1,
        units={0: (9, UnitKind.INFANTRY)},
        officers=NO_BONUS,
        teams=[[0], [1]],
    )
    assert sensors.vision_from_tiles(state, 0) == (9, {0, 1, 2})


def test_unit_keyed_off_map_still_sees_nearby_cells():
    # Index 4 sits just below cell 2 on a 2x2 map
    state = make_state(
        [TileKind.PLAIN] * 4, 2, 2,
        units={4: (0, UnitKind.ARTILLERY)},
        officers=NO_BONUS[:1],
        teams=[[0]],
    )
    assert sensors.vision_from_tiles(state, 4) == (0, {2})


# -- vision_for_units --


def test_table_shape_is_fixed():
    state = hq_corners(UnitKind.INFANTRY, NO_BONUS)
    table = sensors.vision_for_units(state, {})
    assert len(table) == 4
    assert table.team_count == 2
    assert all(table.teams_seeing(cell) == 0 for cell in range(4))


def test_table_records_each_team():
    state = hq_corners(UnitKind.ARTILLERY, NO_BONUS)
    table = sensors.vision_for_units(state, state.units)

    assert table.team_cells(0) == {0, 1, 2}
    assert table.team_cells(1) == {1, 2, 3}
    assert table.entry(1, 0) == frozenset({1})
    assert table.entry(0, 1) == frozenset()
    assert table.teams_seeing(1) == 2
    assert table.seen_by_all(2)
    assert not table.seen_by_all(0)


def test_table_only_uses_given_units():
    state = hq_corners(UnitKind.ARTILLERY, NO_BONUS)
    table = sensors.vision_for_units(state, {3: state.units[3]})
    assert table.team_cells(0) == set()
    assert table.team_cells(1) == {1, 2, 3}


def test_unassigned_player_contributes_nothing():
    state = make_state(
        [TileKind.PLAIN] * 4, 2, 2,
        units={0: (0, UnitKind.INFANTRY), 3: (1, UnitKind.INFANTRY)},
        officers=NO_BONUS,
        teams=[[0]],
    )
    table = sensors.vision_for_units(state, state.units)
    assert table.team_count == 1
    assert table.team_cells(0) == {0, 1, 2, 3}

    only_unassigned = sensors.vision_for_units(state, {3: state.units[3]})
    assert only_unassigned.team_cells(0) == set()


def test_team_union_of_members():
    state = make_state(
        [TileKind.FOREST] * 4, 2, 2,
        units={
            0: (0, UnitKind.ARTILLERY),
            1: (1, UnitKind.ARTILLERY),
            2: (2, UnitKind.ARTILLERY),
            3: (3, UnitKind.ARTILLERY),
        },
        officers=[
            (OfficerKind.ANDY, PowerKind.NONE),
            (OfficerKind.OLAF, PowerKind.NONE),
            (OfficerKind.DRAKE, PowerKind.NONE),
            (OfficerKind.KANBEI, PowerKind.SUPER),
        ],
        teams=[[0, 2], [1, 3]],
    )
    table = sensors.vision_for_units(state, state.units)
    assert table.team_cells(0) == {0, 1, 2, 3}
    assert table.team_cells(1) == {0, 1, 2, 3}


def test_table_round_trips_through_dict():
    state = hq_corners(UnitKind.ARTILLERY, NO_BONUS)
    table = sensors.vision_for_units(state, state.units)
    data = table.to_dict()
    assert data == {"cell_count": 4, "team_count": 2, "seen": [[0, 1, 2], [1, 2, 3]]}

    restored = type(table).from_dict(data)
    assert restored.to_dict() == data
