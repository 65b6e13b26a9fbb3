"""
Example script demonstrating common vision queries.

This shows how to:
1. Load settings and configure logging
2. Build game snapshots
3. Query per-unit sight and per-team vision
4. Compute the cells safe to show every team
"""

from fog import CommonVisionSolver, GameState, PlayerSlot, SensorSystem, UnitState
from fog.core.types import CountryKind, OfficerKind, PowerKind, TileKind, UnitKind
from infra.logger import get_logger
from infra.settings import load_settings

log = get_logger(__name__)


def create_river_crossing() -> GameState:
    """Two armies facing each other over a river with forest cover."""
    P, F, R, C = TileKind.PLAIN, TileKind.FOREST, TileKind.RIVER, TileKind.CITY
    tiles = [
        P, P, F, R, P, P,
        C, P, F, R, F, P,
        P, P, P, R, P, C,
        F, P, P, R, P, P,
    ]
    return GameState(
        tiles=tuple(tiles),
        width=6,
        height=4,
        units={
            7: UnitState(player=0, stealthed=False, kind=UnitKind.INFANTRY),
            13: UnitState(player=0, stealthed=False, kind=UnitKind.RECON),
            10: UnitState(player=1, stealthed=False, kind=UnitKind.TANK),
            16: UnitState(player=1, stealthed=False, kind=UnitKind.MECH),
            22: UnitState(player=1, stealthed=True, kind=UnitKind.STEALTH),
        },
        players=(
            PlayerSlot(CountryKind.ORANGE_STAR, OfficerKind.SONJA, PowerKind.NONE),
            PlayerSlot(CountryKind.BLUE_MOON, OfficerKind.OLAF, PowerKind.NONE),
        ),
        teams=(frozenset({0}), frozenset({1})),
    )


def main():
    """Run the example queries."""
    settings = load_settings()
    settings.apply_logging()

    print("Common Vision Engine - Example")
    print("=" * 60)

    state = create_river_crossing()
    problems = state.validate(log_problems=True)
    print(f"Loaded snapshot: {state} ({len(problems)} problems)")
    print(state.render())
    print()

    # =========================================================================
    # Example 1: What does each unit reveal?
    # =========================================================================
    sensors = SensorSystem()
    for location, unit in state.units.items():
        player, cells = sensors.vision_from_tiles(state, location)
        print(f"  {unit.kind} of player {player} at {location}: {len(cells)} cells")

    # =========================================================================
    # Example 2: Per-team vision
    # =========================================================================
    table = sensors.vision_for_units(state, state.units)
    for team in range(table.team_count):
        print(f"\nTeam {team} sees:")
        print(state.render(table.team_cells(team)))

    # =========================================================================
    # Example 3: Cells safe for a spectator view
    # =========================================================================
    solver = CommonVisionSolver.from_settings(settings)
    result = solver.solve(state)
    log.info("Common vision: %d cells in %d passes", len(result.cells), result.passes)

    print("\nCommon vision:")
    print(state.render(result.cells))
    print(f"\n  Passes: {result.passes}  Converged: {result.converged}")
    print(f"  Units pruned as sources: {sorted(result.removed_units)}")


if __name__ == "__main__":
    main()
