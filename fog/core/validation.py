"""
Snapshot consistency checks.

The vision engine tolerates inconsistent snapshots (unknown owners,
unassigned players, units keyed off the map) by ignoring whatever it
cannot resolve. These helpers let the owning collaborator see what
would be ignored before handing a snapshot over.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from infra.logger import get_logger
from .types import StateValidation

if TYPE_CHECKING:
    from ..world.state import GameState

log = get_logger(__name__)


def validate_game_state(state: GameState, log_problems: bool = False) -> List[StateValidation]:
    """
    Check a snapshot for problems the vision engine silently ignores.

    Args:
        state: Snapshot to check
        log_problems: Emit one WARNING per failed check when True

    Returns:
        Failed checks only; an empty list means the snapshot is consistent
    """
    problems: List[StateValidation] = []
    player_count = len(state.players)

    for index, unit in state.units.items():
        if not state.grid.in_bounds(index):
            problems.append(StateValidation.fail(
                "UNIT_OUT_OF_BOUNDS",
                f"Unit {unit.kind} at cell {index} is outside the "
                f"{state.width}x{state.height} map"
            ))
        if not 0 <= unit.player < player_count:
            problems.append(StateValidation.fail(
                "UNKNOWN_PLAYER",
                f"Unit {unit.kind} at cell {index} belongs to unknown player {unit.player}"
            ))

    memberships: dict[int, List[int]] = {}
    for team_index, team in enumerate(state.teams):
        for player in sorted(team):
            memberships.setdefault(player, []).append(team_index)
            if not 0 <= player < player_count:
                problems.append(StateValidation.fail(
                    "UNKNOWN_TEAM_MEMBER",
                    f"Team {team_index} lists unknown player {player}"
                ))

    for player, teams in sorted(memberships.items()):
        if len(teams) > 1:
            problems.append(StateValidation.fail(
                "PLAYER_IN_MULTIPLE_TEAMS",
                f"Player {player} is listed in teams {teams}"
            ))

    for player in range(player_count):
        if player not in memberships:
            problems.append(StateValidation.fail(
                "UNASSIGNED_PLAYER",
                f"Player {player} belongs to no team and grants no vision"
            ))

    if log_problems:
        for problem in problems:
            log.warning("Snapshot check %s: %s", problem.error_code, problem.message)

    return problems
