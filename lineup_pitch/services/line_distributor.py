"""
Line distribution: split a roster into tactical lines.

Outfield players fill the lines front to back in roster order and the
goalkeeper always closes the layout as a singleton line.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from ..models import Player
from .errors import EmptyFormationError, GoalkeeperCountError, InsufficientPlayersError

logger = logging.getLogger(__name__)


def distribute_players_to_lines(players: Sequence[Player],
                                line_sizes: Sequence[int]) -> List[List[Player]]:
    """
    Allocate players to lines according to the parsed formation.

    Args:
        players: Roster in data order; substitutes may trail at the end
        line_sizes: Outfield line sizes, defence first

    Returns:
        Outfield lines followed by a one-player goalkeeper line

    Raises:
        EmptyFormationError: If no line sizes are given
        GoalkeeperCountError: If the roster has zero or several goalkeepers
        InsufficientPlayersError: If there are too few outfield players
    """
    if not line_sizes:
        raise EmptyFormationError("")

    goalkeepers = [p for p in players if p.is_goalkeeper]
    if len(goalkeepers) != 1:
        raise GoalkeeperCountError(len(goalkeepers))
    goalkeeper = goalkeepers[0]

    outfield = [p for p in players if not p.is_goalkeeper]
    required = sum(line_sizes)
    if len(outfield) < required:
        raise InsufficientPlayersError(required, len(outfield))

    if len(outfield) > required:
        logger.debug("Leaving %d surplus players unplaced", len(outfield) - required)

    lines: List[List[Player]] = []
    start = 0
    for size in line_sizes:
        lines.append(outfield[start:start + size])
        start += size

    lines.append([goalkeeper])
    return lines
