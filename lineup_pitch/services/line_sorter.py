"""Left-to-right ordering of players inside a tactical line."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..models import Player, PositionTag

UNKNOWN_PRIORITY = 999

# Lower ranks sit further left. Each line family reuses the same scale.
POSITION_PRIORITY: Dict[PositionTag, int] = {
    # Defensive line
    PositionTag.LEFT_BACK: 1,
    PositionTag.LEFT_CENTER_BACK: 2,
    PositionTag.CENTER_BACK: 3,
    PositionTag.RIGHT_CENTER_BACK: 4,
    PositionTag.RIGHT_BACK: 5,
    PositionTag.LEFT_WING_BACK: 1,
    PositionTag.RIGHT_WING_BACK: 5,

    # Midfield line
    PositionTag.LEFT_MIDFIELDER: 1,
    PositionTag.LEFT_CENTRAL_MIDFIELDER: 2,
    PositionTag.DEFENSIVE_MIDFIELDER: 3,
    PositionTag.CENTRAL_MIDFIELDER: 4,
    PositionTag.RIGHT_CENTRAL_MIDFIELDER: 5,
    PositionTag.RIGHT_MIDFIELDER: 6,
    PositionTag.ATTACKING_MIDFIELDER: 7,

    # Forward line
    PositionTag.LEFT_WINGER: 1,
    PositionTag.LEFT_FORWARD: 2,
    PositionTag.CENTER_FORWARD: 3,
    PositionTag.STRIKER: 4,
    PositionTag.RIGHT_FORWARD: 5,
    PositionTag.RIGHT_WINGER: 6,

    PositionTag.GOALKEEPER: 1,
}


def position_priority(player: Player) -> int:
    """Rank of a player's position tag; unknown or missing tags rank last."""
    tag = player.position_tag
    if tag is None:
        return UNKNOWN_PRIORITY
    return POSITION_PRIORITY.get(tag, UNKNOWN_PRIORITY)


def sort_key(player: Player) -> Tuple[int, str]:
    return (position_priority(player), player.display_name)


def sort_line(line: Sequence[Player]) -> List[Player]:
    """Order a line by position rank, then by display name."""
    return sorted(line, key=sort_key)


def sort_lines(lines: Sequence[Sequence[Player]]) -> List[List[Player]]:
    return [sort_line(line) for line in lines]
