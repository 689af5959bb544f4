"""
Coordinate calculation for sorted formation lines.

Lines are stacked top to bottom in the order given and players are spread
evenly across each line. Every point lands inside the safety margin by
construction, so nothing is clamped afterwards.
"""
from __future__ import annotations

from typing import List, Sequence

from ..models import PitchPosition, PlacedPlayer, Player
from ..utils.constants import PITCH_HEIGHT, PITCH_WIDTH, SAFE_MARGIN


class CoordinateCalculator:
    """Maps lines of players onto the normalized pitch space."""

    def __init__(self, width: float = PITCH_WIDTH, height: float = PITCH_HEIGHT,
                 margin: float = SAFE_MARGIN):
        if margin < 0 or 2 * margin >= width or 2 * margin >= height:
            raise ValueError(
                f"Margin {margin} does not fit a {width}x{height} pitch"
            )
        self.width = width
        self.height = height
        self.margin = margin

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def inner_height(self) -> float:
        return self.height - 2 * self.margin

    def line_y(self, line_index: int, line_count: int) -> float:
        """Vertical centre of line ``line_index`` out of ``line_count``."""
        return self.margin + self.inner_height * (line_index + 0.5) / line_count

    def line_x(self, slot_index: int, line_size: int) -> float:
        """Horizontal position of slot ``slot_index`` in a line of ``line_size``."""
        if line_size == 1:
            return self.width / 2
        spacing = self.inner_width / (line_size + 1)
        return self.margin + spacing * (slot_index + 1)

    def place(self, lines: Sequence[Sequence[Player]]) -> List[PlacedPlayer]:
        """Pair every player with its position, in flattened line order."""
        placements = []
        line_count = len(lines)
        for line_index, line in enumerate(lines):
            y = self.line_y(line_index, line_count)
            for slot_index, player in enumerate(line):
                position = PitchPosition(x=self.line_x(slot_index, len(line)), y=y)
                placements.append(PlacedPlayer(player, position, line_index, slot_index))
        return placements

    def calculate_positions(self, lines: Sequence[Sequence[Player]]) -> List[PitchPosition]:
        """Positions only, index-aligned with the flattened lines."""
        return [placement.position for placement in self.place(lines)]
