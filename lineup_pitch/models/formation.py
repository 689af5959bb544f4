"""Formation layout models for the Lineup Pitch formation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .player import Player
from ..utils.constants import PITCH_HEIGHT, PITCH_WIDTH

Line = Tuple[Player, ...]


class FormationPreset(Enum):
    """Commonly used formation descriptors."""
    F_4_4_2 = "4-4-2"
    F_4_3_3 = "4-3-3"
    F_3_5_2 = "3-5-2"
    F_4_5_1 = "4-5-1"
    F_4_2_3_1 = "4-2-3-1"
    F_3_4_3 = "3-4-3"
    F_5_3_2 = "5-3-2"
    F_4_1_4_1 = "4-1-4-1"

    @staticmethod
    def describe(formation: str) -> str:
        """Short description of a formation, or a generic one for custom shapes."""
        return FORMATION_DESCRIPTIONS.get(formation, "Custom formation")


FORMATION_DESCRIPTIONS: Dict[str, str] = {
    "4-4-2": "Traditional balanced shape with good cover in attack and defence",
    "4-3-3": "Attacking shape built around wide play from the flanks",
    "3-5-2": "Wing-back system that relies on constant up-and-down running",
    "4-5-1": "Defensive shape that wins numbers in midfield",
    "4-2-3-1": "Modern balance of midfield depth and attacking intent",
    "3-4-3": "Attack-first shape suited to high pressing and possession",
    "5-3-2": "Deep back five that breaks quickly through two strikers",
    "4-1-4-1": "Single holding midfielder screening a flat back four",
}


@dataclass(frozen=True)
class PitchPosition:
    """A point in the normalized pitch space (x: 0-100, y: 0-140, top to bottom)."""
    x: float
    y: float

    def as_percent(self) -> Tuple[float, float]:
        """CSS offsets (left %, top %) relative to a box with the pitch aspect ratio."""
        return (self.x / PITCH_WIDTH * 100, self.y / PITCH_HEIGHT * 100)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class PlacedPlayer:
    """A player paired with the position computed for them."""
    player: Player
    position: PitchPosition
    line_index: int
    slot_index: int


@dataclass(frozen=True)
class FormationData:
    """
    Result of a formation analysis.

    ``positions[i]`` belongs to the i-th player obtained by flattening
    ``lines`` in order; ``placements`` carries the same pairing explicitly.
    """
    formation_label: str
    lines: Tuple[Line, ...]
    positions: Tuple[PitchPosition, ...]
    placements: Tuple[PlacedPlayer, ...] = field(default=())
    is_fallback: bool = False

    def flat_players(self) -> List[Player]:
        """Players in line order, leftmost first."""
        return [player for line in self.lines for player in line]

    def position_of(self, player: Player) -> Optional[PitchPosition]:
        """Get the computed position of a player, matched by identity."""
        for placement in self.placements:
            if placement.player is player:
                return placement.position
        return None

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON responses."""
        return {
            "formation": self.formation_label,
            "is_fallback": self.is_fallback,
            "lines": [[player.to_dict() for player in line] for line in self.lines],
            "positions": [position.to_dict() for position in self.positions],
        }
