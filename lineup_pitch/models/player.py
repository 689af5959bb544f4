"""
Player model for the Lineup Pitch formation engine.

Players are supplied by the data-loading layer and are read-only to the
layout engine. They are compared by identity only: two records with the
same names are still two different players on the pitch.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..utils.constants import GOALKEEPER_TAG, UNKNOWN_PLAYER_LABEL


class PositionTag(Enum):
    """Closed vocabulary of position tags used in lineup data."""
    GOALKEEPER = "GK"

    # Defensive line
    LEFT_BACK = "LB"
    LEFT_CENTER_BACK = "LCB"
    CENTER_BACK = "CB"
    RIGHT_CENTER_BACK = "RCB"
    RIGHT_BACK = "RB"
    LEFT_WING_BACK = "LWB"
    RIGHT_WING_BACK = "RWB"

    # Midfield line
    LEFT_MIDFIELDER = "LM"
    LEFT_CENTRAL_MIDFIELDER = "LCM"
    DEFENSIVE_MIDFIELDER = "DM"
    CENTRAL_MIDFIELDER = "CM"
    RIGHT_CENTRAL_MIDFIELDER = "RCM"
    RIGHT_MIDFIELDER = "RM"
    ATTACKING_MIDFIELDER = "AM"

    # Forward line
    LEFT_WINGER = "LW"
    LEFT_FORWARD = "LF"
    CENTER_FORWARD = "CF"
    STRIKER = "ST"
    RIGHT_FORWARD = "RF"
    RIGHT_WINGER = "RW"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["PositionTag"]:
        """Look up a tag by its code, returning None for unknown codes."""
        if not code:
            return None
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True, eq=False)
class Player:
    """
    A lineup entry as delivered by the fixture data.

    Attributes:
        local_name: Name in the site's local language (may be empty)
        international_name: Romanized / international name (may be empty)
        position: Position tag such as "GK" or "LCB"; unknown tags are kept verbatim
        number: Shirt number if known
        player_id: Identifier from the data source, never used for matching
    """
    local_name: str = ""
    international_name: str = ""
    position: Optional[str] = None
    number: Optional[Union[int, str]] = None
    player_id: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Full name for sorting and accessibility labels."""
        local = _text(self.local_name).strip()
        if local:
            return local
        international = _text(self.international_name).strip()
        if international:
            return international
        return UNKNOWN_PLAYER_LABEL

    @property
    def position_code(self) -> str:
        """Normalized position tag, empty when the player has none."""
        return _text(self.position).strip().upper()

    @property
    def position_tag(self) -> Optional[PositionTag]:
        return PositionTag.from_code(self.position_code)

    @property
    def is_goalkeeper(self) -> bool:
        return self.position_code == GOALKEEPER_TAG

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the lineup JSON shape used by the fixture data."""
        return {
            "jp": self.local_name,
            "intl": self.international_name,
            "pos": self.position,
            "num": self.number,
            "playerId": self.player_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """
        Create from a lineup JSON record.

        Accepts both the fixture keys (jp, intl, pos, num, playerId) and
        the attribute names of this class. Names and position are coerced
        to strings, so numeric values from loose JSON stay usable.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Player record must be an object, got {type(data).__name__}")
        return cls(
            local_name=_text(data.get("jp", data.get("local_name"))),
            international_name=_text(data.get("intl", data.get("international_name"))),
            position=_optional_text(data.get("pos", data.get("position"))),
            number=data.get("num", data.get("number")),
            player_id=data.get("playerId", data.get("player_id")),
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)
