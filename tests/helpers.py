"""
Shared lineup fixtures for the test suite.
"""
from typing import List, Optional

from lineup_pitch.models import Player


def player(name: str, position: Optional[str] = None, local_name: str = "") -> Player:
    """Create a player with an international name and optional tag."""
    return Player(local_name=local_name, international_name=name, position=position)


def lineup_433() -> List[Player]:
    """A clean 4-3-3 starting eleven listed back to front, keeper first."""
    return [
        player("David Raya", "GK"),
        player("Ben White", "RB"),
        player("William Saliba", "RCB"),
        player("Gabriel Magalhaes", "LCB"),
        player("Riccardo Calafiori", "LB"),
        player("Martin Odegaard", "RCM"),
        player("Declan Rice", "LCM"),
        player("Mikel Merino", "DM"),
        player("Bukayo Saka", "RW"),
        player("Kai Havertz", "ST"),
        player("Gabriel Martinelli", "LW"),
    ]


def outfield(count: int, prefix: str = "Player") -> List[Player]:
    """Untagged outfield players named so that name order matches list order."""
    return [player(f"{prefix} {i:02d}") for i in range(count)]
