"""
Models package for the Lineup Pitch formation engine.

This package contains the data models shared by the layout engine and renderer.
"""
from .player import Player, PositionTag
from .formation import (
    FormationData, FormationPreset, Line, PitchPosition, PlacedPlayer
)
from .theme import TeamTheme, resolve_team_theme

__all__ = [
    "Player", "PositionTag", "FormationData", "FormationPreset", "Line",
    "PitchPosition", "PlacedPlayer", "TeamTheme", "resolve_team_theme"
]
