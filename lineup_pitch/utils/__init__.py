"""
Utilities package for the Lineup Pitch formation engine.

This package contains configuration constants and label helpers.
"""
from .constants import (
    PITCH_WIDTH, PITCH_HEIGHT, SAFE_MARGIN, GOALKEEPER_TAG,
    FALLBACK_FORMATION_LABEL, UNKNOWN_PLAYER_LABEL
)
from .names import get_last_name, short_label

__all__ = [
    "PITCH_WIDTH", "PITCH_HEIGHT", "SAFE_MARGIN", "GOALKEEPER_TAG",
    "FALLBACK_FORMATION_LABEL", "UNKNOWN_PLAYER_LABEL",
    "get_last_name", "short_label"
]
