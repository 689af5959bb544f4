"""
Name helpers for marker labels.

The pitch renderer accepts pre-shortened labels; these helpers are the
default shortening used by the web layer when the caller supplies none.
"""
from typing import Optional

from .constants import UNKNOWN_PLAYER_LABEL


def get_last_name(full_name: Optional[str]) -> str:
    """
    Extract the surname (last whitespace-separated word) from a full name.

    Example:
        >>> get_last_name("Bukayo Saka")
        'Saka'
        >>> get_last_name("  ")
        'Unknown'
    """
    parts = str(full_name or "").split()
    if not parts:
        return UNKNOWN_PLAYER_LABEL
    return parts[-1]


def short_label(local_name: Optional[str], international_name: Optional[str]) -> str:
    """Short marker label: the local name's first part, else the international surname."""
    local = str(local_name or "").strip()
    if local:
        # Names written with a separator keep only the family name
        for separator in (" ", "・"):
            if separator in local:
                return local.split(separator)[0]
        return local
    return get_last_name(international_name)
