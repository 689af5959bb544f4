"""Formation descriptor parsing ("4-3-3" -> [4, 3, 3])."""

from __future__ import annotations

from typing import List

from .errors import EmptyFormationError


def parse_formation(formation: str) -> List[int]:
    """
    Parse a formation descriptor into outfield line sizes, defence first.

    Tokens that are empty, zero, negative or not numeric are dropped.
    Never raises.

    Example:
        >>> parse_formation("4-2-3-1")
        [4, 2, 3, 1]
        >>> parse_formation("4--3")
        [4, 3]
    """
    if not isinstance(formation, str):
        return []

    sizes = []
    for token in formation.split("-"):
        token = token.strip()
        if token.isascii() and token.isdigit() and int(token) > 0:
            sizes.append(int(token))
    return sizes


def require_line_sizes(formation: str) -> List[int]:
    """Parse a descriptor, raising EmptyFormationError if nothing usable remains."""
    sizes = parse_formation(formation)
    if not sizes:
        raise EmptyFormationError(formation)
    return sizes
