"""
Structural errors raised by the formation pipeline.

These never escape the FormationAnalyzer; it converts them into the
fallback layout.
"""


class FormationStructureError(Exception):
    """Base class for roster/formation combinations that cannot be laid out."""
    pass


class EmptyFormationError(FormationStructureError):
    """The formation descriptor contains no valid line sizes."""

    def __init__(self, formation: str):
        self.formation = formation
        super().__init__(f"Invalid formation format: {formation!r}")


class GoalkeeperCountError(FormationStructureError):
    """The roster does not contain exactly one goalkeeper."""

    def __init__(self, found: int):
        self.found = found
        super().__init__(f"Need exactly 1 GK, found {found}")


class InsufficientPlayersError(FormationStructureError):
    """Fewer outfield players than the formation requires."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough field players. Need {required}, got {available}"
        )
