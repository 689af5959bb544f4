"""
Formation validation for roster/formation pairs.

Lets callers check up front whether a lineup will be laid out as requested
or fall back, and why, without going through the analyzer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models import Player
from .formation_parser import parse_formation


class ValidationResult:
    """Result of a validation operation with success status and error messages."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str) -> None:
        """Add an error message and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def combine(self, other: ValidationResult) -> ValidationResult:
        """Combine with another validation result."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors
        )

    def to_dict(self) -> dict:
        return {"valid": self.is_valid, "errors": list(self.errors)}


class ValidationRule(ABC):
    """A single check on a roster/formation pair."""

    @abstractmethod
    def validate(self, players: Sequence[Player], formation: str) -> ValidationResult:
        """Perform validation and return result."""
        pass


class DescriptorRule(ValidationRule):
    """The descriptor must contain at least one line size."""

    def validate(self, players: Sequence[Player], formation: str) -> ValidationResult:
        result = ValidationResult()
        if not parse_formation(formation):
            result.add_error("Invalid formation format")
        return result


class GoalkeeperRule(ValidationRule):
    """Exactly one goalkeeper."""

    def validate(self, players: Sequence[Player], formation: str) -> ValidationResult:
        result = ValidationResult()
        gk_count = len([p for p in players if p.is_goalkeeper])
        if gk_count != 1:
            result.add_error(f"Need exactly 1 GK, found {gk_count}")
        return result


class OutfieldCountRule(ValidationRule):
    """Enough outfield players to fill every line."""

    def validate(self, players: Sequence[Player], formation: str) -> ValidationResult:
        result = ValidationResult()
        required = sum(parse_formation(formation))
        available = len([p for p in players if not p.is_goalkeeper])
        if available < required:
            result.add_error(f"Need {required} field players, found {available}")
        return result


class FormationValidationService:
    """Runs every rule and merges the results."""

    def __init__(self, rules: Optional[List[ValidationRule]] = None):
        self.rules = rules if rules is not None else [
            DescriptorRule(), GoalkeeperRule(), OutfieldCountRule()
        ]

    def validate_formation(self, players: Sequence[Player], formation: str) -> ValidationResult:
        """
        Check whether a roster can be laid out in a formation.

        Args:
            players: Roster in data order
            formation: Descriptor such as "4-3-3"

        Returns:
            ValidationResult with every problem found
        """
        result = ValidationResult()
        for rule in self.rules:
            result = result.combine(rule.validate(players, formation))
        return result
