"""
Services package for the Lineup Pitch formation engine.

This package contains the layout pipeline: parsing, distribution, sorting,
coordinate calculation, and the analyzer facade that ties them together.
"""
from .errors import (
    FormationStructureError, EmptyFormationError, GoalkeeperCountError,
    InsufficientPlayersError
)
from .formation_parser import parse_formation, require_line_sizes
from .line_distributor import distribute_players_to_lines
from .line_sorter import POSITION_PRIORITY, UNKNOWN_PRIORITY, sort_line, sort_lines
from .coordinate_calculator import CoordinateCalculator
from .formation_analyzer import AnalyzerStage, FormationAnalyzer, analyze_formation
from .formation_validator import FormationValidationService, ValidationResult

__all__ = [
    "FormationStructureError", "EmptyFormationError", "GoalkeeperCountError",
    "InsufficientPlayersError", "parse_formation", "require_line_sizes",
    "distribute_players_to_lines", "POSITION_PRIORITY", "UNKNOWN_PRIORITY",
    "sort_line", "sort_lines", "CoordinateCalculator", "AnalyzerStage",
    "FormationAnalyzer", "analyze_formation", "FormationValidationService",
    "ValidationResult"
]
