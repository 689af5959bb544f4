"""
Formation analyzer: the single entry point of the layout engine.

Runs parse -> distribute -> sort -> calculate and converts any structural
failure into a fallback layout, so the pitch view always gets something
to draw.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

from ..models import FormationData, Player
from ..utils.constants import (
    FALLBACK_FORMATION_LABEL, FALLBACK_LINE_SIZES, FALLBACK_MAX_OUTFIELD
)
from .coordinate_calculator import CoordinateCalculator
from .errors import FormationStructureError
from .formation_parser import require_line_sizes
from .line_distributor import distribute_players_to_lines
from .line_sorter import sort_lines

logger = logging.getLogger(__name__)


class AnalyzerStage(Enum):
    """Pipeline stages, in the order they run."""
    PARSING = "parsing"
    DISTRIBUTING = "distributing"
    SORTING = "sorting"
    CALCULATING = "calculating"
    FALLBACK_TRIGGERED = "fallback_triggered"
    DONE = "done"


class FormationAnalyzer:
    """
    Facade over the formation pipeline.

    ``analyze`` never raises a FormationStructureError; callers always
    receive a FormationData, flagged with ``is_fallback`` when the
    requested formation could not be honoured.
    """

    def __init__(self, calculator: Optional[CoordinateCalculator] = None):
        self.calculator = calculator or CoordinateCalculator()
        self.last_stage: Optional[AnalyzerStage] = None
        self.last_error: Optional[FormationStructureError] = None

    def analyze(self, players: Sequence[Player], formation: str) -> FormationData:
        """
        Lay out a roster in the given formation.

        Args:
            players: Roster in data order
            formation: Descriptor such as "4-3-3"

        Returns:
            FormationData for the formation, or the fallback layout
        """
        self.last_error = None
        try:
            self.last_stage = AnalyzerStage.PARSING
            line_sizes = require_line_sizes(formation)

            self.last_stage = AnalyzerStage.DISTRIBUTING
            raw_lines = distribute_players_to_lines(players, line_sizes)
        except FormationStructureError as e:
            logger.warning("Formation analysis failed for %r: %s", formation, e)
            self.last_error = e
            self.last_stage = AnalyzerStage.FALLBACK_TRIGGERED
            data = self.build_fallback(players)
            self.last_stage = AnalyzerStage.DONE
            return data

        self.last_stage = AnalyzerStage.SORTING
        lines = sort_lines(raw_lines)

        self.last_stage = AnalyzerStage.CALCULATING
        data = self._build(formation, lines, is_fallback=False)

        self.last_stage = AnalyzerStage.DONE
        return data

    def build_fallback(self, players: Sequence[Player]) -> FormationData:
        """
        Best-effort 4-4-2 style layout for rosters that cannot be analyzed.

        The first goalkeeper (or the first player) keeps goal and up to ten
        others fill the lines front to back. Short rosters leave later lines
        short instead of failing.
        """
        if not players:
            return self._build(FALLBACK_FORMATION_LABEL, [], is_fallback=True)

        keeper = next((p for p in players if p.is_goalkeeper), players[0])
        outfield = [p for p in players if p is not keeper][:FALLBACK_MAX_OUTFIELD]

        lines: List[List[Player]] = []
        start = 0
        for size in FALLBACK_LINE_SIZES:
            line = outfield[start:start + size]
            start += size
            if line:
                lines.append(line)
        lines.append([keeper])

        return self._build(FALLBACK_FORMATION_LABEL, lines, is_fallback=True)

    def _build(self, label: str, lines: Sequence[Sequence[Player]],
               is_fallback: bool) -> FormationData:
        placements = self.calculator.place(lines)
        return FormationData(
            formation_label=label,
            lines=tuple(tuple(line) for line in lines),
            positions=tuple(p.position for p in placements),
            placements=tuple(placements),
            is_fallback=is_fallback,
        )


def analyze_formation(players: Sequence[Player], formation: str) -> FormationData:
    """Analyze with the default pitch geometry."""
    return FormationAnalyzer().analyze(players, formation)
