"""
Lineup Pitch

Formation layout and pitch rendering for the league preview site.

Given a lineup and a formation descriptor such as "4-3-3", this package
splits the players into tactical lines, computes a position for each of
them on a normalized 100x140 pitch, and renders the pitch with one
interactive marker per player.
"""
from .models import FormationData, PitchPosition, Player, TeamTheme
from .services import FormationAnalyzer, analyze_formation, parse_formation
from .ui import PitchRenderer, ReflowAdapter, create_app, run_web_app

__version__ = "1.0.0"

__all__ = [
    "FormationData", "PitchPosition", "Player", "TeamTheme",
    "FormationAnalyzer", "analyze_formation", "parse_formation",
    "PitchRenderer", "ReflowAdapter", "create_app", "run_web_app"
]
