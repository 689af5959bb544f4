"""
UI package for the Lineup Pitch formation engine.

This package contains the pitch renderer, its element tree, the reflow
adapter and the Flask web server.
"""
from .nodes import Element, Event
from .pitch_renderer import MarkerHandle, PitchRenderer, PitchView, flip_pitch
from .reflow import ReflowAdapter, ReflowResult
from .web_app import create_app, run_web_app

__all__ = [
    "Element", "Event", "MarkerHandle", "PitchRenderer", "PitchView", "flip_pitch",
    "ReflowAdapter", "ReflowResult", "create_app", "run_web_app"
]
