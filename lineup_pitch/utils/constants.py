"""
Constants for the Lineup Pitch formation engine.

This module contains configuration constants used throughout the package.
"""

# Normalized pitch space (shared by the SVG viewBox and player markers)
PITCH_WIDTH = 100
PITCH_HEIGHT = 140
SAFE_MARGIN = 4

# Position tag that marks the goalkeeper in roster data
GOALKEEPER_TAG = "GK"

# Fallback layout used when a formation cannot be honoured
FALLBACK_LINE_SIZES = (4, 4, 2)
FALLBACK_MAX_OUTFIELD = 10
FALLBACK_FORMATION_LABEL = "fallback"
FALLBACK_DISPLAY_LABEL = "Formation unavailable"

# Label used when a player record carries no usable name
UNKNOWN_PLAYER_LABEL = "Unknown"

# Marker sizing (pixels) relative to container width
MARKER_MIN_PX = 12
MARKER_MAX_PX = 20
MARKER_WIDTH_DIVISOR = 20
LABEL_MIN_PX = 10
LABEL_SCALE = 0.7

# Marker repositioning animation
TRANSITION_MS = 300

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
