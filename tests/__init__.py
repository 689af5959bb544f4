"""Test package for lineup_pitch."""
