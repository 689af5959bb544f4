#!/usr/bin/env python3
"""
Main entry point for the Lineup Pitch web server.

This script launches the Flask-based API that serves rendered pitches.
"""
import logging

from lineup_pitch.ui.web_app import run_web_app

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_web_app()
