"""
Web application module for the Lineup Pitch formation engine.

This module contains the Flask server that page-assembly code calls to
analyze lineups and fetch rendered pitch markup.
"""
import os
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request, send_from_directory

from ..models import FormationPreset, Player, resolve_team_theme
from ..services import FormationAnalyzer, FormationValidationService
from ..utils import short_label
from ..utils.constants import DEFAULT_HOST, DEFAULT_PORT
from .nodes import Element
from .pitch_renderer import PitchRenderer

STATIC_FOLDER = os.path.join(os.path.dirname(__file__), "static")


class RequestError(ValueError):
    """Malformed request payload."""
    pass


def _parse_lineup_request(data: Any) -> Tuple[List[Player], str]:
    """Extract (players, formation) from a JSON body."""
    if not isinstance(data, dict):
        raise RequestError("Request body must be a JSON object")

    players_data = data.get("players", [])
    if not isinstance(players_data, list):
        raise RequestError("'players' must be a list")

    formation = data.get("formation", "")
    if not isinstance(formation, str):
        raise RequestError("'formation' must be a string")

    try:
        players = [Player.from_dict(item) for item in players_data]
    except ValueError as e:
        raise RequestError(f"Invalid player data: {e}") from e
    return players, formation


def _marker_label(player: Player) -> str:
    return short_label(player.local_name, player.international_name)


def create_app(static_folder: str = STATIC_FOLDER) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        static_folder: Directory holding pitch.css

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, static_folder=static_folder, static_url_path="/static")
    renderer = PitchRenderer(label_for=_marker_label)
    validator = FormationValidationService()

    @app.route("/pitch.css")
    def pitch_stylesheet():
        """Serve the stylesheet for rendered pitches."""
        return send_from_directory(static_folder, "pitch.css")

    # ==================== API Endpoints ==================== #

    @app.route("/api/formations/presets", methods=["GET"])
    def get_presets():
        """List common formations with short descriptions."""
        presets: List[Dict[str, str]] = [
            {"formation": preset.value, "description": FormationPreset.describe(preset.value)}
            for preset in FormationPreset
        ]
        return jsonify({"success": True, "presets": presets})

    @app.route("/api/formation/analyze", methods=["POST"])
    def analyze():
        """Lay out a lineup and return lines and positions."""
        try:
            players, formation = _parse_lineup_request(request.get_json(silent=True))
            formation_data = FormationAnalyzer().analyze(players, formation)
            return jsonify({"success": True, "formation": formation_data.to_dict()})
        except RequestError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            app.logger.exception("Formation analysis request failed")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/formation/validate", methods=["POST"])
    def validate():
        """Report whether a lineup fits its formation without falling back."""
        try:
            players, formation = _parse_lineup_request(request.get_json(silent=True))
            result = validator.validate_formation(players, formation)
            return jsonify({"success": True, "valid": result.is_valid, "errors": result.errors})
        except RequestError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            app.logger.exception("Formation validation request failed")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/pitch", methods=["POST"])
    def render_pitch():
        """Render a lineup to pitch markup for the page to insert."""
        try:
            data = request.get_json(silent=True)
            players, formation = _parse_lineup_request(data)
            theme = resolve_team_theme(str(data.get("team", "")))

            container = Element("div", "pitch-root")
            view = renderer.render_pitch(container, players, formation, theme)

            return jsonify({
                "success": True,
                "html": str(view.to_html()),
                "degraded": view.degraded,
                "formation": view.formation_data.formation_label,
            })
        except RequestError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            app.logger.exception("Pitch render request failed")
            return jsonify({"success": False, "error": str(e)}), 500

    return app


def run_web_app(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
    """
    app = create_app()
    app.run(host=host, port=port, debug=False)
