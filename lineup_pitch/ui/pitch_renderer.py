"""
Pitch renderer for the Lineup Pitch formation engine.

Draws the pitch markings as SVG in the same 100x140 space the coordinate
calculator uses, then places one interactive marker per player on top of
it with percentage offsets.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from ..models import FormationData, PitchPosition, PlacedPlayer, Player, TeamTheme
from ..services import FormationAnalyzer
from ..utils.constants import FALLBACK_DISPLAY_LABEL, PITCH_HEIGHT, PITCH_WIDTH, SAFE_MARGIN
from .nodes import SVG_NAMESPACE, Element, Event

logger = logging.getLogger(__name__)

ActivateCallback = Callable[[Player], None]
LabelProvider = Callable[[Player], str]

ACTIVATION_KEYS = ("Enter", " ")


@dataclass
class MarkerHandle:
    """A rendered marker and the player it stands for."""
    player: Player
    node: Element
    placement: PlacedPlayer


@dataclass
class PitchView:
    """Everything one render call created and still owns."""
    container: Element
    pitch_box: Element
    formation_data: FormationData
    theme: TeamTheme
    on_activate: Optional[ActivateCallback] = None
    labels: Dict[Player, str] = field(default_factory=dict)
    markers: List[MarkerHandle] = field(default_factory=list)
    renderer: Optional[PitchRenderer] = None

    def marker_for(self, player: Player) -> Optional[MarkerHandle]:
        for marker in self.markers:
            if marker.player is player:
                return marker
        return None

    @property
    def degraded(self) -> bool:
        return self.formation_data.is_fallback

    def to_html(self):
        return self.container.to_html()


def format_percent(value: float) -> str:
    return f"{value:g}%"


def position_marker(node: Element, position: PitchPosition) -> None:
    """Anchor a marker's centre at a pitch position."""
    left, top = position.as_percent()
    node.style["left"] = format_percent(left)
    node.style["top"] = format_percent(top)
    node.style["transform"] = "translate(-50%, -50%)"


class PitchRenderer:
    """
    Renders FormationData into an element tree.

    Args:
        label_for: Optional callable producing the short marker label for a
            player; defaults to the player's display name
    """

    def __init__(self, label_for: Optional[LabelProvider] = None):
        self.label_for = label_for

    def render(self, container: Element, formation_data: FormationData,
               theme: Optional[TeamTheme] = None,
               on_activate: Optional[ActivateCallback] = None,
               labels: Optional[Mapping[Player, str]] = None) -> PitchView:
        """Draw the pitch and markers into ``container``, replacing any earlier pitch."""
        theme = theme or TeamTheme.default()

        for stale in [child for child in container.children if child.has_class("pitch-box")]:
            stale.remove()

        container.add_class("pitch-container")
        pitch_box = Element("div", "pitch-box")
        pitch_box.append_child(self.create_pitch_svg())

        view = PitchView(
            container=container,
            pitch_box=pitch_box,
            formation_data=formation_data,
            theme=theme,
            on_activate=on_activate,
            labels=dict(labels or {}),
            renderer=self,
        )

        pitch_box.append_child(self.create_formation_label(formation_data))
        if formation_data.is_fallback:
            pitch_box.add_class("pitch-degraded")

        for placement in formation_data.placements:
            node = self.create_marker(placement, view)
            pitch_box.append_child(node)
            view.markers.append(MarkerHandle(placement.player, node, placement))

        container.append_child(pitch_box)
        logger.debug("Rendered %d markers (%s)", len(view.markers), formation_data.formation_label)
        return view

    def render_pitch(self, container: Element, players: Sequence[Player], formation: str,
                     theme: Optional[TeamTheme] = None,
                     on_activate: Optional[ActivateCallback] = None,
                     labels: Optional[Mapping[Player, str]] = None,
                     analyzer: Optional[FormationAnalyzer] = None) -> PitchView:
        """Analyze a roster and render the result."""
        formation_data = (analyzer or FormationAnalyzer()).analyze(players, formation)
        return self.render(container, formation_data, theme, on_activate, labels)

    def create_pitch_svg(self) -> Element:
        """SVG pitch lines in the normalized coordinate space."""
        svg = Element(
            "svg", "pitch-svg", namespace=SVG_NAMESPACE,
            viewBox=f"0 0 {PITCH_WIDTH} {PITCH_HEIGHT}",
            preserveAspectRatio="xMidYMid meet",
        )
        lines = svg.append_child(Element("g", "pitch-lines", namespace=SVG_NAMESPACE))

        inner_width = PITCH_WIDTH - 2 * SAFE_MARGIN
        inner_height = PITCH_HEIGHT - 2 * SAFE_MARGIN
        mid_x = PITCH_WIDTH / 2
        mid_y = PITCH_HEIGHT / 2

        # Boundary
        lines.append_child(self._rect(SAFE_MARGIN, SAFE_MARGIN, inner_width, inner_height, "pitch-boundary"))

        # Halfway line and centre circle
        lines.append_child(self._stroke(Element(
            "line", "halfway-line", namespace=SVG_NAMESPACE,
            x1=_num(SAFE_MARGIN), y1=_num(mid_y),
            x2=_num(PITCH_WIDTH - SAFE_MARGIN), y2=_num(mid_y),
        )))
        lines.append_child(self._stroke(Element(
            "circle", "center-circle", namespace=SVG_NAMESPACE,
            cx=_num(mid_x), cy=_num(mid_y), r="10", fill="none",
        )))

        # Penalty areas
        lines.append_child(self._rect(20, SAFE_MARGIN, 60, 18, "penalty-area"))
        lines.append_child(self._rect(20, PITCH_HEIGHT - SAFE_MARGIN - 18, 60, 18, "penalty-area"))

        # Goal areas
        lines.append_child(self._rect(35, SAFE_MARGIN, 30, 8, "goal-area"))
        lines.append_child(self._rect(35, PITCH_HEIGHT - SAFE_MARGIN - 8, 30, 8, "goal-area"))

        return svg

    def _rect(self, x: float, y: float, width: float, height: float, class_name: str) -> Element:
        return self._stroke(Element(
            "rect", class_name, namespace=SVG_NAMESPACE,
            x=_num(x), y=_num(y), width=_num(width), height=_num(height), fill="none",
        ))

    @staticmethod
    def _stroke(element: Element) -> Element:
        element.set_attribute("stroke", "currentColor")
        element.set_attribute("stroke-width", "1")
        return element

    def create_formation_label(self, formation_data: FormationData) -> Element:
        if formation_data.is_fallback:
            return Element("div", "formation-label degraded", text=FALLBACK_DISPLAY_LABEL)
        return Element("div", "formation-label", text=formation_data.formation_label)

    def marker_label(self, player: Player, labels: Mapping[Player, str]) -> str:
        if player in labels:
            return labels[player]
        if self.label_for is not None:
            return self.label_for(player)
        return player.display_name

    def create_marker(self, placement: PlacedPlayer, view: PitchView) -> Element:
        """One interactive marker: dot, name box and optional position badge."""
        player = placement.player
        node = Element("div", f"pnode {view.theme.css_class}")
        position_marker(node, placement.position)

        dot = node.append_child(Element("div", "dot"))
        dot.style["background-color"] = view.theme.primary
        dot.style["border-color"] = view.theme.secondary

        node.append_child(Element("div", "namebox", text=self.marker_label(player, view.labels)))

        if player.position_code:
            node.append_child(Element("div", "pos", text=player.position_code))

        self.add_activation_trigger(node, player, view.on_activate)
        return node

    @staticmethod
    def add_activation_trigger(node: Element, player: Player,
                               on_activate: Optional[ActivateCallback]) -> None:
        """Make a marker a keyboard-accessible button that reports its player."""
        node.set_attribute("role", "button")
        node.set_attribute("tabindex", "0")
        node.set_attribute("aria-label", f"Show details for {player.display_name}")

        if on_activate is None:
            return

        def on_click(event: Event) -> None:
            event.prevent_default()
            event.stop_propagation()
            on_activate(player)

        def on_keydown(event: Event) -> None:
            if event.key in ACTIVATION_KEYS:
                event.prevent_default()
                on_activate(player)

        node.add_event_listener("click", on_click)
        node.add_event_listener("keydown", on_keydown)


def flip_pitch(container: Element, flip: bool = False) -> None:
    """Turn the pitch upside down, e.g. to show the away side attacking up."""
    if flip:
        container.style["transform"] = "rotateX(180deg)"
    else:
        container.style.pop("transform", None)


def _num(value: float) -> str:
    return f"{value:g}"
