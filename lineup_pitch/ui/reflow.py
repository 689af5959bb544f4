"""
Responsive sizing and animated repositioning for a rendered pitch.

Positions are resolution-independent percentages, so a resize only
rescales markers. A formation change moves existing markers with a CSS
transition, drops markers whose player left, and inserts new markers
without an entrance animation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..models import FormationData, Player
from ..utils.constants import (
    LABEL_MIN_PX, LABEL_SCALE, MARKER_MAX_PX, MARKER_MIN_PX,
    MARKER_WIDTH_DIVISOR, TRANSITION_MS
)
from .pitch_renderer import MarkerHandle, PitchRenderer, PitchView, position_marker

logger = logging.getLogger(__name__)

# scheduler(delay_seconds, callback)
Scheduler = Callable[[float, Callable[[], None]], None]


@dataclass
class ReflowResult:
    """What a formation transition did to the marker set."""
    moved: int = 0
    removed: int = 0
    inserted: int = 0


def marker_size_for_width(width: float) -> float:
    """Dot size in pixels for a container width, bounded to a sane range."""
    return max(MARKER_MIN_PX, min(MARKER_MAX_PX, width / MARKER_WIDTH_DIVISOR))


def label_size_for_marker(marker_size: float) -> float:
    return max(LABEL_MIN_PX, marker_size * LABEL_SCALE)


class ReflowAdapter:
    """
    Keeps a PitchView in step with container size and formation changes.

    Args:
        view: The view returned by PitchRenderer.render
        renderer: Renderer used to build markers for new players; defaults
            to the one that produced the view
        scheduler: Optional timer hook used to clear transitions once they
            have run; without one, call ``settle`` explicitly
        duration_ms: Transition length in milliseconds
    """

    def __init__(self, view: PitchView, renderer: Optional[PitchRenderer] = None,
                 scheduler: Optional[Scheduler] = None, duration_ms: int = TRANSITION_MS):
        self.view = view
        self.renderer = renderer or view.renderer or PitchRenderer()
        self.scheduler = scheduler
        self.duration_ms = duration_ms
        self.marker_size: Optional[float] = None

    def on_resize(self, width: float) -> Optional[float]:
        """
        Rescale markers and labels for a new container width.

        Returns the applied marker size, or None when the container has no
        width yet (not attached or hidden).
        """
        if not width or width <= 0:
            logger.debug("Ignoring resize to width %r", width)
            return None

        self.marker_size = marker_size_for_width(width)
        for marker in self.view.markers:
            self._apply_size(marker)
        return self.marker_size

    def _apply_size(self, marker: MarkerHandle) -> None:
        if self.marker_size is None:
            return
        size = f"{self.marker_size:g}px"
        font_size = f"{label_size_for_marker(self.marker_size):g}px"
        for dot in marker.node.find_all("dot"):
            dot.style["width"] = size
            dot.style["height"] = size
        for namebox in marker.node.find_all("namebox"):
            namebox.style["font-size"] = font_size

    def transition_to(self, formation_data: FormationData) -> ReflowResult:
        """Move the view to a new layout, animating markers that persist."""
        view = self.view
        result = ReflowResult()
        existing: Dict[Player, MarkerHandle] = {m.player: m for m in view.markers}
        transition = f"left {self.duration_ms}ms ease, top {self.duration_ms}ms ease"

        markers: List[MarkerHandle] = []
        for placement in formation_data.placements:
            marker = existing.pop(placement.player, None)
            if marker is not None:
                marker.node.style["transition"] = transition
                position_marker(marker.node, placement.position)
                marker.placement = placement
                result.moved += 1
            else:
                node = self.renderer.create_marker(placement, view)
                view.pitch_box.append_child(node)
                marker = MarkerHandle(placement.player, node, placement)
                self._apply_size(marker)
                result.inserted += 1
            markers.append(marker)

        for stale in existing.values():
            stale.node.remove()
            result.removed += 1

        self._update_label(formation_data)
        view.markers = markers
        view.formation_data = formation_data

        logger.debug("Reflow moved=%d removed=%d inserted=%d",
                     result.moved, result.removed, result.inserted)
        if self.scheduler is not None and result.moved:
            self.scheduler(self.duration_ms / 1000, self.settle)
        return result

    def _update_label(self, formation_data: FormationData) -> None:
        pitch_box = self.view.pitch_box
        for old_label in pitch_box.find_all("formation-label"):
            old_label.remove()
        pitch_box.append_child(self.renderer.create_formation_label(formation_data))
        if formation_data.is_fallback:
            pitch_box.add_class("pitch-degraded")
        else:
            pitch_box.remove_class("pitch-degraded")

    def settle(self) -> None:
        """Clear transition styles once the animation has finished."""
        for marker in self.view.markers:
            marker.node.style.pop("transition", None)
