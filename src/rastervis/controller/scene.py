"""
Scene Controller
================
Owns the SceneState and the RevealAnimator and translates user actions
(typing, Start, Clear, demo shortcut) into state changes.

Why is this file needed?
------------------------
1. Orchestration: Views emit raw text; this class parses it through the model
   and decides what the canvas should show.
2. Cancellation: Any input change stops running reveals and clears the points
   revealed so far.
"""
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import QObject, Signal

from rastervis.config import ViewSettings, DEMO_CIRCLE_RADIUS
from rastervis.controller.animator import RevealAnimator
from rastervis.model.geometry_primitives import Point
from rastervis.model.shapes import Circle
from rastervis.model.state import SceneState, UpdateStatus

logger = logging.getLogger(__name__)

LINE_CHANNEL = "line"
CIRCLE_CHANNEL = "circle"


class SceneController(QObject):
    scene_changed = Signal()
    status_message = Signal(str)

    def __init__(self, state: SceneState, settings: ViewSettings, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self.settings = settings

        self.animator = RevealAnimator(self)
        self.animator.revealed.connect(self._on_revealed)
        self.animator.finished.connect(self._on_reveal_finished)

    # ---- input ----

    def set_inputs(self, line_fields: Sequence[str], circle_fields: Sequence[str]) -> None:
        """Called whenever any input field changes."""
        self.animator.stop()
        errors = []
        if self.state.update_line(line_fields) is UpdateStatus.REJECTED:
            errors.append(self.state.last_error)
        if self.state.update_circle(circle_fields) is UpdateStatus.REJECTED:
            errors.append(self.state.last_error)

        if errors:
            self.status_message.emit("Neplatný vstup: " + " ".join(errors))
        else:
            self.status_message.emit(self._describe_shapes())
        self.scene_changed.emit()

    # ---- actions ----

    def start(self) -> None:
        """Compute the point sequences and start revealing them."""
        self.animator.stop()
        self.state.clear_points()

        if self.state.line is None and self.state.circle is None:
            self.status_message.emit("Zadejte úsečku nebo kružnici.")
            self.scene_changed.emit()
            return

        if self.state.line is not None:
            points = self.state.line.rasterize(include_endpoints=self.settings.include_endpoints)
            logger.info("Line %s: %d points", self.state.line, len(points))
            self.animator.start(LINE_CHANNEL, points, self.settings.line_interval_ms)

        if self.state.circle is not None:
            groups = self.state.circle.rasterize()
            logger.info("Circle %s: %d octant steps", self.state.circle, len(groups))
            self.animator.start(CIRCLE_CHANNEL, groups, self.settings.circle_interval_ms)

        self.status_message.emit("Probíhá vykreslování...")
        self.scene_changed.emit()

    def clear(self) -> None:
        self.animator.stop()
        self.state.reset()
        self.status_message.emit("Vymazáno.")
        self.scene_changed.emit()

    def run_demo(self) -> None:
        """Circle at the origin with the demo radius, started immediately."""
        self.animator.stop()
        self.state.circle = Circle(center=Point(0.0, 0.0), radius=DEMO_CIRCLE_RADIUS)
        self.start()

    # ---- slots ----

    def _on_revealed(self, channel: str, item: object) -> None:
        if channel == LINE_CHANNEL:
            self.state.line_points.append(item)
        elif channel == CIRCLE_CHANNEL:
            self.state.circle_points.extend(item)
        self.scene_changed.emit()

    def _on_reveal_finished(self, channel: str) -> None:
        logger.debug("Reveal on '%s' finished", channel)
        if not self.animator.is_running():
            self.status_message.emit("Hotovo.")

    def _describe_shapes(self) -> str:
        parts = []
        if self.state.line is not None:
            s, e = self.state.line.start, self.state.line.end
            parts.append(f"Úsečka ({s.x:g}, {s.y:g}) - ({e.x:g}, {e.y:g})")
        if self.state.circle is not None:
            c = self.state.circle
            parts.append(f"Kružnice S=({c.center.x:g}, {c.center.y:g}), r={c.radius:g}")
        return "; ".join(parts) if parts else "Žádný tvar není zadán."
