"""
Scene State (Data Model)
========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current line, circle and the points revealed
   so far in one place, instead of module-level globals.
2. Decoupling: Views read from this object; the SceneController writes to it.

Classes:
    UpdateStatus: Outcome of applying new input fields.
    SceneState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Optional, Sequence

from rastervis.model.errors import ParseFailure, InvalidGeometry
from rastervis.model.geometry_primitives import Point
from rastervis.model.parsing import line_from_fields, circle_from_fields
from rastervis.model.shapes import Line, Circle

logger = logging.getLogger(__name__)


class UpdateStatus(str, Enum):
    OK = "ok"
    ABSENT = "absent"  # Fields empty or not numeric, shape removed
    REJECTED = "rejected"  # Numeric but invalid geometry, previous shape kept


@dataclass
class SceneState:
    """
    Holds the shapes defined by the user and the points revealed so far.
    Pass this instance to the controller and the canvas.
    """
    line: Optional[Line] = None
    circle: Optional[Circle] = None

    line_points: list[Point] = field(default_factory=list)
    circle_points: list[Point] = field(default_factory=list)

    last_error: Optional[str] = None

    def update_line(self, fields: Sequence[str]) -> UpdateStatus:
        """Apply the four line fields (x1, y1, x2, y2)."""
        self.line_points = []
        try:
            self.line = line_from_fields(*fields)
        except ParseFailure as e:
            self.line = None
            self.last_error = None
            logger.debug("Line inputs incomplete: %s", e)
            return UpdateStatus.ABSENT
        except InvalidGeometry as e:
            self.last_error = str(e)
            logger.warning("Line update rejected: %s", e)
            return UpdateStatus.REJECTED
        self.last_error = None
        logger.debug("Line set to %s", self.line)
        return UpdateStatus.OK

    def update_circle(self, fields: Sequence[str]) -> UpdateStatus:
        """Apply the three circle fields (x, y, r)."""
        self.circle_points = []
        try:
            self.circle = circle_from_fields(*fields)
        except ParseFailure as e:
            self.circle = None
            self.last_error = None
            logger.debug("Circle inputs incomplete: %s", e)
            return UpdateStatus.ABSENT
        except InvalidGeometry as e:
            self.last_error = str(e)
            logger.warning("Circle update rejected: %s", e)
            return UpdateStatus.REJECTED
        self.last_error = None
        logger.debug("Circle set to %s", self.circle)
        return UpdateStatus.OK

    def clear_points(self) -> None:
        self.line_points = []
        self.circle_points = []

    def reset(self) -> None:
        """Drop both shapes and every revealed point."""
        self.line = None
        self.circle = None
        self.line_points = []
        self.circle_points = []
        self.last_error = None
        logger.info("Scene state has been reset.")
