"""
Raster Canvas
=============
The widget that shows the coordinate plane, the user's shapes and the points
revealed so far.

Why is this file needed?
------------------------
1. Rendering: It is the only place that turns the SceneState into pixels.
2. Mapping: It builds a CoordinateMapper from its current size on every paint,
   so resizing the window rescales the grid.
"""
from __future__ import annotations

from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget, QSizePolicy

from rastervis.config import ViewSettings, CANVAS_MIN_SIZE
from rastervis.model.coordinates import CoordinateMapper
from rastervis.model.geometry_primitives import Point
from rastervis.model.state import SceneState
from rastervis.view.surface import PainterSurface


class RasterCanvas(QWidget):
    def __init__(self, state: SceneState, settings: ViewSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self.settings = settings
        self.setMinimumSize(CANVAS_MIN_SIZE, CANVAS_MIN_SIZE)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def mapper(self) -> CoordinateMapper:
        units = self.settings.units_per_axis
        return CoordinateMapper(width=self.width(), height=self.height(), units_x=units, units_y=units)

    def paintEvent(self, event, /) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            surface = PainterSurface(painter, self.mapper())
            surface.clear()
            self._draw_coordinate_plane(surface)
            self._draw_scene(surface)
        finally:
            painter.end()

    # ---- scene ----

    def _draw_scene(self, surface: PainterSurface) -> None:
        s = self.settings
        if self.state.line is not None:
            line = self.state.line
            surface.draw_circle(line.start, s.point_radius, filled=True, color=s.point_color)
            surface.draw_circle(line.end, s.point_radius, filled=True, color=s.point_color)
            surface.draw_line(line.start, line.end, color=s.shape_color)
            for p in self.state.line_points:
                surface.draw_circle(p, s.point_radius, filled=True, color=s.point_color)

        if self.state.circle is not None:
            circle = self.state.circle
            surface.draw_circle(circle.center, circle.radius, filled=False, color=s.shape_color)
            for p in self.state.circle_points:
                surface.draw_circle(p, s.point_radius, filled=True, color=s.point_color)

    # ---- coordinate plane ----

    def _draw_coordinate_plane(self, surface: PainterSurface) -> None:
        """Axes with arrows, unit ticks, optional grid and numeric labels."""
        s = self.settings
        u = s.units_per_axis
        half = u / 2
        tick = u / 200
        arrow = u / 100
        label_offset = u / 50

        # grid first, so axes are drawn on top
        count_x, count_y = surface.mapper.visible_units()
        if s.grid_enabled:
            for i in range(1, count_x):
                for x in (-i, i):
                    surface.draw_line(Point(x, half), Point(x, -half), color=s.grid_color)
            for i in range(1, count_y):
                for y in (-i, i):
                    surface.draw_line(Point(-half, y), Point(half, y), color=s.grid_color)

        # axes
        surface.draw_line(Point(-half, 0), Point(half, 0))
        surface.draw_line(Point(0, half), Point(0, -half))

        # X arrow + label
        surface.draw_line(Point(half, 0), Point(half - arrow, arrow))
        surface.draw_line(Point(half, 0), Point(half - arrow, -arrow))
        surface.draw_text(Point(half - label_offset, label_offset), "X")

        # Y arrow + label
        surface.draw_line(Point(0, half), Point(arrow, half - arrow))
        surface.draw_line(Point(0, half), Point(-arrow, half - arrow))
        surface.draw_text(Point(label_offset, half - label_offset), "Y")

        # dense grids only get a label every 5 units
        label_step = 5 if u >= 50 else 1

        for i in range(1, count_x):
            for x in (-i, i):
                surface.draw_line(Point(x, -tick), Point(x, tick))
                if i % label_step == 0:
                    surface.draw_text(Point(x, -1.5 * arrow), str(x), size_px=10)

        for i in range(1, count_y):
            for y in (-i, i):
                surface.draw_line(Point(-tick, y), Point(tick, y))
                if i % label_step == 0:
                    surface.draw_text(Point(-1.5 * arrow, y), str(y), size_px=10)
