"""
Drawing Surface
Thin wrapper around QPainter that accepts grid coordinates.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QPainter, QPen, QColor, QBrush, QFont

from rastervis.model.coordinates import CoordinateMapper
from rastervis.model.geometry_primitives import Point


class PainterSurface:
    def __init__(self, painter: QPainter, mapper: CoordinateMapper) -> None:
        self.painter = painter
        self.mapper = mapper

    def _px(self, p: Point) -> QPointF:
        q = self.mapper.to_pixels(p)
        return QPointF(q.x, q.y)

    def clear(self, color: str = "#FFFFFF") -> None:
        self.painter.fillRect(0, 0, int(self.mapper.width), int(self.mapper.height), QColor(color))

    def draw_line(self, p1: Point, p2: Point, color: str = "#000000", width: float = 1.0) -> None:
        self.painter.setPen(QPen(QColor(color), width))
        self.painter.drawLine(self._px(p1), self._px(p2))

    def draw_circle(self, center: Point, radius: float, filled: bool = False, color: str = "#000000") -> None:
        """`radius` is in grid units."""
        r = self.mapper.length_to_pixels(radius)
        self.painter.setPen(QPen(QColor(color), 1.0))
        self.painter.setBrush(QBrush(QColor(color)) if filled else Qt.BrushStyle.NoBrush)
        self.painter.drawEllipse(self._px(center), r, r)

    def draw_text(self, p: Point, text: str, size_px: int = 20, color: str = "#000000") -> None:
        """Text horizontally centered on `p`, baseline at `p` (like canvas fillText)."""
        font = QFont("Verdana")
        font.setPixelSize(size_px)
        self.painter.setFont(font)
        self.painter.setPen(QPen(QColor(color)))
        anchor = self._px(p)
        width = self.painter.fontMetrics().horizontalAdvance(text)
        self.painter.drawText(QPointF(anchor.x() - width / 2, anchor.y()), text)
