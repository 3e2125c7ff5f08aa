"""
Drawable Shapes
===============
Value types for the two shapes the user can define. They validate themselves
on construction and delegate to `rastervis.model.rasterization`.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

from rastervis.model.errors import InvalidGeometry
from rastervis.model.geometry_primitives import Point
from rastervis.model.rasterization import rasterize_line, rasterize_circle_octant, rasterize_circle


@dataclass(frozen=True)
class Line:
    """A straight segment between two grid points."""
    start: Point
    end: Point

    def __post_init__(self) -> None:
        for p in (self.start, self.end):
            if not p.is_finite():
                raise InvalidGeometry(f"Line endpoint ({p.x}, {p.y}) is not finite.")

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def reverse(self) -> Line:
        return Line(start=self.end, end=self.start)

    def rasterize(self, include_endpoints: bool = False) -> list[Point]:
        return rasterize_line(self.start, self.end, include_endpoints=include_endpoints)


@dataclass(frozen=True)
class Circle:
    """A circle given by its center (grid point) and radius (grid units)."""
    center: Point
    radius: float

    def __post_init__(self) -> None:
        if not self.center.is_finite() or not math.isfinite(self.radius):
            raise InvalidGeometry("Circle center and radius must be finite.")
        if self.radius < 0:
            raise InvalidGeometry(f"Circle radius must not be negative, got {self.radius}.")

    def octant(self) -> list[Point]:
        """First-octant points relative to the center (not translated)."""
        return rasterize_circle_octant(self.radius)

    def rasterize(self) -> list[list[Point]]:
        """All points, grouped by octant step and translated to the center."""
        return rasterize_circle(self.center, self.radius)
