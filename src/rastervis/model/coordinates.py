"""
Grid <-> Pixel Mapping
======================
Shapes are specified in a logical "grid" space centered on the drawing surface:
x grows to the right, y grows UP. The drawing surface uses pixels with the
origin in the top-left corner and y growing DOWN.

`units_x` / `units_y` are the number of grid units spanning the whole surface
width / height, so the default of 20 gives a visible range of -10..10.
"""
from __future__ import annotations

from dataclasses import dataclass

from rastervis.config import UNITS_PER_AXIS
from rastervis.model.errors import InvalidGeometry
from rastervis.model.geometry_primitives import Point


def to_grid(
    pixel_point: Point,
    surface_width: float,
    surface_height: float,
    units_x: float = UNITS_PER_AXIS,
    units_y: float = UNITS_PER_AXIS,
) -> Point:
    """
    Convert absolute pixel coordinates to grid coordinates.

    Args:
        pixel_point: Point in pixels (origin top-left, y down).
        surface_width: Width of the drawing surface in pixels.
        surface_height: Height of the drawing surface in pixels.
        units_x: Grid units across the full width.
        units_y: Grid units across the full height.

    Returns:
        The same location in grid units (origin at the surface center, y up).
    """
    unit_width = surface_width / units_x
    unit_height = surface_height / units_y
    return Point(
        (pixel_point.x - surface_width / 2) / unit_width,
        (surface_height / 2 - pixel_point.y) / unit_height,
    )


def to_pixels(
    grid_point: Point,
    surface_width: float,
    surface_height: float,
    units_x: float = UNITS_PER_AXIS,
    units_y: float = UNITS_PER_AXIS,
) -> Point:
    """Inverse of `to_grid`."""
    unit_width = surface_width / units_x
    unit_height = surface_height / units_y
    return Point(
        surface_width / 2 + grid_point.x * unit_width,
        surface_height / 2 - grid_point.y * unit_height,
    )


@dataclass(frozen=True)
class CoordinateMapper:
    """Binds a surface size and unit counts so callers don't pass them around."""
    width: float
    height: float
    units_x: float = UNITS_PER_AXIS
    units_y: float = UNITS_PER_AXIS

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometry(f"Surface size must be positive, got {self.width}x{self.height}.")
        if self.units_x <= 0 or self.units_y <= 0:
            raise InvalidGeometry(f"Units per axis must be positive, got {self.units_x}x{self.units_y}.")

    @property
    def unit_width(self) -> float:
        return self.width / self.units_x

    @property
    def unit_height(self) -> float:
        return self.height / self.units_y

    def to_grid(self, pixel_point: Point) -> Point:
        return to_grid(pixel_point, self.width, self.height, self.units_x, self.units_y)

    def to_pixels(self, grid_point: Point) -> Point:
        return to_pixels(grid_point, self.width, self.height, self.units_x, self.units_y)

    def length_to_pixels(self, length: float) -> float:
        """Scale a grid length (e.g. a radius) to pixels using the vertical unit."""
        return length * self.unit_height

    def visible_units(self) -> tuple[int, int]:
        """Number of whole grid units from the center to the right and top edges."""
        return int(self.units_x / 2), int(self.units_y / 2)
