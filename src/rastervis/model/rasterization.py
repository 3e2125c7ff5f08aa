"""
Rasterization Algorithms
========================
Bresenham's line algorithm and the midpoint circle algorithm over grid
coordinates. Both are pure functions: every call recomputes its whole
sequence and returns a fresh list.

Line
----
The inner sweep only handles one octant: x increasing, y non-increasing,
|dy| <= |dx|. Any other segment is first rotated / reflected into that octant,
swept, and each produced point is transformed back.

Circle
------
Only the first octant (0 <= x <= y) is computed. `mirror_octants` replicates a
point into the other seven; `rasterize_circle` does both and offsets by the
center.
"""
from __future__ import annotations

import logging
import math

from rastervis.model.errors import InvalidGeometry
from rastervis.model.geometry_primitives import Point, round_half_up

logger = logging.getLogger(__name__)


def _require_finite(*points: Point) -> None:
    for p in points:
        if not p.is_finite():
            raise InvalidGeometry(f"Non-finite coordinates: ({p.x}, {p.y}, {p.w}).")


def rasterize_line(start: Point, end: Point, *, include_endpoints: bool = False) -> list[Point]:
    """
    Lattice points of the segment `start` -> `end`, ordered from start to end.

    Args:
        start: First endpoint in grid coordinates.
        end: Second endpoint in grid coordinates.
        include_endpoints: If False (default), both endpoints are left out of the
            result and only the points strictly between them are returned.

    Returns:
        List of integer grid points. Reversing the arguments reverses the list.

    Raises:
        InvalidGeometry: If any coordinate is NaN or infinite.
    """
    _require_finite(start, end)

    p1 = start.snapped()
    p2 = end.snapped()

    if (p1.x, p1.y) == (p2.x, p2.y):
        return [p1] if include_endpoints else []

    # Always sweep from the lexicographically smaller endpoint so that the tie
    # breaking in the error term does not depend on argument order.
    if (p1.x, p1.y) > (p2.x, p2.y):
        return rasterize_line(p2, p1, include_endpoints=include_endpoints)[::-1]

    rotate_angle = 0.0
    reflect_x = False
    reflect_y = False

    # Steep -> shallow
    if abs(p2.x - p1.x) < abs(p2.y - p1.y):
        rotate_angle = -math.copysign(math.pi / 2, p2.y - p1.y)
        p1 = p1.rotate(rotate_angle).snapped()
        p2 = p2.rotate(rotate_angle).snapped()

    # The sweep walks y downwards
    if p1.y < p2.y:
        p1 = p1.reflect_x()
        p2 = p2.reflect_x()
        reflect_x = True

    # The sweep walks x to the right
    if p1.x > p2.x:
        p1 = p1.reflect_y()
        p2 = p2.reflect_y()
        reflect_y = True

    x1, y1 = int(p1.x), int(p1.y)
    x2, y2 = int(p2.x), int(p2.y)

    delta_x = x2 - x1
    delta_y = abs(y2 - y1)
    error = 0
    y = y1

    result: list[Point] = []
    for x in range(x1, x2 + 1):
        if include_endpoints or x1 < x < x2:
            p = Point(x, y)
            if reflect_y:
                p = p.reflect_y()
            if reflect_x:
                p = p.reflect_x()
            if rotate_angle:
                p = p.rotate(-rotate_angle)
            result.append(p.snapped())
        error += delta_y
        if error * 2 > delta_x:
            y -= 1
            error -= delta_x

    logger.debug("Line %s -> %s rasterized into %d points", start.as_tuple(), end.as_tuple(), len(result))
    return result


def rasterize_circle_octant(radius: float) -> list[Point]:
    """
    First-octant lattice points of a circle centered at the origin.

    The radius is snapped to the nearest integer. Points start at (0, r) and
    run clockwise until y < x, so every point satisfies 0 <= x <= y.

    Decision function f(x, y) = x^2 + y^2 - r^2 evaluated at the midpoint
    M = (x + 1, y - 1/2) between the E and SE candidates:

        f(M0) = 5/4 - r          (1 - r is used; the 1/4 never changes the sign test)
        after E:   f += 2x + 3
        after SE:  f += 2x - 2y + 5

    Raises:
        InvalidGeometry: If the radius is negative or not finite.
    """
    if not math.isfinite(radius):
        raise InvalidGeometry(f"Radius must be finite, got {radius}.")
    if radius < 0:
        raise InvalidGeometry(f"Radius must not be negative, got {radius}.")

    r = round_half_up(radius)
    x = 0
    y = r
    error = 1 - r
    delta_e = 3
    delta_se = 5 - 2 * r

    result: list[Point] = []
    while y >= x:
        result.append(Point(x, y))
        if error >= 0:
            y -= 1
            error += delta_se
            delta_se += 4
        else:
            error += delta_e
            delta_se += 2
        delta_e += 2
        x += 1

    return result


def mirror_octants(point: Point) -> list[Point]:
    """
    The eight symmetric images of a first-octant point.

    Order: p, p reflected over X, over Y, over both, and the same four for
    p with x and y swapped. Points on an axis or diagonal produce duplicates.
    """
    swapped = point.swap_xy()
    return [
        point,
        point.reflect_x(),
        point.reflect_y(),
        point.reflect_x().reflect_y(),
        swapped,
        swapped.reflect_x(),
        swapped.reflect_y(),
        swapped.reflect_x().reflect_y(),
    ]


def rasterize_circle(center: Point, radius: float) -> list[list[Point]]:
    """
    Full circle as groups of eight points, one group per first-octant point.

    Each group holds the mirrored images already offset by `center`.
    """
    _require_finite(center)
    return [
        [center + p for p in mirror_octants(octant_point)]
        for octant_point in rasterize_circle_octant(radius)
    ]
