"""
Homogeneous 2D Geometry
=======================
Points and 3x3 transform matrices in homogeneous coordinates.

Convention
----------
A point is a ROW vector ``[x, y, w]`` and is multiplied from the left:

    p' = p . M

Consequently translation lives in the bottom row of a matrix, and
``A @ B`` means "apply A, then B". Everything in the rasterizers relies on
this ordering (rotation about a pivot, undoing reflections in reverse order).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TYPE_CHECKING
import math

import numpy as np

from rastervis.model.errors import InvalidMatrixShape

if TYPE_CHECKING:
    import numpy.typing as npt


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves go up (-0.5 -> 0, 0.5 -> 1)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Matrix3:
    """
    Immutable 3x3 transform stored as 9 coefficients in row-major order.

    Raises:
        InvalidMatrixShape: If the coefficient list does not have exactly 9 entries.
    """
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 9:
            raise InvalidMatrixShape(f"Expected 9 coefficients, got {len(values)}.")
        object.__setattr__(self, "values", values)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> Matrix3:
        arr = np.asarray(array, dtype=np.float64)
        if arr.shape != (3, 3):
            raise InvalidMatrixShape(f"Expected shape (3, 3), got {arr.shape}.")
        return cls(tuple(arr.ravel()))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.values, dtype=np.float64).reshape(3, 3)

    def __matmul__(self, other: Matrix3) -> Matrix3:
        # Row-vector convention: (p . self) . other == p . (self @ other)
        return Matrix3.from_array(self.to_array() @ other.to_array())

    # ---- factories ----

    @classmethod
    def identity(cls) -> Matrix3:
        return cls((1, 0, 0,
                    0, 1, 0,
                    0, 0, 1))

    @classmethod
    def translation(cls, dx: float, dy: float) -> Matrix3:
        return cls((1, 0, 0,
                    0, 1, 0,
                    dx, dy, 1))

    @classmethod
    def rotation(cls, angle_rad: float) -> Matrix3:
        """Counter-clockwise rotation about the origin."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return cls((cos_a, sin_a, 0,
                    -sin_a, cos_a, 0,
                    0, 0, 1))

    @classmethod
    def reflection_x(cls) -> Matrix3:
        """Mirror across the horizontal axis (y -> -y)."""
        return cls((1, 0, 0,
                    0, -1, 0,
                    0, 0, 1))

    @classmethod
    def reflection_y(cls) -> Matrix3:
        """Mirror across the vertical axis (x -> -x)."""
        return cls((-1, 0, 0,
                    0, 1, 0,
                    0, 0, 1))

    @classmethod
    def swap_xy(cls) -> Matrix3:
        """Mirror across the diagonal y = x."""
        return cls((0, 1, 0,
                    1, 0, 0,
                    0, 0, 1))


@dataclass(frozen=True)
class Point:
    """A point in homogeneous 2D coordinates. Every operation returns a new Point."""
    x: float
    y: float
    w: float = 1.0

    def __add__(self, other: Point) -> Point:
        # Offset by another point's x/y (e.g. moving an origin-centered point to a circle center)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.w)
        return NotImplemented

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.w], dtype=np.float64)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.w)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.w - other.w) ** 2)

    def transform(self, matrix: Matrix3) -> Point:
        r = self.to_array() @ matrix.to_array()
        return Point(float(r[0]), float(r[1]), float(r[2]))

    def translate(self, dx: float, dy: float) -> Point:
        return self.transform(Matrix3.translation(dx, dy))

    def rotate(self, angle_rad: float, pivot: Optional[Point] = None) -> Point:
        """Rotate counter-clockwise by `angle_rad` about `pivot` (origin by default)."""
        if pivot is None:
            return self.transform(Matrix3.rotation(angle_rad))
        m = (
            Matrix3.translation(-pivot.x, -pivot.y)
            @ Matrix3.rotation(angle_rad)
            @ Matrix3.translation(pivot.x, pivot.y)
        )
        return self.transform(m)

    def reflect_x(self) -> Point:
        return self.transform(Matrix3.reflection_x())

    def reflect_y(self) -> Point:
        return self.transform(Matrix3.reflection_y())

    def swap_xy(self) -> Point:
        return self.transform(Matrix3.swap_xy())

    def snapped(self) -> Point:
        """The nearest lattice point (weight kept)."""
        return Point(round_half_up(self.x), round_half_up(self.y), self.w)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


# -------------------------------------------------------------------------------
# Functional API
# -------------------------------------------------------------------------------

def distance(a: Point, b: Point) -> float:
    """Euclidean distance in (x, y, w) space."""
    return a.distance_to(b)


def apply_transform(point: Point, matrix: Matrix3) -> Point:
    return point.transform(matrix)


def compose_transforms(*matrices: Matrix3) -> Matrix3:
    """
    Compose transforms in application order.

    ``compose_transforms(a, b)`` is the matrix that applies `a` first, then `b`.
    """
    result = Matrix3.identity()
    for m in matrices:
        result = result @ m
    return result


def rotate(point: Point, angle_rad: float, pivot: Optional[Point] = None) -> Point:
    return point.rotate(angle_rad, pivot)


def reflect_x(point: Point) -> Point:
    return point.reflect_x()


def reflect_y(point: Point) -> Point:
    return point.reflect_y()


def swap_xy(point: Point) -> Point:
    return point.swap_xy()


def points_to_array(points: Iterable[Point]) -> npt.NDArray[np.float64]:
    """Stack points into an (N, 2) array of x/y coordinates."""
    arr = np.array([p.as_tuple() for p in points], dtype=np.float64)
    return arr.reshape(-1, 2)
