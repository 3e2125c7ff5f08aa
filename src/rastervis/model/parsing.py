"""
Text Field Parsing
==================
Turns the raw strings typed into the input fields into shapes.
"""
from __future__ import annotations

from rastervis.model.errors import ParseFailure
from rastervis.model.geometry_primitives import Point
from rastervis.model.shapes import Line, Circle


def parse_number(text: str | None) -> float:
    """
    Parse one numeric field.

    Raises:
        ParseFailure: If the field is empty or not a number.
    """
    if text is None:
        raise ParseFailure("Field is empty.")
    stripped = text.strip()
    if not stripped:
        raise ParseFailure("Field is empty.")
    try:
        return float(stripped)
    except ValueError:
        raise ParseFailure(f"'{stripped}' is not a number.") from None


def line_from_fields(x1: str, y1: str, x2: str, y2: str) -> Line:
    """
    Build a Line from four text fields.

    Raises:
        ParseFailure: If any field is not a number.
        InvalidGeometry: If a coordinate is not finite (e.g. 'inf').
    """
    return Line(
        start=Point(parse_number(x1), parse_number(y1)),
        end=Point(parse_number(x2), parse_number(y2)),
    )


def circle_from_fields(x: str, y: str, r: str) -> Circle:
    """
    Build a Circle from center and radius text fields.

    Raises:
        ParseFailure: If any field is not a number.
        InvalidGeometry: If the radius is negative or a value is not finite.
    """
    return Circle(center=Point(parse_number(x), parse_number(y)), radius=parse_number(r))
