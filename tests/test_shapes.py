import math

import pytest

from rastervis.model.errors import InvalidGeometry, ParseFailure
from rastervis.model.geometry_primitives import Point
from rastervis.model.parsing import circle_from_fields, line_from_fields, parse_number
from rastervis.model.rasterization import rasterize_line
from rastervis.model.shapes import Circle, Line


def test_line_delegates_to_rasterizer():
    line = Line(Point(-3, 4), Point(6, -1))
    assert line.rasterize() == rasterize_line(line.start, line.end)
    assert line.rasterize(include_endpoints=True)[0] == Point(-3, 4)


def test_line_length_and_reverse():
    line = Line(Point(0, 0), Point(3, 4))
    assert line.length == pytest.approx(5.0)
    assert line.reverse() == Line(Point(3, 4), Point(0, 0))
    assert line.reverse().rasterize() == line.rasterize()[::-1]


def test_line_rejects_non_finite_endpoint():
    with pytest.raises(InvalidGeometry):
        Line(Point(math.inf, 0), Point(0, 0))


def test_circle_validation():
    with pytest.raises(InvalidGeometry):
        Circle(Point(0, 0), -1)
    with pytest.raises(InvalidGeometry):
        Circle(Point(0, math.nan), 1)
    with pytest.raises(InvalidGeometry):
        Circle(Point(0, 0), math.inf)


def test_circle_octant_is_relative_to_center():
    circle = Circle(Point(10, 10), 5)
    assert circle.octant()[0] == Point(0, 5)
    assert circle.rasterize()[0][0] == Point(10, 15)


@pytest.mark.parametrize("text, expected", [
    ("3", 3.0), (" -2.5 ", -2.5), ("1e2", 100.0), ("+0.25", 0.25),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1..2", "3,5", None])
def test_parse_number_failures(text):
    with pytest.raises(ParseFailure):
        parse_number(text)


def test_line_from_fields():
    assert line_from_fields("0", "0", "5", "2") == Line(Point(0, 0), Point(5, 2))


def test_line_from_fields_with_missing_value():
    with pytest.raises(ParseFailure):
        line_from_fields("0", "", "5", "2")


def test_line_from_fields_non_finite():
    with pytest.raises(InvalidGeometry):
        line_from_fields("nan", "0", "5", "2")


def test_circle_from_fields():
    assert circle_from_fields("1", "-1", "4") == Circle(Point(1, -1), 4.0)
    with pytest.raises(InvalidGeometry):
        circle_from_fields("0", "0", "-1")
    with pytest.raises(ParseFailure):
        circle_from_fields("0", "x", "1")


def test_parse_failure_is_a_value_error():
    # Callers that only know about ValueError still catch it
    with pytest.raises(ValueError):
        parse_number("?")
