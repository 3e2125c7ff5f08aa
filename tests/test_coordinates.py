import pytest

from rastervis.model.coordinates import CoordinateMapper, to_grid, to_pixels
from rastervis.model.errors import InvalidGeometry
from rastervis.model.geometry_primitives import Point

GRID_POINTS = [Point(0, 0), Point(1, 1), Point(-10, 10), Point(3.25, -7.5), Point(12, -0.001)]


def test_center_maps_to_origin():
    assert to_grid(Point(400, 300), 800, 600, 20, 20) == Point(0, 0)


def test_y_axis_is_inverted():
    # one unit = 40 px horizontally, 30 px vertically
    assert to_grid(Point(440, 270), 800, 600, 20, 20) == Point(1, 1)
    assert to_pixels(Point(1, 1), 800, 600, 20, 20) == Point(440, 270)
    assert to_pixels(Point(-10, -10), 800, 600, 20, 20) == Point(0, 600)


def test_default_units_per_axis():
    assert to_pixels(Point(10, 10), 800, 800) == Point(800, 0)


@pytest.mark.parametrize("p", GRID_POINTS)
@pytest.mark.parametrize("size", [(800, 600), (333, 777), (1, 1)])
@pytest.mark.parametrize("units", [(20, 20), (7, 13)])
def test_round_trip(p, size, units):
    w, h = size
    ux, uy = units
    back = to_grid(to_pixels(p, w, h, ux, uy), w, h, ux, uy)
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)

    pixel = Point(p.x * 17 + 3, p.y * -5 + 11)
    again = to_pixels(to_grid(pixel, w, h, ux, uy), w, h, ux, uy)
    assert again.x == pytest.approx(pixel.x)
    assert again.y == pytest.approx(pixel.y)


def test_mapper_matches_functions():
    mapper = CoordinateMapper(width=640, height=480, units_x=16, units_y=12)
    p = Point(2.5, -1)
    assert mapper.to_pixels(p) == to_pixels(p, 640, 480, 16, 12)
    assert mapper.to_grid(mapper.to_pixels(p)) == p
    assert mapper.unit_width == 40
    assert mapper.unit_height == 40
    assert mapper.length_to_pixels(0.5) == 20
    assert mapper.visible_units() == (8, 6)


@pytest.mark.parametrize("kwargs", [
    {"width": 0, "height": 100},
    {"width": 100, "height": -1},
    {"width": 100, "height": 100, "units_x": 0},
])
def test_mapper_rejects_degenerate_surface(kwargs):
    with pytest.raises(InvalidGeometry):
        CoordinateMapper(**kwargs)
