import pytest

from transformviz import config
from transformviz.app.render import RenderStyle, render
from transformviz.model.geometry import CoordinateMapper, Point
from transformviz.model.transform import Matrix2x2


def test_empty_render_draws_only_axes(surface, mapper):
    render(surface, (), Matrix2x2.identity(), mapper)
    assert surface.calls == [
        ("clear",),
        ("line", 0.0, 250.0, 500.0, 250.0, config.AXIS_COLOR, config.AXIS_WIDTH),
        ("line", 250.0, 0.0, 250.0, 500.0, config.AXIS_COLOR, config.AXIS_WIDTH),
    ]


def test_order_of_operations(surface, mapper):
    points = (Point(10, 20), Point(-5, 0))
    render(surface, points, Matrix2x2(2, 0, 0, 2), mapper)
    assert surface.kinds() == [
        "clear", "line", "line",
        "filled_circle", "filled_circle",
        "stroked_circle", "stroked_circle",
    ]


def test_markers_positions_and_styles(surface, mapper):
    style = RenderStyle()
    points = (Point(10, 20), Point(-5, 0))
    render(surface, points, Matrix2x2(2, 0, 0, 2), mapper, style)

    originals = [c for c in surface.calls if c[0] == "filled_circle"]
    assert originals == [
        ("filled_circle", 260.0, 230.0, style.marker_radius, style.original_color),
        ("filled_circle", 245.0, 250.0, style.marker_radius, style.original_color),
    ]
    transformed = [c for c in surface.calls if c[0] == "stroked_circle"]
    assert transformed == [
        ("stroked_circle", 270.0, 210.0, style.marker_radius, style.transformed_color, style.transformed_width),
        ("stroked_circle", 240.0, 250.0, style.marker_radius, style.transformed_color, style.transformed_width),
    ]


def test_rotation_marker(surface, mapper):
    render(surface, (Point(1, 0),), Matrix2x2(0, -1, 1, 0), mapper)
    (call,) = [c for c in surface.calls if c[0] == "stroked_circle"]
    # plane (0, 1) is one pixel above the origin
    assert call[1:3] == pytest.approx((250.0, 249.0))


def test_render_is_deterministic(surface, mapper):
    points = (Point(1.5, -3), Point(100, 40), Point(1.5, -3))
    m = Matrix2x2(0.5, 1.2, -3.0, 4.1)
    first, second = surface, type(surface)()
    render(first, points, m, mapper)
    render(second, points, m, mapper)
    assert first.calls == second.calls


def test_custom_style_and_unflipped_mapper(surface):
    mapper = CoordinateMapper(200, 100, y_up=False)
    style = RenderStyle(original_color="green", marker_radius=3.0)
    render(surface, (Point(10, 10),), Matrix2x2.identity(), mapper, style)
    assert ("filled_circle", 110.0, 60.0, 3.0, "green") in surface.calls
