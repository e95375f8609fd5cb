import math

import pytest

from area_engine.core.shapes import Circle, Rectangle, Shape, Triangle


@pytest.mark.parametrize("width,height", [(0.0, 0.0), (10.0, 20.0), (2.5, 4.0), (1e6, 3.0)])
def test_rectangle_area_is_width_times_height(width: float, height: float) -> None:
    assert Rectangle(width, height).area() == width * height


@pytest.mark.parametrize("radius", [0.0, 1.0, 5.0, 12.75])
def test_circle_area_matches_reference_pi(radius: float) -> None:
    assert Circle(radius).area() == pytest.approx(math.pi * radius**2, abs=1e-9)


@pytest.mark.parametrize("base,height", [(0.0, 7.0), (10.0, 20.0), (3.0, 3.0)])
def test_triangle_area_is_half_base_times_height(base: float, height: float) -> None:
    assert Triangle(base, height).area() == 0.5 * base * height


def test_negative_dimensions_are_computed_not_rejected() -> None:
    assert Rectangle(-2.0, 3.0).area() == -6.0
    assert Triangle(4.0, -1.0).area() == -2.0
    assert Circle(-1.0).area() == pytest.approx(math.pi)


def test_variants_satisfy_shape_protocol() -> None:
    for shape in (Rectangle(1, 2), Circle(1), Triangle(1, 2)):
        assert isinstance(shape, Shape)
    assert not isinstance("not a shape", Shape)


def test_shapes_are_immutable() -> None:
    rectangle = Rectangle(1.0, 2.0)
    with pytest.raises(AttributeError):
        rectangle.width = 5.0  # type: ignore[misc]


def test_circle_area_uses_radius_squared() -> None:
    radius = 0.1 + 0.2
    assert Circle(radius).area() == math.pi * radius**2
