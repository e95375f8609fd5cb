from dataclasses import dataclass

import pytest

from area_engine.core.shape_registry import ShapeRegistry
from area_engine.core.shapes import Circle, Rectangle, Triangle


@dataclass(frozen=True)
class Square:
    side: float

    def area(self) -> float:
        return self.side * self.side


def test_default_registry_knows_builtin_kinds() -> None:
    registry = ShapeRegistry.default()
    assert registry.kinds() == ["rectangle", "circle", "triangle"]
    assert registry.dimensions_for("rectangle") == ("width", "height")


def test_create_builds_matching_variant() -> None:
    registry = ShapeRegistry.default()
    assert registry.create("rectangle", {"width": 10, "height": 20}) == Rectangle(10.0, 20.0)
    assert registry.create("Circle", {"radius": 5}) == Circle(5.0)
    assert registry.create("triangle", {"base": 1, "height": 2}) == Triangle(1.0, 2.0)


def test_register_extends_without_touching_builtins() -> None:
    registry = ShapeRegistry.default().register("square", Square, ["side"])
    assert registry.create("square", {"side": 3}).area() == 9.0
    assert "rectangle" in registry.kinds()


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown shape kind"):
        ShapeRegistry.default().create("hexagon", {"side": 1})


def test_duplicate_registration_is_rejected() -> None:
    with pytest.raises(ValueError, match="already registered"):
        ShapeRegistry.default().register("circle", Circle, ["radius"])


def test_dimension_mismatch_is_rejected() -> None:
    registry = ShapeRegistry.default()
    with pytest.raises(ValueError, match="missing dimensions: height"):
        registry.create("rectangle", {"width": 1})
    with pytest.raises(ValueError, match="unexpected dimensions: depth"):
        registry.create("circle", {"radius": 1, "depth": 2})
