from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from area_engine.core.shapes import Shape


def total_area(shapes: Iterable[Shape]) -> float:
    total = 0.0
    for shape in shapes:
        total += shape.area()
    return total


@dataclass(frozen=True)
class ShapeContribution:
    index: int
    kind: str
    area: float


@dataclass
class AreaBreakdown:
    total: float
    contributions: list[ShapeContribution] = field(default_factory=list)

    @property
    def shape_count(self) -> int:
        return len(self.contributions)


class ShapeAreaCalculator:
    """Sums areas through the shared capability only, never by concrete shape type."""

    def calculate_area(self, shapes: Iterable[Shape]) -> float:
        return total_area(shapes)

    def breakdown(self, shapes: Iterable[Shape]) -> AreaBreakdown:
        total = 0.0
        contributions: list[ShapeContribution] = []
        for index, shape in enumerate(shapes):
            area = shape.area()
            total += area
            contributions.append(ShapeContribution(index=index, kind=type(shape).__name__, area=area))
        return AreaBreakdown(total=total, contributions=contributions)
