from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from area_engine.core.shapes import Circle, Rectangle, Shape, Triangle

ShapeFactory = Callable[..., Shape]


@dataclass(frozen=True)
class RegisteredShape:
    kind: str
    factory: ShapeFactory
    dimensions: tuple[str, ...]


class ShapeRegistry:
    def __init__(self) -> None:
        self.shapes: dict[str, RegisteredShape] = {}

    @classmethod
    def default(cls) -> "ShapeRegistry":
        registry = cls()
        registry.register("rectangle", Rectangle, ("width", "height"))
        registry.register("circle", Circle, ("radius",))
        registry.register("triangle", Triangle, ("base", "height"))
        return registry

    def register(self, kind: str, factory: ShapeFactory, dimensions: tuple[str, ...] | list[str]) -> "ShapeRegistry":
        key = kind.strip().lower()
        if not key:
            raise ValueError("Shape kind cannot be empty")
        if key in self.shapes:
            raise ValueError(f"Shape kind '{key}' is already registered")
        self.shapes[key] = RegisteredShape(kind=key, factory=factory, dimensions=tuple(dimensions))
        return self

    def kinds(self) -> list[str]:
        return list(self.shapes.keys())

    def dimensions_for(self, kind: str) -> tuple[str, ...]:
        return self._require(kind).dimensions

    def create(self, kind: str, dimensions: dict[str, float]) -> Shape:
        entry = self._require(kind)
        problems = self.dimension_problems(kind, dimensions)
        if problems:
            raise ValueError("; ".join(problems))
        return entry.factory(**{name: float(dimensions[name]) for name in entry.dimensions})

    def dimension_problems(self, kind: str, dimensions: dict[str, float]) -> list[str]:
        entry = self._require(kind)
        problems: list[str] = []
        missing = [name for name in entry.dimensions if name not in dimensions]
        extra = sorted(set(dimensions) - set(entry.dimensions))
        if missing:
            problems.append(f"Shape '{entry.kind}' is missing dimensions: {', '.join(missing)}")
        if extra:
            problems.append(f"Shape '{entry.kind}' got unexpected dimensions: {', '.join(extra)}")
        return problems

    def _require(self, kind: str) -> RegisteredShape:
        entry = self.shapes.get(kind.strip().lower())
        if not entry:
            raise ValueError(f"Unknown shape kind '{kind}'")
        return entry
