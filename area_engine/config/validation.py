from __future__ import annotations

from dataclasses import dataclass, field

from area_engine.config.schemas import ShapesConfig
from area_engine.core.contracts import InputValidator, NonNegativeValidator
from area_engine.core.shape_registry import ShapeRegistry


@dataclass
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValueError("Shape config rejected: " + "; ".join(self.errors))


class RuntimeValidator:
    @staticmethod
    def validate_shapes(
        config: ShapesConfig,
        registry: ShapeRegistry,
        validator: InputValidator | None = None,
    ) -> ValidationReport:
        report = ValidationReport()
        validator = validator or NonNegativeValidator()
        known_kinds = set(registry.kinds())

        for group in config.list_groups():
            for index, shape in enumerate(config.get_group(group)):
                where = f"{group}[{index}]"
                if shape.type not in known_kinds:
                    report.errors.append(f"Unknown shape kind '{shape.type}' at {where}")
                    continue

                dimensions = shape.dimensions()
                for problem in registry.dimension_problems(shape.type, dimensions):
                    report.errors.append(f"{problem} at {where}")

                # Negative sizes are still computed; they are only flagged.
                for name, value in dimensions.items():
                    if not validator.is_valid(value):
                        report.warnings.append(f"Dimension '{name}'={value} at {where} is not a non-negative number")

        return report
