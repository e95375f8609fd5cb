from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

BASE_GROUP = "base"


class ShapeDefinition(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str

    @field_validator("type")
    @classmethod
    def normalize_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("shape type cannot be empty")
        return normalized

    @model_validator(mode="after")
    def validate_dimensions_numeric(self) -> "ShapeDefinition":
        for name, value in (self.model_extra or {}).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"dimension '{name}' of shape '{self.type}' must be a number")
            try:
                float(value)
            except OverflowError as error:
                raise ValueError(f"dimension '{name}' of shape '{self.type}' is out of range") from error
        return self

    def dimensions(self) -> dict[str, float]:
        return {name: float(value) for name, value in (self.model_extra or {}).items()}


class ShapesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int
    shapes: list[ShapeDefinition] = Field(default_factory=list)
    groups: dict[str, list[ShapeDefinition]] = Field(default_factory=dict)

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only shapes config version=1 is supported")
        return value

    @field_validator("groups")
    @classmethod
    def validate_group_names(cls, value: dict[str, list[ShapeDefinition]]) -> dict[str, list[ShapeDefinition]]:
        if BASE_GROUP in value:
            raise ValueError(f"'{BASE_GROUP}' is reserved for the top-level shapes list")
        return value

    def list_groups(self) -> list[str]:
        return [BASE_GROUP, *self.groups.keys()]

    def get_group(self, name: str) -> list[ShapeDefinition]:
        if name == BASE_GROUP:
            return self.shapes
        if name not in self.groups:
            raise KeyError(f"Unknown shape group '{name}'")
        return self.groups[name]


def config_error(source: str, error: ValidationError) -> ValueError:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.append(f"{location}: {item['msg']}")
    return ValueError(f"Invalid shapes config {source}: " + "; ".join(problems))
