from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from area_engine.config.schemas import ShapesConfig, config_error


class ConfigLoader:
    @staticmethod
    def read_mapping(path: Path | str) -> dict[str, Any]:
        source = Path(path)
        payload = yaml.safe_load(source.read_text(encoding="utf-8"))
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValueError(f"{source}: expected a mapping at the YAML root, got {type(payload).__name__}")
        return payload

    @classmethod
    def load_shapes_config(cls, path: Path | str) -> ShapesConfig:
        payload = cls.read_mapping(path)
        try:
            return ShapesConfig.model_validate(payload)
        except ValidationError as error:
            raise config_error(str(path), error) from error
