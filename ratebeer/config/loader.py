from __future__ import annotations
import json
from pathlib import Path
from typing import Union

import jsonschema

from .settings import ScraperSettings

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "ratebeer-config.schema.json"


class ConfigValidationError(Exception):
    pass


def load_settings(config_path: Union[str, Path]) -> ScraperSettings:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open() as f:
        data = json.load(f)
    _validate_schema(data, path)
    return _deserialize(data)


def _validate_schema(data: dict, path: Path) -> None:
    with _SCHEMA_PATH.open() as f:
        schema = json.load(f)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as exc:
        raise ConfigValidationError(
            f"Config file '{path}' failed schema validation: {exc.message}"
        ) from exc


def _deserialize(data: dict) -> ScraperSettings:
    # Environment values fill anything the file leaves out
    return ScraperSettings.from_env(**data)
