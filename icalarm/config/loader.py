"""Load icalarm configuration from disk and the environment."""

import json
from pathlib import Path

import pydantic
from loguru import logger

from icalarm.config.schema import Config
from icalarm.errors import ValidationError


def get_config_path() -> Path:
    """Default location of the config file."""
    return Path.home() / ".icalarm" / "config.json"


def load_config(path: Path | None = None) -> Config:
    """Build a Config from a JSON file (if present) plus ``ICALARM_*`` variables.

    Values from the environment override values from the file.
    """
    path = path or get_config_path()
    data: dict = {}

    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Config file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"Config file {path} must contain a JSON object")
        logger.debug(f"Loaded config from {path}")

    try:
        file_config = Config.model_validate(data)
        env_config = Config()
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid configuration: {e}") from e

    # only fields the environment actually set, even when they equal the default
    merged = file_config.model_dump()
    for section in env_config.model_fields_set:
        values = getattr(env_config, section)
        merged.setdefault(section, {}).update(values.model_dump(include=values.model_fields_set))
    return Config.model_validate(merged)
