import json
from pathlib import Path

from pydantic import ValidationError

from mcp_introspection.logging import get_logger
from mcp_introspection.models.config import Config

logger = get_logger("utils")


def load_config(path: str | Path) -> Config:
    """
    Load and validate a JSON config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or does not match the
            config schema.
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse config JSON in {path}: {e}") from e

    try:
        config = Config.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}:\n{e}") from e

    logger.debug(f"Loaded config from {path}")
    return config


def config_dir_for(path: str | Path) -> Path:
    """Return the directory relative paths in the config file resolve against."""
    return Path(path).resolve().parent
