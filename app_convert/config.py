"""
Configuration loading for app-convert.

Settings live in an optional ``app-convert.yaml``. Every key has a default,
so a missing file is not an error; a present file is validated against the
bundled JSON schema.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from app_convert.convert.fields import MIN_HELP_TEXT_LENGTH
from app_convert.convert.package import DEFAULT_PLATFORM_CORE_VERSION
from app_convert.exceptions import InvalidConfigError

CONFIG_FILE_NAME = "app-convert.yaml"
SCHEMA_FILE = Path(__file__).parent / "schema" / "config.schema.json"

logger = logging.getLogger(__name__)


@dataclass
class ConvertConfig:
    """Settings that tune the conversion."""

    min_help_text_length: int = MIN_HELP_TEXT_LENGTH
    max_workers: int | None = None
    platform_core_version: str = DEFAULT_PLATFORM_CORE_VERSION

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _validate_config_schema(config: dict) -> None:
    """Validate config against JSON schema."""
    schema = json.loads(SCHEMA_FILE.read_text(encoding="utf-8"))
    try:
        validate(instance=config, schema=schema)
    except ValidationError as e:
        path = ".".join(str(p) for p in e.path) or "<root>"
        raise InvalidConfigError(f"{e.message} (at {path})") from e


def load_config(path: str | Path | None = None) -> ConvertConfig:
    """
    Load configuration.

    Args:
        path: Explicit config file. When None, ``app-convert.yaml`` in the
            current directory is used if it exists.

    Returns:
        ConvertConfig with file values over defaults

    Raises:
        InvalidConfigError: If an explicit file is missing, or a file is
            not valid YAML or fails schema validation
    """
    if path is None:
        config_file = Path.cwd() / CONFIG_FILE_NAME
        if not config_file.exists():
            logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
            return ConvertConfig()
    else:
        config_file = Path(path)
        if not config_file.exists():
            raise InvalidConfigError(f"file not found: {config_file}")

    try:
        with open(config_file, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"{config_file}: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidConfigError(f"{config_file}: not UTF-8 text: {e}") from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(config).__name__}")

    _validate_config_schema(config)
    logger.debug(f"Loaded configuration from {config_file}")

    return ConvertConfig(**config)


def write_default_config(directory: str | Path) -> Path:
    """Write ``app-convert.yaml`` with default values into ``directory``."""
    config_file = Path(directory) / CONFIG_FILE_NAME
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(ConvertConfig().to_dict(), f, default_flow_style=False, sort_keys=False)
    return config_file
