"""
Load a legacy app definition export from disk.
"""

import json
import logging
from pathlib import Path

import yaml

from app_convert.exceptions import DefinitionLoadError
from app_convert.models import LegacyApp
from app_convert.util.files import read_text

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_definition(path: str | Path) -> dict:
    """
    Read a legacy definition export into a plain mapping.

    JSON is assumed unless the file has a .yaml/.yml suffix.

    Raises:
        DefinitionLoadError: If the file cannot be read or parsed, or its
            top level is not a mapping
    """
    path = Path(path)
    try:
        content = read_text(path)
    except OSError as e:
        raise DefinitionLoadError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise DefinitionLoadError(str(path), f"not UTF-8 text: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DefinitionLoadError(str(path), f"parse error: {e}") from e

    if not isinstance(data, dict):
        raise DefinitionLoadError(
            str(path), f"expected a mapping at top level, got {type(data).__name__}"
        )

    return data


def load_legacy_app(path: str | Path) -> LegacyApp:
    """Load and coerce a legacy definition export."""
    legacy_app = LegacyApp.from_dict(load_definition(path))
    logger.debug(f"Loaded '{legacy_app.title}' with {legacy_app.step_count} steps from {path}")
    return legacy_app
