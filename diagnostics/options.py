"""
Loading of check options from JSON configuration files.

The file holds the same shape a caller would pass directly:

    {"standard": "WCAG2AA", "waitMs": 0, "ignore": ["notice"]}
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from diagnostics.models import CheckOptions

logger = logging.getLogger(__name__)

OPTIONS_FILE_ENV = "A11YGUARD_OPTIONS_FILE"
DEFAULT_OPTIONS_FILE = "a11yguard.json"


class OptionsError(ValueError):
    """Raised when check options are missing or invalid."""
    pass


def options_from_mapping(data: Mapping[str, Any]) -> CheckOptions:
    """
    Validate a mapping into CheckOptions.

    Args:
        data: Mapping with standard, waitMs and ignore keys

    Returns:
        Validated, immutable options

    Raises:
        OptionsError: If a field is missing or has the wrong type
    """
    if not isinstance(data, Mapping):
        raise OptionsError(f"Invalid options: expected object, got {type(data).__name__}")
    try:
        return CheckOptions.model_validate(dict(data))
    except ValidationError as e:
        raise OptionsError(f"Invalid options: {e}")


def load_options(path: Union[str, Path]) -> CheckOptions:
    """
    Read check options from a JSON file.

    Args:
        path: Path to the JSON options file

    Returns:
        Validated options

    Raises:
        OptionsError: If the file is missing, unreadable, or invalid
    """
    options_path = Path(path)
    try:
        with open(options_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise OptionsError(f"Options file not found: {options_path}")
    except json.JSONDecodeError as e:
        raise OptionsError(f"Invalid JSON in options file {options_path}: {e}")
    except OSError as e:
        raise OptionsError(f"Failed to read options file {options_path}: {e}")

    options = options_from_mapping(data)
    logger.info(f"Loaded options from {options_path} (standard={options.standard}, {len(options.ignore)} ignore rule(s))")
    return options


def options_from_env() -> CheckOptions:
    """Load options from the file named by A11YGUARD_OPTIONS_FILE."""
    path = os.environ.get(OPTIONS_FILE_ENV, DEFAULT_OPTIONS_FILE)
    return load_options(path)
