# asyncontract/config/loader.py
"""
Layered configuration loading.

    1. Package defaults (asyncontract/config/default.yaml) - always loaded
    2. Project config (asyncontract.yaml) - overrides defaults

The result is a complete ProjectConfig where every value exists. CLI flags
are applied on top by the commands themselves.

Usage:
    from asyncontract.config.loader import load_project_config

    config = load_project_config()               # ./asyncontract.yaml if present
    config = load_project_config("ci/asyncontract.yaml")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

from asyncontract.config.schema import ProjectConfig
from asyncontract.core.config import load_yaml, validate_config
from asyncontract.logging.logger import get_logger

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = "asyncontract.yaml"
DEFAULTS_PATH = Path(__file__).parent / "default.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Merge override into a copy of base.

    Nested dicts are merged recursively; lists and scalars are replaced.

    Examples:
        >>> deep_merge({"server": {"version": "1.0.0", "title": None}}, {"server": {"title": "shop"}})
        {'server': {'version': '1.0.0', 'title': 'shop'}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_defaults() -> Dict[str, Any]:
    return load_yaml(DEFAULTS_PATH)


def find_project_config(start: Optional[Path] = None) -> Optional[Path]:
    """asyncontract.yaml in the given (or current) directory, if any."""
    candidate = (start or Path.cwd()) / PROJECT_CONFIG_NAME
    return candidate if candidate.is_file() else None


def load_project_config(path: Union[str, Path, None] = None) -> ProjectConfig:
    """
    Load defaults merged with a project config file.

    Args:
        path: Explicit config file. When omitted, ./asyncontract.yaml is used
            if it exists, otherwise defaults alone.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist
        ConfigParseError: If the YAML is invalid
        ConfigValidationError: If the merged config doesn't match the schema
    """
    config_path = Path(path) if path is not None else find_project_config()
    merged = load_defaults()

    if config_path is not None:
        merged = deep_merge(merged, load_yaml(config_path))
        logger.debug(f"Loaded project config from {config_path}")

    return validate_config(merged, ProjectConfig, config_path)


__all__ = [
    "PROJECT_CONFIG_NAME",
    "deep_merge",
    "find_project_config",
    "load_defaults",
    "load_project_config",
]
