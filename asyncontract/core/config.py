# asyncontract/core/config.py
"""
Config file reading and validation, separate from the layering in
asyncontract.config.loader.

Usage:
    from asyncontract.core.config import load_yaml, validate_config

    raw = load_yaml("asyncontract.yaml")
    config = validate_config(raw, ProjectConfig, "asyncontract.yaml")

Every error is a ConfigurationError that names the offending file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from asyncontract.core.exceptions import ConfigurationError
from asyncontract.logging.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# =============================================================================
# Errors
# =============================================================================


class ConfigFileError(ConfigurationError):
    """A config file problem; carries the file."""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(f"{message} (file: {path})" if path is not None else message)


class ConfigNotFoundError(ConfigFileError):
    pass


class ConfigParseError(ConfigFileError):
    """Not YAML, or not a mapping at the top level."""

    pass


class ConfigValidationError(ConfigFileError):
    """Parsed fine but rejected by the config schema."""

    pass


# =============================================================================
# Reading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML mapping. An empty file reads as {}.

    Raises:
        ConfigNotFoundError: No such file
        ConfigParseError: Invalid YAML or a non-mapping root
    """
    p = Path(path)

    if not p.is_file():
        reason = "Config path is a directory" if p.is_dir() else "Config file not found"
        raise ConfigNotFoundError(reason, path=p)

    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Config is not valid YAML: {e}", path=p) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(f"Config root must be a mapping, got {type(data).__name__}", path=p)

    logger.debug(f"Read config file {p}")
    return data


def validate_config(
    data: Dict[str, Any],
    schema: Type[ModelT],
    path: Union[str, Path, None] = None,
) -> ModelT:
    """Validate a merged mapping; path only labels the error."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=path) from e


__all__ = [
    "ConfigFileError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_yaml",
    "validate_config",
]
