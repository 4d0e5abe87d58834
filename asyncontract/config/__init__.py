# asyncontract/config/__init__.py
from asyncontract.config.loader import (
    PROJECT_CONFIG_NAME,
    deep_merge,
    find_project_config,
    load_project_config,
)
from asyncontract.config.schema import ClientConfig, PatternConfig, ProjectConfig, ServerConfig

__all__ = [
    "PROJECT_CONFIG_NAME",
    "deep_merge",
    "find_project_config",
    "load_project_config",
    "ClientConfig",
    "PatternConfig",
    "ProjectConfig",
    "ServerConfig",
]
