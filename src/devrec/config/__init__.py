"""Configuration management

YAML configuration file loading and management implementations.
"""

from .settings import (
    DevrecConfig,
    RepoConfig,
    LoggingConfig,
    load_config,
    get_default_config_path,
    expand_tilde,
)

__all__ = [
    "DevrecConfig",
    "RepoConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config_path",
    "expand_tilde",
]
