"""
Configuration management for the binshrink package.

This module provides a clean interface for loading, validating, and accessing
configuration data from a TOML file with singleton pattern management.
"""

# Main configuration interface
from .manager import (
    CONFIG_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    clear_config_cache,
    get_config,
    is_config_loaded,
    resolve_config_path,
    set_config_path,
)

# For advanced usage - direct access to loaders and validators
from .loader import load_main_config, load_toml_file
from .validators import validate_tools_config, validate_wrapper_config

__all__ = [
    # Main interface
    "CONFIG_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "resolve_config_path",
    # Advanced interface
    "load_toml_file",
    "load_main_config",
    "validate_wrapper_config",
    "validate_tools_config",
]
