"""
Configuration management and singleton pattern.

This module provides the main configuration loading interface, implementing a
singleton pattern so the configuration is loaded only once per process.

The configuration file is looked up in this order:

1. The path given to set_config_path()
2. The BINSHRINK_CONFIG environment variable
3. conf/config.toml at the project root

A path from (1) or (2) must exist. The default path in (3) is optional; when
it is missing the built-in defaults are used, so the wrapper works with no
configuration at all.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from ..models.config import AppConfig
from ..validation import handle_config_error, validate_enum_choice, ErrorSeverity
from .loader import load_main_config
from .validators import LOG_LEVELS, validate_tools_config, validate_wrapper_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BINSHRINK_CONFIG"
LOG_LEVEL_ENV_VAR = "BINSHRINK_LOG_LEVEL"

# --- Global Singleton for Configuration ---

_CONFIG: Optional[AppConfig] = None

_DEFAULT_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"

# Set by set_config_path(); takes precedence over the environment.
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Optional[Path]) -> None:
    """
    Set a custom configuration file path.

    Args:
        config_path: Path to a config.toml file, or None to go back to
            environment/default lookup

    Note:
        The cached configuration is dropped so the next get_config()
        call reloads from the new location.
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path) if config_path is not None else None
    _CONFIG = None
    logger.debug(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def resolve_config_path() -> Tuple[Path, bool]:
    """
    Work out which configuration file to load.

    Returns:
        Tuple of (path, required). ``required`` is False only for the
        default location.
    """
    if _CONFIG_FILE_PATH is not None:
        return _CONFIG_FILE_PATH, True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return _DEFAULT_CONFIG_FILE_PATH, False


def _apply_env_overrides(app_config: AppConfig) -> AppConfig:
    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level:
        app_config.wrapper.log_level = validate_enum_choice(
            level,
            valid_choices=LOG_LEVELS,
            field_name=LOG_LEVEL_ENV_VAR,
            case_sensitive=False,
        )
    return app_config


def _load_config(config_path: Path, required: bool) -> AppConfig:
    """
    Load and validate the application configuration.

    Args:
        config_path: Path to the config.toml file
        required: Whether a missing file is an error

    Returns:
        Fully validated AppConfig instance

    Raises:
        FileNotFoundError: If a required configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if not required and not config_path.exists():
        logger.debug(f"No configuration file at {config_path}, using built-in defaults")
        return _apply_env_overrides(AppConfig())

    try:
        main_config_data = load_main_config(config_path)

        app_config = AppConfig(
            wrapper=validate_wrapper_config(main_config_data.get("wrapper", {})),
            tools=validate_tools_config(main_config_data.get("tools", {})),
            source=config_path,
        )

        logger.debug(f"Loaded configuration from {config_path}")
        return _apply_env_overrides(app_config)

    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise
    except Exception as e:
        handle_config_error(
            error=e,
            context="processing configuration",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> AppConfig:
    """
    Get the global application configuration, loading it if necessary.

    Returns:
        The singleton AppConfig instance

    Raises:
        FileNotFoundError: If a required configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    global _CONFIG
    if _CONFIG is None:
        config_path, required = resolve_config_path()
        _CONFIG = _load_config(config_path, required)
    return _CONFIG


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None
