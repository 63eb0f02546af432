"""
Configuration validation utilities.

This module turns the raw `[wrapper]` and `[tools]` tables into validated
WrapperConfig and ToolsConfig instances. Missing keys fall back to the
dataclass defaults, so an empty file is a valid configuration.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import ToolsConfig, WrapperConfig
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_file_name,
    validate_non_empty_string,
    validate_positive_integer,
    validate_string_list,
    validate_suffix,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
EXECUTION_MODES = ["native", "script"]

_KNOWN_WRAPPER_KEYS = {"target_dir", "artifact_names", "min_compress_size", "log_level", "mode"}
_TOOL_ROLES = ("packer", "archiver", "compressor", "stripper")
_SUFFIXED_ROLES = ("archiver", "compressor")


def _warn_unknown_keys(section: str, data: Dict[str, Any], known: set) -> None:
    for key in sorted(set(data) - known):
        logger.warning(f"Ignoring unknown key '{section}.{key}' in configuration")


def validate_wrapper_config(wrapper_data: Dict[str, Any]) -> WrapperConfig:
    """
    Validate and create a WrapperConfig from raw configuration data.

    Args:
        wrapper_data: Raw `[wrapper]` table from TOML

    Returns:
        Validated WrapperConfig instance

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(wrapper_data, dict):
        raise ValidationError("[wrapper] must be a table", field_name="wrapper")

    defaults = WrapperConfig()
    _warn_unknown_keys("wrapper", wrapper_data, _KNOWN_WRAPPER_KEYS)

    target_dir = validate_non_empty_string(
        wrapper_data.get("target_dir", str(defaults.target_dir)),
        field_name="wrapper.target_dir",
    )

    raw_names = validate_string_list(
        wrapper_data.get("artifact_names", defaults.artifact_names),
        field_name="wrapper.artifact_names",
        allow_empty=False,
    )
    artifact_names = [
        validate_file_name(name, field_name=f"wrapper.artifact_names item {i}")
        for i, name in enumerate(raw_names)
    ]

    min_compress_size = validate_positive_integer(
        wrapper_data.get("min_compress_size", defaults.min_compress_size),
        min_value=0,
        field_name="wrapper.min_compress_size",
    )

    log_level = validate_enum_choice(
        wrapper_data.get("log_level", defaults.log_level),
        valid_choices=LOG_LEVELS,
        field_name="wrapper.log_level",
        case_sensitive=False,
    )

    mode = validate_enum_choice(
        wrapper_data.get("mode", defaults.mode),
        valid_choices=EXECUTION_MODES,
        field_name="wrapper.mode",
    )

    return WrapperConfig(
        target_dir=Path(target_dir),
        artifact_names=artifact_names,
        min_compress_size=min_compress_size,
        log_level=log_level,
        mode=mode,
    )


def validate_tools_config(tools_data: Dict[str, Any]) -> ToolsConfig:
    """
    Validate and create a ToolsConfig from raw configuration data.

    Each role accepts `<role>` (tool name) and `<role>_args` (argument list);
    the archiver and compressor additionally accept `<role>_suffix`.

    Args:
        tools_data: Raw `[tools]` table from TOML

    Returns:
        Validated ToolsConfig instance

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(tools_data, dict):
        raise ValidationError("[tools] must be a table", field_name="tools")

    defaults = ToolsConfig()
    known = set()
    values: Dict[str, Any] = {}

    for role in _TOOL_ROLES:
        known.update({role, f"{role}_args"})
        values[role] = validate_non_empty_string(
            tools_data.get(role, getattr(defaults, role)),
            field_name=f"tools.{role}",
        )
        values[f"{role}_args"] = validate_string_list(
            tools_data.get(f"{role}_args", getattr(defaults, f"{role}_args")),
            field_name=f"tools.{role}_args",
        )

    for role in _SUFFIXED_ROLES:
        known.add(f"{role}_suffix")
        values[f"{role}_suffix"] = validate_suffix(
            tools_data.get(f"{role}_suffix", getattr(defaults, f"{role}_suffix")),
            field_name=f"tools.{role}_suffix",
        )

    _warn_unknown_keys("tools", tools_data, known)
    return ToolsConfig(**values)
