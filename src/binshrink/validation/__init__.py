"""
Validation and error handling for the binshrink package.

This module provides input validation for configuration values and
consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_cli_error,
)

from .validators import (
    validate_enum_choice,
    validate_file_name,
    validate_non_empty_string,
    validate_positive_integer,
    validate_string_list,
    validate_suffix,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_enum_choice",
    "validate_file_name",
    "validate_non_empty_string",
    "validate_positive_integer",
    "validate_string_list",
    "validate_suffix",
]
