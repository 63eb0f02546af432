"""
Simple validation functions for configuration values.

Each validator takes a raw value (usually straight out of a TOML table),
checks it, and returns the normalized value or raises ValidationError.
"""

from typing import Any, List, Optional

from .exceptions import ValidationError


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is an integer within bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    # TOML booleans are ints in Python, reject them explicitly
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """
    Validate that a value is a string with non-whitespace content.

    Returns:
        The string with surrounding whitespace removed
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    return value.strip()


def validate_string_list(
    value: Any,
    field_name: str = "value",
    allow_empty: bool = True
) -> List[str]:
    """
    Validate that a value is a list of strings.

    Args:
        value: Value to validate
        field_name: Name of the field being validated
        allow_empty: Whether an empty list is acceptable

    Returns:
        A copy of the validated list

    Raises:
        ValidationError: If the value is not a list or has non-string items
    """
    if not isinstance(value, list):
        raise ValidationError(
            f"{field_name} must be a list of strings, got {type(value).__name__}",
            field_name=field_name,
            value=value
        )
    if not allow_empty and not value:
        raise ValidationError(
            f"{field_name} must not be empty",
            field_name=field_name,
            value=value
        )
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ValidationError(
                f"{field_name} item {i} must be a string, got {item!r}",
                field_name=field_name,
                value=value
            )
    return list(value)


def validate_file_name(name: Any, field_name: str = "file_name") -> str:
    """
    Validate a bare file name (no directory components).

    Raises:
        ValidationError: If the name is empty, contains a path separator,
            or is one of the special entries '.' and '..'
    """
    name = validate_non_empty_string(name, field_name=field_name)
    if "/" in name or "\\" in name or name in (".", ".."):
        raise ValidationError(
            f"{field_name} must be a plain file name, got {name!r}",
            field_name=field_name,
            value=name
        )
    return name


def validate_suffix(suffix: Any, field_name: str = "suffix") -> str:
    """Validate a file extension such as '.xz'."""
    suffix = validate_file_name(suffix, field_name=field_name)
    if not suffix.startswith(".") or len(suffix) < 2:
        raise ValidationError(
            f"{field_name} must start with '.' followed by an extension, got {suffix!r}",
            field_name=field_name,
            value=suffix
        )
    return suffix


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        valid_choices: List of allowed choices
        field_name: Name of the field being validated
        case_sensitive: Whether the comparison should be case-sensitive

    Returns:
        Validated choice, in the spelling used by valid_choices

    Raises:
        ValidationError: If value is not in choices
    """
    str_value = str(value)

    if case_sensitive:
        if str_value not in valid_choices:
            raise ValidationError(
                f"{field_name} must be one of {valid_choices}, got {value}",
                field_name=field_name,
                value=value
            )
        return str_value

    lower_choices = [choice.lower() for choice in valid_choices]
    lower_value = str_value.lower()
    if lower_value not in lower_choices:
        raise ValidationError(
            f"{field_name} must be one of {valid_choices}, got {value}",
            field_name=field_name,
            value=value
        )
    return valid_choices[lower_choices.index(lower_value)]
