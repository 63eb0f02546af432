"""
Unit tests for scalar validation functions and error helpers.
"""

import logging

import pytest

from binshrink.validation import (
    ErrorSeverity,
    ValidationError,
    handle_cli_error,
    handle_error,
    validate_enum_choice,
    validate_file_name,
    validate_non_empty_string,
    validate_positive_integer,
    validate_string_list,
    validate_suffix,
)


@pytest.mark.unit
class TestPositiveInteger:
    """Test cases for validate_positive_integer."""

    def test_accepts_value_in_range(self):
        assert validate_positive_integer(5, min_value=0, max_value=10) == 5

    def test_converts_numeric_string(self):
        assert validate_positive_integer("42", min_value=0) == 42

    def test_rejects_below_minimum(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_positive_integer(-1, min_value=0, field_name="size")
        assert "size must be >= 0" in str(exc_info.value)
        assert exc_info.value.field_name == "size"

    def test_rejects_above_maximum(self):
        with pytest.raises(ValidationError):
            validate_positive_integer(11, min_value=0, max_value=10)

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_positive_integer("lots")
        assert "must be a valid integer" in str(exc_info.value)

    def test_rejects_boolean(self):
        with pytest.raises(ValidationError):
            validate_positive_integer(True, min_value=0)


@pytest.mark.unit
class TestStringValidators:
    """Test cases for the string and list validators."""

    def test_non_empty_string_strips(self):
        assert validate_non_empty_string("  upx ") == "upx"

    @pytest.mark.parametrize("value", ["", "   ", None, 3])
    def test_non_empty_string_rejects(self, value):
        with pytest.raises(ValidationError):
            validate_non_empty_string(value)

    def test_string_list_copies(self):
        original = ["-c", "-9"]
        result = validate_string_list(original)
        assert result == original
        assert result is not original

    def test_string_list_rejects_non_list(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_string_list("-9", field_name="tools.archiver_args")
        assert "tools.archiver_args must be a list of strings" in str(exc_info.value)

    def test_string_list_rejects_non_string_item(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_string_list(["-c", 9])
        assert "item 1" in str(exc_info.value)

    def test_string_list_empty_handling(self):
        assert validate_string_list([]) == []
        with pytest.raises(ValidationError):
            validate_string_list([], allow_empty=False)

    @pytest.mark.parametrize("name", ["geph4-exit", "geph4-exit.exe", "a"])
    def test_file_name_accepts_plain_names(self, name):
        assert validate_file_name(name) == name

    @pytest.mark.parametrize("name", ["bin/geph4-exit", "..", ".", "a\\b"])
    def test_file_name_rejects_paths(self, name):
        with pytest.raises(ValidationError):
            validate_file_name(name)

    def test_suffix(self):
        assert validate_suffix(".xz") == ".xz"
        for bad in ["xz", ".", "a.xz"]:
            with pytest.raises(ValidationError):
                validate_suffix(bad)


@pytest.mark.unit
class TestEnumChoice:
    """Test cases for validate_enum_choice."""

    def test_case_sensitive_match(self):
        assert validate_enum_choice("native", ["native", "script"]) == "native"

    def test_case_sensitive_mismatch(self):
        with pytest.raises(ValidationError):
            validate_enum_choice("Native", ["native", "script"])

    def test_case_insensitive_returns_canonical_spelling(self):
        result = validate_enum_choice("debug", ["DEBUG", "INFO"], case_sensitive=False)
        assert result == "DEBUG"


@pytest.mark.unit
class TestErrorHandlers:
    """Test cases for handle_error and handle_cli_error."""

    def test_handle_error_reraises(self):
        with pytest.raises(ValueError):
            handle_error(ValueError("boom"), "testing")

    def test_handle_error_logs_without_reraise(self, caplog):
        with caplog.at_level(logging.WARNING):
            handle_error(ValueError("boom"), "testing", severity=ErrorSeverity.WARNING, reraise=False)
        assert "Error in testing: boom" in caplog.text

    def test_handle_error_accepts_string_severity(self, caplog):
        with caplog.at_level(logging.INFO):
            handle_error(ValueError("boom"), "testing", severity="info", reraise=False)
        assert "Error in testing: boom" in caplog.text

    def test_handle_cli_error_exits(self, caplog):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ValueError("bad"), "argument parsing", exit_code=3)
        assert exc_info.value.code == 3
        assert "Error in CLI argument parsing: bad" in caplog.text

    def test_critical_includes_traceback(self, caplog):
        try:
            raise ValueError("boom")
        except ValueError as e:
            handle_error(e, "testing", severity=ErrorSeverity.CRITICAL, reraise=False)

        record = caplog.records[-1]
        assert record.levelno == logging.CRITICAL
        assert record.exc_info is not None

    def test_severity_maps_to_log_level(self):
        assert ErrorSeverity.WARNING.log_level == logging.WARNING
        assert ErrorSeverity.DEBUG.log_level == logging.DEBUG
