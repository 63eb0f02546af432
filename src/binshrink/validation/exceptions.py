"""
Exception types and error reporting for the wrapper.

Configuration problems surface as ValidationError. Everything that can stop
the wrapper before the build runs goes through handle_cli_error(), which logs
the error with its context and exits with a given status.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """How loudly an error is reported."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return getattr(logging, self.name)


class ValidationError(Exception):
    """
    A configuration value was rejected.

    Carries the offending field name and value so the CLI can report which
    key in config.toml needs fixing.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log ``error`` as "Error in <context>: <error>" and optionally re-raise it.

    DEBUG and CRITICAL include the traceback.

    Args:
        error: The exception to report
        context: Where the error happened, e.g. "config file loading"
        severity: ErrorSeverity or its name in any case
        reraise: Raise ``error`` again after logging
        logger: Logger to report through, defaults to this module's
    """
    if isinstance(severity, str):
        severity = ErrorSeverity(severity.lower())

    effective_logger = logger or globals()["logger"]
    effective_logger.log(
        severity.log_level,
        f"Error in {context}: {error}",
        exc_info=severity in (ErrorSeverity.DEBUG, ErrorSeverity.CRITICAL),
    )

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Report an error raised while reading or validating configuration."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(
    error: Exception,
    context: str,
    exit_code: int = 1,
    include_traceback: bool = False,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log a CLI-level error and terminate the process with ``exit_code``."""
    if include_traceback:
        severity = ErrorSeverity.CRITICAL
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, logger=logger)

    sys.exit(exit_code)
