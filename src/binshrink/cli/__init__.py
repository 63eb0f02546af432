"""
Command-line interface for the binshrink package.

This module provides the CLI entry point and the build runner it drives.
"""

from .main import main_cli
from .orchestrator import BuildRunner

__all__ = [
    "BuildRunner",
    "main_cli",
]
