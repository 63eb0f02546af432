"""
System interaction utilities.

This module provides the wrapper's contact points with the operating system:

- Build command and tool execution with shell-style exit statuses
- Tool lookup on the search path, replaceable in tests
- The temporary post-processing script and its guaranteed removal
"""

# Command execution
from .commands import (
    EXIT_NOT_EXECUTABLE,
    EXIT_NOT_FOUND,
    TOOL_START_FAILED,
    normalize_returncode,
    run_build_command,
    run_tool,
)

# Tool lookup
from .tools import StaticToolLocator, ToolLocator

# Temporary script
from .scratch import ScratchScript, ScratchScriptError

__all__ = [
    # Commands
    "EXIT_NOT_EXECUTABLE",
    "EXIT_NOT_FOUND",
    "TOOL_START_FAILED",
    "normalize_returncode",
    "run_build_command",
    "run_tool",
    # Tools
    "StaticToolLocator",
    "ToolLocator",
    # Scratch script
    "ScratchScript",
    "ScratchScriptError",
]
