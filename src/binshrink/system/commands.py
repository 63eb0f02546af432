"""
Command execution utilities.

This module runs the two kinds of child processes the wrapper starts: the
caller's build command, which inherits the standard streams and whose exit
status is reported with shell conventions, and the post-processing tools,
whose failures are turned into return codes instead of exceptions.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import IO, Optional, Sequence

logger = logging.getLogger(__name__)

# Shell conventions for commands that could not be started.
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127
# Return code used by run_tool() when the tool could not be started at all.
TOOL_START_FAILED = -1


def normalize_returncode(returncode: int) -> int:
    """Map a Popen return code to a process exit status.

    A child killed by signal N is reported by subprocess as -N; a shell
    reports the same thing as 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_build_command(command: Sequence[str], cwd: Optional[Path] = None) -> int:
    """Run the caller's build command and wait for it to finish.

    The child inherits stdin, stdout and stderr. There is no timeout. If the
    command cannot be started the shell exit codes 127 (not found) and 126
    (not executable) are returned instead of raising.

    Args:
        command: Program followed by its arguments, passed through unmodified.
        cwd: Working directory, defaults to the current one.

    Returns:
        The build command's exit status.
    """
    display = shlex.join(command)
    logger.info(f"Running build command: {display}")
    try:
        process = subprocess.Popen(list(command), cwd=cwd)
    except FileNotFoundError as e:
        logger.error(f"Command not found: {command[0]}: {e}")
        return EXIT_NOT_FOUND
    except PermissionError as e:
        logger.error(f"Command not executable: {command[0]}: {e}")
        return EXIT_NOT_EXECUTABLE
    except OSError as e:
        logger.error(f"Failed to start build command '{display}': {type(e).__name__}: {e}")
        return EXIT_NOT_EXECUTABLE

    # Interrupts propagate without killing the child; it gets the terminal's
    # signals on its own.
    status = normalize_returncode(process.wait())
    logger.info(f"Build command exited with status {status}")
    return status


def run_tool(
    command: Sequence[str],
    stdin: Optional[IO[bytes]] = None,
    stdout: Optional[IO[bytes]] = None,
) -> int:
    """Run a post-processing tool to completion.

    Args:
        command: Tool executable followed by its arguments.
        stdin: Optional binary file object fed to the tool.
        stdout: Optional binary file object receiving the tool's output.
            Standard streams are inherited when not given.

    Returns:
        The tool's return code, or TOOL_START_FAILED if it could not be
        started.
    """
    logger.debug(f"Executing tool: {shlex.join(command)}")
    try:
        process = subprocess.run(list(command), stdin=stdin, stdout=stdout, check=False)
        return process.returncode
    except OSError as e:
        logger.error(f"Failed to start '{command[0]}': {type(e).__name__}: {e}")
        return TOOL_START_FAILED
