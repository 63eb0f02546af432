"""
Post-processing strategies.

Each strategy is a callable taking an artifact path and returning a
StepResult. Strategies never raise for expected failures (missing tool,
non-zero exit, I/O errors); they report them so the fallback chain can move
on to the next step.

The default order is:

    pack -> size-check -> xz -> gzip -> strip
"""

import logging
import os
from pathlib import Path
from typing import Callable, List

from ..models.results import StepOutcome, StepResult
from ..system.commands import run_tool
from ..system.tools import ToolLocator

logger = logging.getLogger(__name__)

# The two user-facing diagnostics. This logger keeps its own level, so they
# are still printed when BINSHRINK_LOG_LEVEL raises the root level.
diagnostics = logging.getLogger("binshrink.diagnostics")
diagnostics.setLevel(logging.WARNING)

Strategy = Callable[[Path], StepResult]

SIZE_SKIP_MESSAGE = "skipping file size less than {label}"
STRIP_FALLBACK_MESSAGE = "failed to compress file size, fallback to strip."

_KIB = 1024
_MIB = 1024 * 1024


def format_size_label(size: int) -> str:
    """Render a byte threshold the way the diagnostics show it, e.g. '30M'."""
    if size and size % _MIB == 0:
        return f"{size // _MIB}M"
    if size and size % _KIB == 0:
        return f"{size // _KIB}K"
    return f"{size} bytes"


class PackStrategy:
    """Run an executable packer (upx) on the artifact in place."""

    def __init__(self, tool: str, args: List[str], locator: ToolLocator, name: str = "pack"):
        self.tool = tool
        self.args = list(args)
        self.locator = locator
        self.name = name

    def __call__(self, path: Path) -> StepResult:
        executable = self.locator.find(self.tool)
        if executable is None:
            return StepResult(self.name, StepOutcome.UNAVAILABLE, f"{self.tool} not found")

        returncode = run_tool([executable, *self.args, str(path)])
        if returncode == 0:
            return StepResult(self.name, StepOutcome.SUCCEEDED, f"packed with {self.tool}")
        return StepResult(self.name, StepOutcome.FAILED, f"{self.tool} exited with {returncode}")


class SizeGate:
    """Stop the chain for artifacts too small to be worth compressing."""

    name = "size-check"

    def __init__(self, min_size: int):
        self.min_size = min_size

    def __call__(self, path: Path) -> StepResult:
        try:
            size = path.stat().st_size
        except OSError as e:
            logger.error(f"Cannot measure {path}: {e}")
            return StepResult(self.name, StepOutcome.SKIPPED, f"cannot measure size: {e}")

        if size < self.min_size:
            message = SIZE_SKIP_MESSAGE.format(label=format_size_label(self.min_size))
            diagnostics.warning(message)
            return StepResult(self.name, StepOutcome.SKIPPED, message)
        return StepResult(self.name, StepOutcome.PASSED, f"{size} bytes")


class ArchiveStrategy:
    """
    Compress the artifact's bytes with a stream compressor and replace it.

    The tool reads the artifact on stdin and writes ``<path><suffix>``; on
    success that sibling is renamed over the artifact, so the final file keeps
    the original name. On failure the sibling is removed and the artifact is
    left as it was.
    """

    def __init__(self, name: str, tool: str, args: List[str], suffix: str, locator: ToolLocator):
        self.name = name
        self.tool = tool
        self.args = list(args)
        self.suffix = suffix
        self.locator = locator

    def __call__(self, path: Path) -> StepResult:
        executable = self.locator.find(self.tool)
        if executable is None:
            return StepResult(self.name, StepOutcome.UNAVAILABLE, f"{self.tool} not found")

        sibling = path.with_name(path.name + self.suffix)
        try:
            return self._compress(executable, path, sibling)
        except BaseException:
            # Interrupted mid-stream; the artifact itself is still intact.
            self._discard(sibling)
            raise

    def _compress(self, executable: str, path: Path, sibling: Path) -> StepResult:
        try:
            with open(path, "rb") as src, open(sibling, "wb") as dst:
                returncode = run_tool([executable, *self.args], stdin=src, stdout=dst)
        except OSError as e:
            self._discard(sibling)
            return StepResult(self.name, StepOutcome.FAILED, f"cannot stream {path}: {e}")

        if returncode != 0:
            self._discard(sibling)
            return StepResult(self.name, StepOutcome.FAILED, f"{self.tool} exited with {returncode}")

        try:
            os.replace(sibling, path)
        except OSError as e:
            self._discard(sibling)
            return StepResult(self.name, StepOutcome.FAILED, f"cannot replace {path}: {e}")

        return StepResult(self.name, StepOutcome.SUCCEEDED, f"compressed with {self.tool}")

    @staticmethod
    def _discard(sibling: Path) -> None:
        try:
            sibling.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove partial output {sibling}: {e}")


class StripStrategy:
    """Last resort: strip symbols from the artifact in place."""

    name = "strip"

    def __init__(self, tool: str, args: List[str], locator: ToolLocator):
        self.tool = tool
        self.args = list(args)
        self.locator = locator

    def __call__(self, path: Path) -> StepResult:
        diagnostics.warning(STRIP_FALLBACK_MESSAGE)

        executable = self.locator.find(self.tool)
        if executable is None:
            logger.error(f"{self.tool} not found, leaving {path} unmodified")
            return StepResult(self.name, StepOutcome.UNAVAILABLE, f"{self.tool} not found")

        returncode = run_tool([executable, *self.args, str(path)])
        if returncode == 0:
            return StepResult(self.name, StepOutcome.SUCCEEDED, f"stripped with {self.tool}")
        logger.error(f"{self.tool} exited with {returncode}, leaving {path} unmodified")
        return StepResult(self.name, StepOutcome.FAILED, f"{self.tool} exited with {returncode}")
