"""
The post-processing fallback chain.

A FallbackChain applies its strategies to one artifact in order and stops at
the first one whose outcome is terminal (succeeded or skipped). Step errors
end up in the returned ArtifactReport; only interrupts (KeyboardInterrupt,
TerminationRequested) propagate.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ..models.config import ToolsConfig
from ..models.results import ArtifactReport, StepOutcome, StepResult
from ..system.tools import ToolLocator
from .strategies import ArchiveStrategy, PackStrategy, SizeGate, Strategy, StripStrategy

logger = logging.getLogger(__name__)


def file_size(path: Path) -> Optional[int]:
    try:
        return path.stat().st_size
    except OSError:
        return None


def strategy_name(strategy: Strategy) -> str:
    return getattr(strategy, "name", None) or getattr(strategy, "__name__", type(strategy).__name__)


class FallbackChain:
    """Ordered strategies with first-success-wins semantics."""

    def __init__(self, strategies: Sequence[Strategy]):
        self.strategies: List[Strategy] = list(strategies)

    @classmethod
    def from_config(cls, tools: ToolsConfig, min_size: int,
                    locator: Optional[ToolLocator] = None) -> "FallbackChain":
        """
        Build the standard chain: packer, size check, archiver, compressor, strip.

        Args:
            tools: Tool names, arguments and suffixes.
            min_size: Artifacts smaller than this are not compressed.
            locator: Tool lookup, defaults to the PATH at invocation time.
        """
        locator = locator or ToolLocator()
        return cls([
            PackStrategy(tools.packer, tools.packer_args, locator),
            SizeGate(min_size),
            ArchiveStrategy(tools.archiver, tools.archiver, tools.archiver_args,
                            tools.archiver_suffix, locator),
            ArchiveStrategy(tools.compressor, tools.compressor, tools.compressor_args,
                            tools.compressor_suffix, locator),
            StripStrategy(tools.stripper, tools.stripper_args, locator),
        ])

    @property
    def names(self) -> List[str]:
        return [strategy_name(s) for s in self.strategies]

    def process(self, path: Path) -> ArtifactReport:
        """
        Run the chain on one artifact.

        Args:
            path: The artifact to shrink in place.

        Returns:
            A report of every step attempted and the winning strategy, if any.
        """
        report = ArtifactReport(path=path, size_before=file_size(path))
        logger.info(f"Post-processing {path} ({report.size_before} bytes)")

        for strategy in self.strategies:
            name = strategy_name(strategy)
            try:
                result = strategy(path)
            except Exception as e:
                logger.error(
                    f"Unexpected error in step '{name}' for {path}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                result = StepResult(name, StepOutcome.FAILED, f"{type(e).__name__}: {e}")

            report.steps.append(result)
            logger.debug(f"{path}: {result.name} -> {result.outcome.value} {result.detail}")

            if result.outcome is StepOutcome.SUCCEEDED:
                report.winner = result.name
            if result.outcome.is_terminal:
                break

        report.size_after = file_size(path)
        logger.info(report.describe())
        return report
