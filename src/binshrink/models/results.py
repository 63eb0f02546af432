"""
Result data models.

Post-processing never raises to the caller; instead every strategy reports a
StepResult, every artifact gets an ArtifactReport, and a run ends with a
RunSummary whose exit_status is the build command's status.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class StepOutcome(Enum):
    """Outcome of a single fallback-chain step."""

    # The artifact was shrunk; the chain stops.
    SUCCEEDED = "succeeded"
    # The artifact is deliberately left untouched; the chain stops.
    SKIPPED = "skipped"
    # The step ran but did not succeed; the chain moves on.
    FAILED = "failed"
    # The tool is not on the search path; the chain moves on.
    UNAVAILABLE = "unavailable"
    # A gate that let the artifact through; the chain moves on.
    PASSED = "passed"

    @property
    def is_terminal(self) -> bool:
        return self in (StepOutcome.SUCCEEDED, StepOutcome.SKIPPED)


@dataclass
class StepResult:
    """The result of applying one strategy to one artifact."""

    name: str
    outcome: StepOutcome
    detail: str = ""

    @property
    def succeeded(self) -> bool:
        return self.outcome is StepOutcome.SUCCEEDED


@dataclass
class ArtifactReport:
    """
    Everything that happened to a single artifact.
    """

    path: Path
    # Sizes in bytes, None when the file could not be measured.
    size_before: Optional[int] = None
    size_after: Optional[int] = None
    steps: List[StepResult] = field(default_factory=list)
    # Name of the strategy that succeeded, if any.
    winner: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return bool(self.steps) and self.steps[-1].outcome is StepOutcome.SKIPPED

    def describe(self) -> str:
        """One-line human-readable summary for logs."""
        if self.winner:
            return (
                f"{self.path}: {self.winner} succeeded "
                f"({self.size_before} -> {self.size_after} bytes)"
            )
        if self.skipped:
            return f"{self.path}: left unchanged ({self.steps[-1].detail})"
        return f"{self.path}: no step succeeded ({self.size_before} bytes)"


@dataclass
class RunSummary:
    """Outcome of a whole wrapper run."""

    exit_status: int
    artifacts: List[ArtifactReport] = field(default_factory=list)
