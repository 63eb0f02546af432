"""
Data models for the wrapper.

Configuration Models:
- Wrapper settings (artifact discovery, size threshold, execution mode)
- External tool names and arguments

Result Models:
- Per-step results of the fallback chain
- Per-artifact reports and the overall run summary
"""

from .config import (
    DEFAULT_ARTIFACT_NAMES,
    DEFAULT_MIN_COMPRESS_SIZE,
    DEFAULT_TARGET_DIR,
    AppConfig,
    ToolsConfig,
    WrapperConfig,
)
from .results import ArtifactReport, RunSummary, StepOutcome, StepResult

__all__ = [
    # Configuration models
    "DEFAULT_ARTIFACT_NAMES",
    "DEFAULT_MIN_COMPRESS_SIZE",
    "DEFAULT_TARGET_DIR",
    "AppConfig",
    "ToolsConfig",
    "WrapperConfig",
    # Result models
    "ArtifactReport",
    "RunSummary",
    "StepOutcome",
    "StepResult",
]
