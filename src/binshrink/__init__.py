"""
binshrink: post-build compression wrapper.

Runs a build command, then shrinks the binaries it produced: an executable
packer first, a stream compressor for large files when packing is not
possible, and symbol stripping as the last resort. The wrapper always exits
with the build command's own status.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Configuration and result data structures
- validation: Input validation and error handling
- system: Command execution, tool lookup, temporary script
- shrink: Artifact discovery and the post-processing fallback chain
- orchestration: Signal handling
- cli: Command-line interface and build runner

Usage:
    From command line:
        binshrink cargo build --release

    Programmatically:
        from binshrink import BuildRunner, get_config
        summary = BuildRunner(get_config()).run(["cargo", "build"])
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .cli.orchestrator import BuildRunner
from .cli import main_cli

# Model classes for external use
from .models import (
    AppConfig,
    ArtifactReport,
    RunSummary,
    StepOutcome,
    StepResult,
    ToolsConfig,
    WrapperConfig,
)

# Post-processing
from .shrink import FallbackChain, find_artifacts, render_procedure

# System utilities
from .system import StaticToolLocator, ToolLocator, run_build_command

# Validation utilities
from .validation import ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "BuildRunner",
    "main_cli",
    # Models
    "AppConfig",
    "ArtifactReport",
    "RunSummary",
    "StepOutcome",
    "StepResult",
    "ToolsConfig",
    "WrapperConfig",
    # Post-processing
    "FallbackChain",
    "find_artifacts",
    "render_procedure",
    # System utilities
    "StaticToolLocator",
    "ToolLocator",
    "run_build_command",
    # Validation
    "ValidationError",
]
