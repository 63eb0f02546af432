"""
Configuration data models.

This module contains the configuration data structures for the wrapper itself
(where to look for artifacts and when to compress them) and for the external
tools used by the post-processing fallback chain.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# 30 MiB. Smaller artifacts are not worth compressing when no packer exists.
DEFAULT_MIN_COMPRESS_SIZE = 31457280

DEFAULT_TARGET_DIR = "./target/"
DEFAULT_ARTIFACT_NAMES = ["geph4-exit", "geph4-exit.exe"]


@dataclass
class WrapperConfig:
    """
    Global wrapper behavior, loaded from the `[wrapper]` table of `config.toml`.
    """

    # Directory searched recursively for artifacts after the build.
    target_dir: Path = Path(DEFAULT_TARGET_DIR)
    # Exact file names that identify an artifact.
    artifact_names: List[str] = field(default_factory=lambda: list(DEFAULT_ARTIFACT_NAMES))
    # Artifacts strictly smaller than this (in bytes) are left alone when the packer fails.
    min_compress_size: int = DEFAULT_MIN_COMPRESS_SIZE
    # Root logger level name.
    log_level: str = "INFO"
    # "native" runs the Python strategy chain, "script" runs the rendered sh procedure.
    mode: str = "native"


@dataclass
class ToolsConfig:
    """
    External tool names and arguments, loaded from the `[tools]` table.

    Tool names are resolved on the search path at invocation time; the
    artifact path is always appended as the last argument (packer, stripper)
    or fed on stdin (archiver, compressor).
    """

    packer: str = "upx"
    packer_args: List[str] = field(default_factory=list)

    archiver: str = "xz"
    archiver_args: List[str] = field(default_factory=lambda: ["-c", "-v", "-e", "-9"])
    archiver_suffix: str = ".xz"

    compressor: str = "gzip"
    compressor_args: List[str] = field(default_factory=lambda: ["-c", "-9"])
    compressor_suffix: str = ".gz"

    stripper: str = "strip"
    stripper_args: List[str] = field(default_factory=list)


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    wrapper: WrapperConfig = field(default_factory=WrapperConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    # File the configuration was read from, None when built-in defaults are used.
    source: Optional[Path] = None
