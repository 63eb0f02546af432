"""
Artifact post-processing.

- discovery: finding artifacts under the build output directory
- strategies: the individual shrink steps (pack, size check, compress, strip)
- chain: applying the steps in order until one succeeds
- script: rendering the same chain as a standalone sh procedure
"""

from .chain import FallbackChain, file_size
from .discovery import find_artifacts
from .script import SKIPPED_EXIT_STATUS, render_procedure
from .strategies import (
    SIZE_SKIP_MESSAGE,
    STRIP_FALLBACK_MESSAGE,
    ArchiveStrategy,
    PackStrategy,
    SizeGate,
    Strategy,
    StripStrategy,
    format_size_label,
)

__all__ = [
    "FallbackChain",
    "file_size",
    "find_artifacts",
    "render_procedure",
    "SKIPPED_EXIT_STATUS",
    "SIZE_SKIP_MESSAGE",
    "STRIP_FALLBACK_MESSAGE",
    "ArchiveStrategy",
    "PackStrategy",
    "SizeGate",
    "Strategy",
    "StripStrategy",
    "format_size_label",
]
