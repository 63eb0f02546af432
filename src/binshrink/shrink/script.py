"""
Rendering the fallback chain as a POSIX sh procedure.

The rendered script takes the artifact path as its only argument and performs
the same steps as FallbackChain.from_config(): packer, size check, archiver,
compressor, strip. It is what the temporary script file holds, and what
`mode = "script"` runs for each artifact.
"""

import shlex
from typing import List

from ..models.config import ToolsConfig
from .strategies import SIZE_SKIP_MESSAGE, STRIP_FALLBACK_MESSAGE, format_size_label

# Exit status of the procedure when the artifact was left alone as too small.
SKIPPED_EXIT_STATUS = 10


def _command(tool: str, args: List[str]) -> str:
    return " ".join(shlex.quote(part) for part in [tool, *args])


def _available(tool: str) -> str:
    return f"command -v {shlex.quote(tool)} >/dev/null 2>&1"


def _archive_block(tool: str, args: List[str], suffix: str) -> str:
    sibling = f'"$1"{shlex.quote(suffix)}'
    return (
        f"if {_available(tool)}\n"
        f"then\n"
        f"\t{_command(tool, args)} < \"$1\" > {sibling} && mv -f {sibling} \"$1\" && exit\n"
        f"\trm -f {sibling}\n"
        f"fi\n"
    )


def render_procedure(tools: ToolsConfig, min_size: int) -> str:
    """
    Render the post-processing procedure for one artifact.

    Args:
        tools: Tool names, arguments and suffixes.
        min_size: Artifacts smaller than this many bytes are left alone.

    Returns:
        The script text.
    """
    skip_message = SIZE_SKIP_MESSAGE.format(label=format_size_label(min_size))
    sections = [
        "#!/bin/sh\n"
        "# Post-processing for one build artifact, passed as $1.\n",

        f"if {_available(tools.packer)}\n"
        f"then\n"
        f"\t{_command(tools.packer, tools.packer_args)} \"$1\" && exit\n"
        f"fi\n",

        f"if test \"$(wc -c < \"$1\")\" -lt {int(min_size)}\n"
        f"then\n"
        f"\techo {shlex.quote(skip_message)}\n"
        f"\texit {SKIPPED_EXIT_STATUS}\n"
        f"fi\n",

        _archive_block(tools.archiver, tools.archiver_args, tools.archiver_suffix),

        _archive_block(tools.compressor, tools.compressor_args, tools.compressor_suffix),

        f"echo {shlex.quote(STRIP_FALLBACK_MESSAGE)}\n"
        f"\n"
        f"{_command(tools.stripper, tools.stripper_args)} \"$1\"\n",
    ]
    return "\n".join(sections)
