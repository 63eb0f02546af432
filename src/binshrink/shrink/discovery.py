"""
Artifact discovery.
"""

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def find_artifacts(target_dir: Path, names: Iterable[str]) -> List[Path]:
    """Recursively collect files under ``target_dir`` named exactly one of ``names``.

    The result is materialized before any post-processing starts, so sibling
    files written while compressing are never picked up. A missing target
    directory yields no artifacts.

    Args:
        target_dir: Root of the search.
        names: Exact file names to match.

    Returns:
        Matching file paths, sorted.
    """
    wanted = set(names)
    target_dir = Path(target_dir)
    if not target_dir.is_dir():
        logger.info(f"Artifact directory {target_dir} does not exist, nothing to post-process")
        return []

    artifacts = sorted(
        path for path in target_dir.rglob("*")
        if path.name in wanted and path.is_file()
    )
    logger.info(f"Found {len(artifacts)} artifact(s) under {target_dir}")
    return artifacts
