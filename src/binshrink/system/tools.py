"""
Locating external tools.

The post-processing chain asks a ToolLocator whether a tool exists instead of
calling shutil.which() directly, so tests can decide which tools are present.
"""

import logging
import shutil
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class ToolLocator:
    """
    Finds executables on a search path.

    Lookups happen on every call, so a tool installed or removed while the
    build runs is seen by the next artifact.
    """

    def __init__(self, search_path: Optional[str] = None):
        """
        Args:
            search_path: os.pathsep separated directories to search.
                None means the PATH environment variable at lookup time.
        """
        self.search_path = search_path

    def find(self, name: str) -> Optional[str]:
        """Return the full path of ``name`` or None if it cannot be found."""
        found = shutil.which(name, path=self.search_path)
        logger.debug(f"Tool lookup: {name} -> {found}")
        return found


class StaticToolLocator(ToolLocator):
    """
    A locator backed by a fixed mapping of tool name to executable path.

    Names missing from the mapping, or mapped to None, are unavailable.
    """

    def __init__(self, tools: Optional[Dict[str, Optional[str]]] = None):
        super().__init__(search_path=None)
        self.tools = dict(tools or {})

    def find(self, name: str) -> Optional[str]:
        return self.tools.get(name)
