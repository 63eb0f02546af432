"""
Temporary post-processing script.

ScratchScript writes the rendered fallback procedure to a uniquely named
temporary file and removes it when the context exits, whichever way it exits.
Failing to create the file is the wrapper's only fatal error.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ScratchScriptError(Exception):
    """Raised when the temporary script cannot be created or written."""


class ScratchScript:
    """
    Context manager owning one temporary script file.

    Usage:
        with ScratchScript(content) as script:
            run_something(script.path)
        # script.path no longer exists here
    """

    def __init__(self, content: str, prefix: str = "binshrink-", suffix: str = ".sh",
                 directory: Optional[Path] = None):
        self.content = content
        self.prefix = prefix
        self.suffix = suffix
        self.directory = directory
        self._path: Optional[Path] = None

    @property
    def path(self) -> Path:
        if self._path is None:
            raise RuntimeError("Scratch script has not been created")
        return self._path

    def create(self) -> Path:
        """
        Create the file and write the content.

        Raises:
            ScratchScriptError: If the file cannot be created or written.
        """
        try:
            fd, name = tempfile.mkstemp(prefix=self.prefix, suffix=self.suffix, dir=self.directory)
        except OSError as e:
            raise ScratchScriptError(f"cannot create temporary script: {e}") from e

        self._path = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self.content)
        except OSError as e:
            self.remove()
            raise ScratchScriptError(f"cannot write temporary script {name}: {e}") from e

        logger.debug(f"Wrote post-processing script to {self._path}")
        return self._path

    def remove(self) -> None:
        """Delete the file if it exists. Safe to call more than once."""
        if self._path is None:
            return
        try:
            self._path.unlink()
            logger.debug(f"Removed post-processing script {self._path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove temporary script {self._path}: {e}")
        finally:
            self._path = None

    def __enter__(self) -> "ScratchScript":
        self.create()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.remove()
