"""
Signal handling for a wrapper run.

SIGTERM and SIGHUP normally kill Python without unwinding the stack, which
would skip the temporary script cleanup. While a SignalHandler is installed
those signals raise TerminationRequested instead, so every ``finally`` and
``with`` block runs. SIGINT already unwinds as KeyboardInterrupt and is left
alone.
"""

import logging
import signal
from typing import Any, Dict

logger = logging.getLogger(__name__)

HANDLED_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None))
    if sig is not None
)


class TerminationRequested(BaseException):
    """
    Raised from the signal handler when a termination signal arrives.

    Derives from BaseException, like KeyboardInterrupt, so handlers for
    ordinary errors let it through.
    """

    def __init__(self, signum: int):
        super().__init__(f"received signal {signum}")
        self.signum = signum

    @property
    def exit_status(self) -> int:
        return 128 + self.signum


class SignalHandler:
    """
    Installs and restores the termination handlers.

    Usable either through setup_signal_handlers()/cleanup_signal_handlers()
    or as a context manager.
    """

    def __init__(self):
        self._original_handlers: Dict[int, Any] = {}
        self._signal_handlers_set = False

    def setup_signal_handlers(self) -> None:
        """Install the handlers, remembering the previous ones."""
        try:
            for signum in HANDLED_SIGNALS:
                self._original_handlers[signum] = signal.signal(signum, self._raise_termination)
            self._signal_handlers_set = True
            logger.debug("Termination signal handlers installed")
        except ValueError as e:
            # Only the main thread may install handlers.
            logger.warning(f"Failed to set up signal handlers: {e}")

    def cleanup_signal_handlers(self) -> None:
        """Restore original signal handlers."""
        if not self._signal_handlers_set:
            return

        try:
            for signum, handler in self._original_handlers.items():
                if handler is not None:
                    signal.signal(signum, handler)
            logger.debug("Termination signal handlers restored")
        except ValueError as e:
            logger.warning(f"Failed to restore signal handlers: {e}")
        finally:
            self._original_handlers.clear()
            self._signal_handlers_set = False

    @staticmethod
    def _raise_termination(signum: int, frame: Any) -> None:
        logger.warning(f"Signal {signal.strsignal(signum)} received, cleaning up")
        raise TerminationRequested(signum)

    def __enter__(self) -> "SignalHandler":
        self.setup_signal_handlers()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.cleanup_signal_handlers()
