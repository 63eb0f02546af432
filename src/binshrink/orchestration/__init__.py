"""
Run orchestration support.
"""

from .signal_handler import HANDLED_SIGNALS, SignalHandler, TerminationRequested

__all__ = [
    "HANDLED_SIGNALS",
    "SignalHandler",
    "TerminationRequested",
]
