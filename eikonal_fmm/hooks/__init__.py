"""
Observer hooks for the fast marching engine.

Example:
    >>> from eikonal_fmm.hooks import FreezeOrderRecorder, MultiHook, ProgressLoggingHook
    >>> hooks = MultiHook(FreezeOrderRecorder(), ProgressLoggingHook(every=500))
"""

from .base import MarchingHooks
from .composition import CallbackHook, ConditionalHook, MultiHook, as_hooks
from .debug import CellBudgetHook, FreezeOrderRecorder, ProgressLoggingHook

__all__ = [
    "CallbackHook",
    "CellBudgetHook",
    "ConditionalHook",
    "FreezeOrderRecorder",
    "MarchingHooks",
    "MultiHook",
    "ProgressLoggingHook",
    "as_hooks",
]
