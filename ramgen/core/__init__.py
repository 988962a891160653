"""Feasibility gate, signal planning and pipeline timing."""

from .feasibility import is_supported, require_supported, unsupported_reasons
from .planner import SignalPlan, SignalPlanner
from .timing import TICK_DELAY_DEPTH, AccessTaps, access_enable_taps, byte_enable_terminal

__all__ = [
    "is_supported",
    "require_supported",
    "unsupported_reasons",
    "SignalPlan",
    "SignalPlanner",
    "TICK_DELAY_DEPTH",
    "AccessTaps",
    "access_enable_taps",
    "byte_enable_terminal",
]
