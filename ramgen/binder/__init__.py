"""Port binding against external connectivity."""

from .netlist import ClockNetwork, Netlist, StaticNetlist, TerminalConnection, TerminalLayout
from .port_binder import BindingKind, BindingTable, PortBinder, PortBinding, select_tick_phase

__all__ = [
    "BindingKind",
    "BindingTable",
    "ClockNetwork",
    "Netlist",
    "PortBinder",
    "PortBinding",
    "StaticNetlist",
    "TerminalConnection",
    "TerminalLayout",
    "select_tick_phase",
]
