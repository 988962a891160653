"""
Port binding of a planned RAM entity to external connectivity.

Data and control ports bind to the net on the matching component
terminal. The clock needs special handling:

- unconnected clock: ``Clock`` and ``Tick`` are tied low and a warning
  naming the circuit is reported, the memory then simply idles;
- clock driven by a plain signal: ``Clock`` is that signal and ``Tick``
  is tied high so every cycle ticks;
- clock driven by a clock generator: ``Clock`` is the generator's global
  clock phase and ``Tick`` the tick phase selected from the trigger
  policy (or the global clock when the design needs one clock domain).
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ramgen.core.planner import (
    ADDRESS,
    CLOCK,
    DATA_IN,
    DATA_OUT,
    OUTPUT_ENABLE,
    TICK,
    WRITE_ENABLE,
    SignalPlan,
    byte_enable_port_name,
)
from ramgen.core.timing import byte_enable_terminal
from ramgen.diagnostics import Reporter
from ramgen.model.base import FrozenModel
from ramgen.model.config import TriggerPolicy
from ramgen.model.port import Port
from ramgen.utils import vhdl_constant

from .netlist import ClockNetwork, Netlist, TerminalLayout

logger = logging.getLogger(__name__)

OPEN = "OPEN"


class BindingKind(str, Enum):
    """What a port is connected to."""

    NET = "net"
    CONSTANT = "constant"
    OPEN = "open"


class PortBinding(FrozenModel):
    """Association of a port with a net, a constant or nothing."""

    port: str
    value: str
    kind: BindingKind
    clock_bus_index: Optional[int] = None


class BindingTable(FrozenModel):
    """Port bindings ordered by port name."""

    bindings: Tuple[PortBinding, ...]

    def __getitem__(self, port: str) -> PortBinding:
        for binding in self.bindings:
            if binding.port == port:
                return binding
        raise KeyError(port)

    def __contains__(self, port: object) -> bool:
        return any(binding.port == port for binding in self.bindings)

    def as_dict(self) -> Dict[str, str]:
        return {binding.port: binding.value for binding in self.bindings}


def select_tick_phase(
    trigger: TriggerPolicy, requires_global_clock: bool, clock_network: ClockNetwork
) -> int:
    """Clock bus bit a synchronous memory samples its tick from."""
    if requires_global_clock:
        return clock_network.global_clock_index
    if trigger == TriggerPolicy.RISING_EDGE:
        return clock_network.positive_edge_tick_index
    return clock_network.negative_edge_tick_index


class PortBinder:
    """Resolves planned ports against a netlist."""

    def __init__(
        self,
        netlist: Netlist,
        reporter: Reporter,
        clock_network: Optional[ClockNetwork] = None,
    ):
        self.netlist = netlist
        self.reporter = reporter
        self.clock_network = clock_network or ClockNetwork()

    def bind(self, plan: SignalPlan) -> BindingTable:
        """
        Bind every port of ``plan``.

        Args:
            plan: Planned declarations of the instance

        Returns:
            BindingTable in port-name order
        """
        layout = TerminalLayout.for_config(plan.config)
        clock_bindings = self._bind_clock(plan, layout)
        bindings: List[PortBinding] = []
        for port in plan.ports:
            if port.name in clock_bindings:
                bindings.append(clock_bindings[port.name])
            else:
                bindings.append(self.bind_port(port, plan, layout))
        return BindingTable(bindings=tuple(bindings))

    def bind_port(
        self, port: Port, plan: SignalPlan, layout: Optional[TerminalLayout] = None
    ) -> PortBinding:
        """Bind a data, control or byte-enable port.

        Raises:
            ValueError: For ``Clock``/``Tick``, which are bound together by ``bind``
        """
        layout = layout or TerminalLayout.for_config(plan.config)
        terminals = {
            ADDRESS: layout.address,
            DATA_IN: layout.data_in,
            WRITE_ENABLE: layout.write_enable,
            OUTPUT_ENABLE: layout.output_enable,
            DATA_OUT: layout.data_out,
        }
        if port.name in terminals:
            return self._net_binding(port, terminals[port.name], floating_bit=0)
        for lane in range(plan.lane_count if plan.byte_enables else 0):
            if port.name == byte_enable_port_name(lane):
                terminal = byte_enable_terminal(layout.byte_enable_offset, plan.lane_count, lane)
                # A floating byte enable leaves its lane enabled
                return self._net_binding(port, terminal, floating_bit=1)
        raise ValueError(f"Port '{port.name}' is not a data or control port")

    def _net_binding(self, port: Port, terminal: int, floating_bit: int) -> PortBinding:
        if self.netlist.is_connected(terminal):
            return PortBinding(
                port=port.name, value=self.netlist.net_name(terminal), kind=BindingKind.NET
            )
        if port.is_output:
            return PortBinding(port=port.name, value=OPEN, kind=BindingKind.OPEN)
        return PortBinding(
            port=port.name,
            value=vhdl_constant(port.width, floating_bit),
            kind=BindingKind.CONSTANT,
        )

    def _bind_clock(self, plan: SignalPlan, layout: TerminalLayout) -> Dict[str, PortBinding]:
        if not plan.has_port(CLOCK) or layout.clock is None:
            return {}

        terminal = layout.clock
        if not self.netlist.is_connected(terminal):
            self.reporter.add_warning(
                f'Component "RAM" ({plan.config.name}) in circuit '
                f'"{self.netlist.circuit_name}" has no clock connection!'
            )
            return {
                CLOCK: PortBinding(port=CLOCK, value=vhdl_constant(1, 0), kind=BindingKind.CONSTANT),
                TICK: PortBinding(port=TICK, value=vhdl_constant(1, 0), kind=BindingKind.CONSTANT),
            }

        clock_net = self.netlist.clock_net_name(terminal)
        if not clock_net:
            logger.debug("RAM '%s' clocked by plain signal", plan.config.name)
            return {
                CLOCK: PortBinding(
                    port=CLOCK, value=self.netlist.net_name(terminal), kind=BindingKind.NET
                ),
                TICK: PortBinding(port=TICK, value=vhdl_constant(1, 1), kind=BindingKind.CONSTANT),
            }

        global_index = self.clock_network.global_clock_index
        tick_index = select_tick_phase(
            plan.config.trigger, self.netlist.requires_global_clock, self.clock_network
        )
        logger.debug(
            "RAM '%s' clocked by generator '%s', tick phase %d",
            plan.config.name,
            clock_net,
            tick_index,
        )
        return {
            CLOCK: PortBinding(
                port=CLOCK,
                value=f"{clock_net}({global_index})",
                kind=BindingKind.NET,
                clock_bus_index=global_index,
            ),
            TICK: PortBinding(
                port=TICK,
                value=f"{clock_net}({tick_index})",
                kind=BindingKind.NET,
                clock_bus_index=tick_index,
            ),
        }
