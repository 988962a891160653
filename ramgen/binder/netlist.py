"""
Connectivity model consumed by the port binder.

The netlist collaborator answers per-terminal questions about a RAM
component: is a terminal connected, which net drives it, and whether that
net is the bus of a recognized clock generator. ``StaticNetlist`` is a
plain in-memory implementation that can be loaded from YAML.
"""

from typing import Dict, Optional, Protocol

from pydantic import Field, model_validator

from ramgen.model.base import FrozenModel, StrictModel
from ramgen.model.config import RamConfig


class Netlist(Protocol):
    """Connectivity queries for one component instance."""

    @property
    def circuit_name(self) -> str: ...

    @property
    def requires_global_clock(self) -> bool: ...

    def is_connected(self, terminal: int) -> bool: ...

    def net_name(self, terminal: int) -> str: ...

    def clock_net_name(self, terminal: int) -> str: ...


class ClockNetwork(FrozenModel):
    """Reserved bit offsets within a clock generator's bus."""

    positive_edge_tick_index: int = 2
    negative_edge_tick_index: int = 3
    global_clock_index: int = 4


class TerminalLayout(FrozenModel):
    """
    Terminal indices of a RAM component.

    The clock terminal only exists on synchronous memories; byte-enable
    terminals occupy ``lane_count`` consecutive indices starting at
    ``byte_enable_offset``.
    """

    address: int
    data_out: int
    data_in: int
    write_enable: int
    output_enable: int
    clock: Optional[int]
    byte_enable_offset: int

    @classmethod
    def for_config(cls, cfg: RamConfig) -> "TerminalLayout":
        clock = None if cfg.asynchronous else 5
        return cls(
            address=0,
            data_out=1,
            data_in=2,
            write_enable=3,
            output_enable=4,
            clock=clock,
            byte_enable_offset=5 if clock is None else 6,
        )


class TerminalConnection(StrictModel):
    """Net attached to one terminal.

    ``clock_net`` names the clock generator bus when the terminal is driven
    by a recognized clock component.
    """

    net: str = Field(..., min_length=1, description="Net or bus slice driving the terminal")
    clock_net: Optional[str] = Field(
        default=None, description="Clock generator bus name, if any"
    )


class StaticNetlist(StrictModel):
    """In-memory connectivity of one RAM component."""

    circuit_name: str = Field(..., description="Name of the enclosing circuit")
    requires_global_clock: bool = Field(
        default=False, description="The design runs in a single global clock domain"
    )
    terminals: Dict[int, TerminalConnection] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_terminals(self) -> "StaticNetlist":
        negative = [t for t in self.terminals if t < 0]
        if negative:
            raise ValueError(f"Terminal indices must be non-negative: {negative}")
        return self

    def is_connected(self, terminal: int) -> bool:
        return terminal in self.terminals

    def net_name(self, terminal: int) -> str:
        """Net driving ``terminal``.

        Raises:
            KeyError: If the terminal is not connected
        """
        return self.terminals[terminal].net

    def clock_net_name(self, terminal: int) -> str:
        """Clock generator bus driving ``terminal``, or an empty string."""
        connection = self.terminals.get(terminal)
        if connection is None or connection.clock_net is None:
            return ""
        return connection.clock_net
