"""
Signal planner for RAM generation.

Enumerates the entity ports, registers, wires, storage arrays and array
types of one RAM instance. The resulting ``SignalPlan`` is the only place
lane names are decided; the emitter and the port binder both read them
from here.
"""

import logging
from typing import Tuple

from pydantic import model_validator

from ramgen.core.feasibility import require_supported
from ramgen.core.timing import TICK_DELAY_DEPTH
from ramgen.model.base import FrozenModel
from ramgen.model.config import BYTE_WIDTH, LaneSlice, RamConfig
from ramgen.model.declarations import ArrayType, Register, StorageArray, StorageRole, Wire
from ramgen.model.port import Port, PortDirection

logger = logging.getLogger(__name__)

# Entity ports
ADDRESS = "Address"
DATA_IN = "DataIn"
DATA_OUT = "DataOut"
WRITE_ENABLE = "WE"
OUTPUT_ENABLE = "OE"
CLOCK = "Clock"
TICK = "Tick"
BYTE_ENABLE_PREFIX = "ByteEnable"

# Registers
TICK_DELAY_LINE = "s_tick_delay_line"
DATA_IN_REG = "s_data_in_reg"
ADDRESS_REG = "s_address_reg"
WE_REG = "s_we_reg"
OE_REG = "s_oe_reg"
BYTE_ENABLE_REG = "s_byte_enable_reg"

# Wires
RAM_DATA_OUT = "s_ram_data_out"
WE_WIRE = "s_we"
OE_WIRE = "s_oe"

# Array types
MEMORY_ARRAY = "MEMORY_ARRAY"
BYTE_ARRAY = "BYTE_ARRAY"
REST_ARRAY = "REST_ARRAY"

FULL_WORD_MEMORY = "s_mem_contents"
RAGGED_MEMORY = "s_trunc_mem_contents"


def byte_enable_port_name(lane: int) -> str:
    return f"{BYTE_ENABLE_PREFIX}{lane}"


def byte_memory_name(lane: int) -> str:
    return f"s_byte_mem_{lane}_contents"


class SignalPlan(FrozenModel):
    """Ordered declaration sets of one RAM instance."""

    config: RamConfig
    ports: Tuple[Port, ...]
    registers: Tuple[Register, ...]
    wires: Tuple[Wire, ...]
    storage_arrays: Tuple[StorageArray, ...]
    array_types: Tuple[ArrayType, ...]

    @model_validator(mode="after")
    def check_unique_names(self) -> "SignalPlan":
        names = [p.name for p in self.ports]
        names += [r.name for r in self.registers]
        names += [w.name for w in self.wires]
        names += [a.name for a in self.storage_arrays]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate signal names: {', '.join(duplicates)}")
        return self

    @property
    def lane_count(self) -> int:
        return self.config.lane_count

    @property
    def byte_enables(self) -> bool:
        return self.config.byte_enables

    @property
    def synchronous(self) -> bool:
        return not self.config.asynchronous

    def port(self, name: str) -> Port:
        """Look up a planned port.

        Raises:
            KeyError: If no port has that name
        """
        for port in self.ports:
            if port.name == name:
                return port
        raise KeyError(f"No port named '{name}'")

    def has_port(self, name: str) -> bool:
        return any(port.name == name for port in self.ports)

    def lane_slice(self, lane: int) -> LaneSlice:
        return self.config.lane_slices[lane]

    def lane_array(self, lane: int) -> StorageArray:
        """Storage array holding ``lane`` (the full-word array without byte enables)."""
        for array in self.storage_arrays:
            if array.role == StorageRole.FULL_WORD or array.lane == lane:
                return array
        raise KeyError(f"No storage array for lane {lane}")

    def write_enable(self, lane: int) -> str:
        """Name of the write pulse wire of ``lane``."""
        return f"{WE_WIRE}_{lane}" if self.byte_enables else WE_WIRE

    def read_enable(self, lane: int) -> str:
        """Name of the output-latch enable wire of ``lane``."""
        return f"s_byte_enable_{lane}" if self.byte_enables else OE_WIRE


class SignalPlanner:
    """Deterministically derives a ``SignalPlan`` from a ``RamConfig``."""

    def plan(self, cfg: RamConfig) -> SignalPlan:
        """
        Plan all declarations for ``cfg``.

        Args:
            cfg: Instance configuration

        Returns:
            SignalPlan with every collection sorted by name

        Raises:
            UnsupportedConfigurationError: If ``cfg`` fails the feasibility check
        """
        require_supported(cfg)
        logger.debug(
            "Planning RAM '%s': %d x %d bits, %d lane(s)",
            cfg.name,
            cfg.entry_count,
            cfg.word_width,
            cfg.lane_count,
        )
        return SignalPlan(
            config=cfg,
            ports=self._ports(cfg),
            registers=self._registers(cfg),
            wires=self._wires(cfg),
            storage_arrays=self._storage_arrays(cfg),
            array_types=self._array_types(cfg),
        )

    @staticmethod
    def _ports(cfg: RamConfig) -> Tuple[Port, ...]:
        ports = [
            Port(name=ADDRESS, direction=PortDirection.IN, width=cfg.address_width),
            Port(name=DATA_IN, direction=PortDirection.IN, width=cfg.word_width),
            Port(name=WRITE_ENABLE, direction=PortDirection.IN, width=1),
            Port(name=OUTPUT_ENABLE, direction=PortDirection.IN, width=1),
            Port(name=DATA_OUT, direction=PortDirection.OUT, width=cfg.word_width),
        ]
        if not cfg.asynchronous:
            ports.append(Port(name=CLOCK, direction=PortDirection.IN, width=1))
            ports.append(Port(name=TICK, direction=PortDirection.IN, width=1))
        if cfg.byte_enables:
            for lane in range(cfg.lane_count):
                ports.append(
                    Port(name=byte_enable_port_name(lane), direction=PortDirection.IN, width=1)
                )
        return tuple(sorted(ports, key=lambda p: p.name))

    @staticmethod
    def _registers(cfg: RamConfig) -> Tuple[Register, ...]:
        regs = [
            Register(name=TICK_DELAY_LINE, width=TICK_DELAY_DEPTH, indexed=True),
            Register(name=DATA_IN_REG, width=cfg.word_width),
            Register(name=ADDRESS_REG, width=cfg.address_width),
            Register(name=WE_REG, width=1),
            Register(name=OE_REG, width=1),
        ]
        if cfg.byte_enables:
            regs.append(Register(name=BYTE_ENABLE_REG, width=cfg.lane_count, indexed=True))
        return tuple(sorted(regs, key=lambda r: r.name))

    @staticmethod
    def _wires(cfg: RamConfig) -> Tuple[Wire, ...]:
        wires = [Wire(name=RAM_DATA_OUT, width=cfg.word_width)]
        if cfg.byte_enables:
            for lane in range(cfg.lane_count):
                wires.append(Wire(name=f"s_byte_enable_{lane}", width=1))
                wires.append(Wire(name=f"{WE_WIRE}_{lane}", width=1))
        else:
            wires.append(Wire(name=OE_WIRE, width=1))
            wires.append(Wire(name=WE_WIRE, width=1))
        return tuple(sorted(wires, key=lambda w: w.name))

    @staticmethod
    def _storage_arrays(cfg: RamConfig) -> Tuple[StorageArray, ...]:
        if not cfg.byte_enables:
            return (
                StorageArray(
                    name=FULL_WORD_MEMORY,
                    type_name=MEMORY_ARRAY,
                    entry_width=cfg.word_width,
                    entry_count=cfg.entry_count,
                    role=StorageRole.FULL_WORD,
                ),
            )

        arrays = []
        for lane in range(cfg.lane_count):
            if cfg.ragged and lane == cfg.lane_count - 1:
                arrays.append(
                    StorageArray(
                        name=RAGGED_MEMORY,
                        type_name=REST_ARRAY,
                        entry_width=cfg.last_lane_width,
                        entry_count=cfg.entry_count,
                        role=StorageRole.RAGGED_REMAINDER,
                        lane=lane,
                    )
                )
            else:
                arrays.append(
                    StorageArray(
                        name=byte_memory_name(lane),
                        type_name=BYTE_ARRAY,
                        entry_width=BYTE_WIDTH,
                        entry_count=cfg.entry_count,
                        role=StorageRole.BYTE_LANE,
                        lane=lane,
                    )
                )
        return tuple(sorted(arrays, key=lambda a: a.name))

    @staticmethod
    def _array_types(cfg: RamConfig) -> Tuple[ArrayType, ...]:
        if not cfg.byte_enables:
            return (
                ArrayType(
                    name=MEMORY_ARRAY, entry_width=cfg.word_width, entry_count=cfg.entry_count
                ),
            )
        types = []
        # A 1..7 bit word with byte enables is a single ragged lane: no full byte lane
        if cfg.word_width >= BYTE_WIDTH:
            types.append(
                ArrayType(name=BYTE_ARRAY, entry_width=BYTE_WIDTH, entry_count=cfg.entry_count)
            )
        if cfg.ragged:
            types.append(
                ArrayType(
                    name=REST_ARRAY,
                    entry_width=cfg.last_lane_width,
                    entry_count=cfg.entry_count,
                )
            )
        return tuple(types)
