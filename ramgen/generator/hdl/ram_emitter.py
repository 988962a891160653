"""
RTL emitter reproducing the simulator's memory timing.

The emitted body realizes a fixed three-cycle latency between a ``Tick``
strobe and its effect on ``DataOut``:

1. ``InputRegs`` latches address, data, enables and byte enables on a
   tick, while ``TickPipeReg`` shifts the tick into the delay line.
2. Concurrent assignments gate the write pulse with delay-line bit 0 and
   the output-latch enable with bit 2.
3. ``Mem`` processes write the lane slice when the write pulse is high
   and read the addressed entry on every edge.
4. ``Res`` processes latch the read data into ``DataOut`` when the
   output-latch enable is high.

Process order is fixed so that output is diff-stable; correctness relies
only on the delay-line latency.
"""

from typing import List

from ramgen.core.planner import (
    ADDRESS,
    ADDRESS_REG,
    BYTE_ENABLE_REG,
    CLOCK,
    DATA_IN,
    DATA_IN_REG,
    DATA_OUT,
    OE_REG,
    OUTPUT_ENABLE,
    RAM_DATA_OUT,
    TICK,
    TICK_DELAY_LINE,
    WE_REG,
    WRITE_ENABLE,
    SignalPlan,
    byte_enable_port_name,
)
from ramgen.core.timing import TICK_DELAY_DEPTH, access_enable_taps
from ramgen.errors import UnsupportedConfigurationError

from .statements import (
    Assignment,
    Blank,
    ClockedProcess,
    Conjunction,
    ConcurrentAssignment,
    IfBlock,
    MemoryElement,
    Ref,
    RemarkBlock,
    Statement,
)


class RamRtlEmitter:
    """Builds the ordered process body of one RAM instance."""

    def __init__(self, plan: SignalPlan):
        if not plan.synchronous:
            raise UnsupportedConfigurationError(
                f"RAM '{plan.config.name}' has no clock; cannot emit timing pipeline"
            )
        self.plan = plan

    def statements(self) -> List[Statement]:
        """Return the complete body in emission order."""
        body: List[Statement] = []
        body.extend(self.control_signals())
        body.append(Blank())
        body.append(RemarkBlock(text="Here the input registers are defined"))
        body.append(self.input_registers())
        body.append(Blank())
        body.append(self.tick_pipeline())
        body.append(Blank())
        body.append(RemarkBlock(text="Here the actual memories are defined"))
        for lane in range(self.plan.lane_count):
            body.append(self.storage_process(lane))
            body.append(Blank())
        body.append(RemarkBlock(text="Here the output registers are defined"))
        for lane in range(self.plan.lane_count):
            body.append(self.output_process(lane))
            body.append(Blank())
        return body

    def control_signals(self) -> List[Statement]:
        """Write pulses and output-latch enables, one pair per lane."""
        taps = access_enable_taps()
        statements: List[Statement] = [
            RemarkBlock(text="Here the control signals are defined")
        ]
        for lane in range(self.plan.lane_count):
            read_terms = [Ref.bit(TICK_DELAY_LINE, taps.read), Ref(name=OE_REG)]
            write_terms = [Ref.bit(TICK_DELAY_LINE, taps.write), Ref(name=WE_REG)]
            if self.plan.byte_enables:
                lane_enable = Ref.bit(BYTE_ENABLE_REG, lane)
                read_terms.insert(0, lane_enable)
                write_terms.insert(0, lane_enable)
            statements.append(
                ConcurrentAssignment(
                    target=Ref(name=self.plan.read_enable(lane)),
                    value=Conjunction(terms=tuple(read_terms)),
                )
            )
            statements.append(
                ConcurrentAssignment(
                    target=Ref(name=self.plan.write_enable(lane)),
                    value=Conjunction(terms=tuple(write_terms)),
                )
            )
        return statements

    def input_registers(self) -> ClockedProcess:
        """Capture stage: latch all inputs on a tick."""
        captures = [
            Assignment(target=Ref(name=DATA_IN_REG), value=Ref(name=DATA_IN)),
            Assignment(target=Ref(name=ADDRESS_REG), value=Ref(name=ADDRESS)),
            Assignment(target=Ref(name=WE_REG), value=Ref(name=WRITE_ENABLE)),
            Assignment(target=Ref(name=OE_REG), value=Ref(name=OUTPUT_ENABLE)),
        ]
        sensitivity = [CLOCK, TICK, ADDRESS, DATA_IN, WRITE_ENABLE, OUTPUT_ENABLE]
        if self.plan.byte_enables:
            for lane in range(self.plan.lane_count):
                captures.append(
                    Assignment(
                        target=Ref.bit(BYTE_ENABLE_REG, lane),
                        value=Ref(name=byte_enable_port_name(lane)),
                    )
                )
        return ClockedProcess(
            label="InputRegs",
            clock=CLOCK,
            sensitivity=tuple(sensitivity),
            statements=(IfBlock(condition=Ref(name=TICK), statements=tuple(captures)),),
        )

    def tick_pipeline(self) -> ClockedProcess:
        """Delay line republishing the tick one, two and three cycles later."""
        top = TICK_DELAY_DEPTH - 1
        return ClockedProcess(
            label="TickPipeReg",
            clock=CLOCK,
            sensitivity=(CLOCK,),
            statements=(
                Assignment(target=Ref.bit(TICK_DELAY_LINE, 0), value=Ref(name=TICK)),
                Assignment(
                    target=Ref.slice(TICK_DELAY_LINE, top, 1),
                    value=Ref.slice(TICK_DELAY_LINE, top - 1, 0),
                ),
            ),
        )

    def _lane_ref(self, name: str, lane: int) -> Ref:
        # A single lane spans the whole signal
        if self.plan.lane_count == 1:
            return Ref(name=name)
        lane_slice = self.plan.lane_slice(lane)
        return Ref.slice(name, lane_slice.msb, lane_slice.lsb)

    def storage_process(self, lane: int) -> ClockedProcess:
        """Storage access stage for ``lane``: conditional write, unconditional read."""
        array = self.plan.lane_array(lane)
        element = MemoryElement(array=array.name, address=Ref(name=ADDRESS_REG))
        write_enable = self.plan.write_enable(lane)
        label = f"Mem{lane}" if self.plan.byte_enables else "Mem"
        return ClockedProcess(
            label=label,
            clock=CLOCK,
            sensitivity=(CLOCK, write_enable, DATA_IN_REG, ADDRESS_REG),
            statements=(
                IfBlock(
                    condition=Ref(name=write_enable),
                    statements=(
                        Assignment(target=element, value=self._lane_ref(DATA_IN_REG, lane)),
                    ),
                ),
                Assignment(target=self._lane_ref(RAM_DATA_OUT, lane), value=element),
            ),
        )

    def output_process(self, lane: int) -> ClockedProcess:
        """Output capture stage for ``lane``; ``DataOut`` holds when not enabled."""
        read_enable = self.plan.read_enable(lane)
        label = f"Res{lane}" if self.plan.byte_enables else "Res"
        return ClockedProcess(
            label=label,
            clock=CLOCK,
            sensitivity=(CLOCK, read_enable, RAM_DATA_OUT),
            statements=(
                IfBlock(
                    condition=Ref(name=read_enable),
                    statements=(
                        Assignment(
                            target=self._lane_ref(DATA_OUT, lane),
                            value=self._lane_ref(RAM_DATA_OUT, lane),
                        ),
                    ),
                ),
            ),
        )
