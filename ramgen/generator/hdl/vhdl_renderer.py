"""
VHDL rendering of planner declarations and emitter statements.

Only VHDL is a supported target. Asking for any other dialect raises
``UnsupportedTargetError`` instead of producing empty output.
"""

from enum import Enum
from typing import Dict, List, Sequence

from ramgen.core.planner import SignalPlan
from ramgen.errors import UnsupportedTargetError
from ramgen.utils import indent, vhdl_range, vhdl_type

from .statements import (
    Assignment,
    Blank,
    ClockedProcess,
    ConcurrentAssignment,
    Conjunction,
    IfBlock,
    MemoryElement,
    Ref,
    RemarkBlock,
    Statement,
)

REMARK_WIDTH = 75


class HdlTarget(str, Enum):
    """Output dialects known to the generator."""

    VHDL = "VHDL"
    VERILOG = "Verilog"


SUPPORTED_TARGETS = (HdlTarget.VHDL,)


def check_target(target: HdlTarget) -> None:
    """Reject rendering targets other than VHDL."""
    if target not in SUPPORTED_TARGETS:
        supported = ", ".join(t.value for t in SUPPORTED_TARGETS)
        raise UnsupportedTargetError(
            f"Unsupported HDL target: {getattr(target, 'value', target)}. Supported: {supported}"
        )


class VhdlRenderer:
    """Renders a ``SignalPlan`` and its statements as VHDL lines."""

    def __init__(self, plan: SignalPlan):
        self.plan = plan
        self._widths: Dict[str, int] = {p.name: p.width for p in plan.ports}
        self._widths.update({r.name: r.width for r in plan.registers})
        self._widths.update({w.name: w.width for w in plan.wires})

    # Declarations

    def type_declarations(self) -> List[str]:
        # Lanes of a multi-lane word are accessed as slices, so even a
        # one-bit remainder entry must be a vector
        sliced = self.plan.lane_count > 1
        return [
            f"TYPE {t.name} IS ARRAY ({vhdl_range(t.entry_count - 1)}) "
            f"OF {vhdl_type(t.entry_width, force_vector=sliced)};"
            for t in self.plan.array_types
        ]

    def signal_declarations(self) -> List[str]:
        lines = [f"SIGNAL {a.name} : {a.type_name};" for a in self.plan.storage_arrays]
        lines += [
            f"SIGNAL {r.name} : {vhdl_type(r.width, force_vector=r.indexed)};"
            for r in self.plan.registers
        ]
        lines += [f"SIGNAL {w.name} : {vhdl_type(w.width)};" for w in self.plan.wires]
        return lines

    def port_declarations(self) -> List[str]:
        """Entity port clauses without the trailing separator."""
        return [
            f"{p.name} : {p.direction.value.upper()} {vhdl_type(p.width)}"
            for p in self.plan.ports
        ]

    # Expressions

    def expression(self, expr) -> str:
        if isinstance(expr, Ref):
            if expr.index is not None:
                return f"{expr.name}({expr.index})"
            if expr.msb is not None:
                return f"{expr.name}({vhdl_range(expr.msb, expr.lsb)})"
            return expr.name
        if isinstance(expr, Conjunction):
            return " AND ".join(self.expression(term) for term in expr.terms)
        if isinstance(expr, MemoryElement):
            address = self.expression(expr.address)
            if self._widths.get(expr.address.name, 0) == 1 and expr.address.index is None:
                return f"{expr.array}(to_integer(unsigned'(0 => {address})))"
            return f"{expr.array}(to_integer(unsigned({address})))"
        raise TypeError(f"Cannot render expression {expr!r}")

    # Statements

    def remark_block(self, text: str, level: int = 1) -> List[str]:
        border = "-" * REMARK_WIDTH
        body = f"-- {text}".ljust(REMARK_WIDTH - 2) + "--"
        return [indent(level, border), indent(level, body), indent(level, border)]

    def sequential(self, statement, level: int) -> List[str]:
        if isinstance(statement, Assignment):
            target = self.expression(statement.target)
            return [indent(level, f"{target} <= {self.expression(statement.value)};")]
        if isinstance(statement, IfBlock):
            lines = [indent(level, f"IF ({self.expression(statement.condition)} = '1') THEN")]
            for inner in statement.statements:
                lines.extend(self.sequential(inner, level + 1))
            lines.append(indent(level, "END IF;"))
            return lines
        raise TypeError(f"Cannot render sequential statement {statement!r}")

    def process(self, process: ClockedProcess, level: int = 1) -> List[str]:
        sensitivity = ", ".join(process.sensitivity)
        lines = [
            indent(level, f"{process.label} : PROCESS ({sensitivity})"),
            indent(level, "BEGIN"),
            indent(level + 1, f"IF (rising_edge({process.clock})) THEN"),
        ]
        for statement in process.statements:
            lines.extend(self.sequential(statement, level + 2))
        lines.append(indent(level + 1, "END IF;"))
        lines.append(indent(level, f"END PROCESS {process.label};"))
        return lines

    def statement(self, statement: Statement, level: int = 1) -> List[str]:
        if isinstance(statement, RemarkBlock):
            return self.remark_block(statement.text, level)
        if isinstance(statement, ConcurrentAssignment):
            target = self.expression(statement.target)
            return [indent(level, f"{target} <= {self.expression(statement.value)};")]
        if isinstance(statement, ClockedProcess):
            return self.process(statement, level)
        if isinstance(statement, Blank):
            return [""]
        raise TypeError(f"Cannot render statement {statement!r}")

    def body(self, statements: Sequence[Statement]) -> List[str]:
        lines: List[str] = []
        for statement in statements:
            lines.extend(self.statement(statement))
        return lines


def render_statements(
    plan: SignalPlan, statements: Sequence[Statement], target: HdlTarget = HdlTarget.VHDL
) -> str:
    """Render ``statements`` as text in ``target``.

    Raises:
        UnsupportedTargetError: For any target other than VHDL
    """
    check_target(target)
    return "\n".join(VhdlRenderer(plan).body(statements)) + "\n"
