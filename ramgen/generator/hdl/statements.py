"""
Dialect-neutral statement records produced by the RTL emitter.

Expressions reference signals by the names the signal planner chose;
renderers turn the records into text for one HDL dialect.
"""

from typing import Literal, Optional, Tuple, Union

from pydantic import Field

from ramgen.model.base import FrozenModel


class Ref(FrozenModel):
    """Reference to a signal, a single bit of it, or a ``[msb:lsb]`` slice."""

    kind: Literal["ref"] = "ref"
    name: str
    index: Optional[int] = None
    msb: Optional[int] = None
    lsb: Optional[int] = None

    @classmethod
    def bit(cls, name: str, index: int) -> "Ref":
        return cls(name=name, index=index)

    @classmethod
    def slice(cls, name: str, msb: int, lsb: int) -> "Ref":
        return cls(name=name, msb=msb, lsb=lsb)


class Conjunction(FrozenModel):
    """Logical AND of single-bit references."""

    kind: Literal["and"] = "and"
    terms: Tuple[Ref, ...] = Field(..., min_length=2)


class MemoryElement(FrozenModel):
    """Storage array entry selected by an address signal."""

    kind: Literal["element"] = "element"
    array: str
    address: Ref


Expression = Union[Ref, Conjunction, MemoryElement]
Target = Union[Ref, MemoryElement]


class Assignment(FrozenModel):
    """Sequential (clocked) signal assignment."""

    kind: Literal["assign"] = "assign"
    target: Target
    value: Expression


class IfBlock(FrozenModel):
    """Statements guarded by a single-bit signal being high."""

    kind: Literal["if"] = "if"
    condition: Ref
    statements: Tuple[Union[Assignment, "IfBlock"], ...]


IfBlock.model_rebuild()

SequentialStatement = Union[Assignment, IfBlock]


class RemarkBlock(FrozenModel):
    """Boxed comment introducing a group of statements."""

    kind: Literal["remark"] = "remark"
    text: str


class ConcurrentAssignment(FrozenModel):
    """Combinational assignment outside any process."""

    kind: Literal["concurrent"] = "concurrent"
    target: Ref
    value: Expression


class ClockedProcess(FrozenModel):
    """Process whose statements execute on every rising edge of ``clock``."""

    kind: Literal["process"] = "process"
    label: str
    clock: str
    sensitivity: Tuple[str, ...]
    statements: Tuple[SequentialStatement, ...]


class Blank(FrozenModel):
    """Empty separator line."""

    kind: Literal["blank"] = "blank"


Statement = Union[RemarkBlock, ConcurrentAssignment, ClockedProcess, Blank]
