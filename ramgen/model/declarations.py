"""
Internal declarations of a generated RAM architecture.

Registers and wires are plain named vectors; storage arrays carry the
role they play in the lane partitioning and the name of the array type
they are declared with.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from .base import FrozenModel


class Register(FrozenModel):
    """Clocked internal signal.

    ``indexed`` registers are addressed bit by bit and are always declared
    as vectors, even when one bit wide.
    """

    name: str
    width: int = Field(..., ge=1)
    indexed: bool = False


class Wire(FrozenModel):
    """Combinational internal signal."""

    name: str
    width: int = Field(..., ge=1)


class StorageRole(str, Enum):
    """Part of the memory word held by a storage array."""

    FULL_WORD = "fullWord"
    BYTE_LANE = "byteLane"
    RAGGED_REMAINDER = "raggedRemainder"


class ArrayType(FrozenModel):
    """Array type declaration (one per distinct storage shape)."""

    name: str
    entry_width: int = Field(..., ge=1)
    entry_count: int = Field(..., ge=2)


class StorageArray(FrozenModel):
    """
    Memory contents array.

    ``lane`` is set for ``BYTE_LANE`` and ``RAGGED_REMAINDER`` arrays and
    is ``None`` for the single ``FULL_WORD`` array.
    """

    name: str
    type_name: str
    entry_width: int = Field(..., ge=1)
    entry_count: int = Field(..., ge=2)
    role: StorageRole
    lane: Optional[int] = None

    @model_validator(mode="after")
    def check_lane(self) -> "StorageArray":
        if self.role == StorageRole.FULL_WORD and self.lane is not None:
            raise ValueError("Full-word arrays do not belong to a lane")
        if self.role != StorageRole.FULL_WORD and self.lane is None:
            raise ValueError(f"{self.role.value} arrays require a lane index")
        return self
