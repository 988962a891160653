"""
Configuration model for one RAM instance.

``RamConfig`` is an immutable snapshot of the attributes of a memory
component. Every quantity the planner, emitter and binder need (lane
count, raggedness, lane bit slices) is derived here so that no two
components can disagree about how a word is partitioned.
"""

from enum import Enum
from typing import Any, List

from pydantic import Field, field_validator

from .base import FrozenModel, StrictModel, lookup_enum

BYTE_WIDTH = 8


class TriggerPolicy(str, Enum):
    """Clock trigger policy of the memory."""

    RISING_EDGE = "rising"
    FALLING_EDGE = "falling"
    HIGH_LEVEL = "high"
    LOW_LEVEL = "low"

    @property
    def is_level(self) -> bool:
        """Level triggered (asynchronous) policies."""
        return self in (TriggerPolicy.HIGH_LEVEL, TriggerPolicy.LOW_LEVEL)


_TRIGGER_ALIASES = {
    "risingedge": TriggerPolicy.RISING_EDGE,
    "posedge": TriggerPolicy.RISING_EDGE,
    "fallingedge": TriggerPolicy.FALLING_EDGE,
    "negedge": TriggerPolicy.FALLING_EDGE,
    "highlevel": TriggerPolicy.HIGH_LEVEL,
    "lowlevel": TriggerPolicy.LOW_LEVEL,
}


class ReadPolicy(str, Enum):
    """Behavior of a read addressing the word being written in the same cycle."""

    READ_AFTER_WRITE = "readAfterWrite"
    READ_BEFORE_WRITE = "readBeforeWrite"
    DONT_CARE = "dontCare"


_READ_ALIASES = {
    "raw": ReadPolicy.READ_AFTER_WRITE,
    "writefirst": ReadPolicy.READ_AFTER_WRITE,
    "rbw": ReadPolicy.READ_BEFORE_WRITE,
    "readfirst": ReadPolicy.READ_BEFORE_WRITE,
}


class LaneSlice(FrozenModel):
    """Bit slice ``[lsb, msb]`` of the memory word covered by one lane."""

    index: int = Field(..., ge=0)
    lsb: int = Field(..., ge=0)
    msb: int = Field(..., ge=0)

    @property
    def width(self) -> int:
        return self.msb - self.lsb + 1


class RamConfig(StrictModel):
    """
    Immutable description of a synchronous RAM instance.

    Created once per memory instance at generation time and owned by the
    generation pass for that instance.
    """

    name: str = Field(default="ram", description="Instance label used in diagnostics")
    word_width: int = Field(..., ge=1, description="Data word width in bits")
    address_width: int = Field(..., ge=1, description="Address width in bits")
    trigger: TriggerPolicy = Field(
        default=TriggerPolicy.RISING_EDGE, description="Clock trigger policy"
    )
    byte_enables: bool = Field(default=False, description="Byte-enable lanes requested")
    bus_separate: bool = Field(
        default=True, description="Separate data-in and data-out buses"
    )
    clear_pin: bool = Field(default=False, description="Memory-clear control line present")
    read_policy: ReadPolicy = Field(
        default=ReadPolicy.READ_AFTER_WRITE, description="Read/write collision policy"
    )
    level_enable_ports: int = Field(
        default=0, ge=0, description="Number of non-byte (level) enable ports"
    )
    async_read: bool = Field(default=False, description="Unclocked read port")

    @field_validator("trigger", mode="before")
    @classmethod
    def normalize_trigger(cls, v: Any) -> Any:
        return lookup_enum(TriggerPolicy, v, _TRIGGER_ALIASES)

    @field_validator("read_policy", mode="before")
    @classmethod
    def normalize_read_policy(cls, v: Any) -> Any:
        return lookup_enum(ReadPolicy, v, _READ_ALIASES)

    @property
    def asynchronous(self) -> bool:
        """True for level-triggered memories."""
        return self.trigger.is_level

    @property
    def lane_count(self) -> int:
        """Number of independently enabled lanes (1 without byte enables)."""
        if not self.byte_enables:
            return 1
        return (self.word_width + BYTE_WIDTH - 1) // BYTE_WIDTH

    @property
    def ragged(self) -> bool:
        """The last lane is narrower than a byte."""
        return self.byte_enables and self.word_width % BYTE_WIDTH != 0

    @property
    def last_lane_width(self) -> int:
        return self.word_width % BYTE_WIDTH if self.ragged else BYTE_WIDTH

    @property
    def entry_count(self) -> int:
        """Number of words stored."""
        return 1 << self.address_width

    def lane_width(self, lane: int) -> int:
        """Width of ``lane`` in bits.

        Raises:
            ValueError: If the lane index is out of range
        """
        if not 0 <= lane < self.lane_count:
            raise ValueError(f"Lane {lane} out of range [0, {self.lane_count})")
        if not self.byte_enables:
            return self.word_width
        if lane == self.lane_count - 1:
            return self.last_lane_width
        return BYTE_WIDTH

    @property
    def lane_slices(self) -> List[LaneSlice]:
        """Ascending, non-overlapping bit slices covering the whole word."""
        slices = []
        lsb = 0
        for lane in range(self.lane_count):
            width = self.lane_width(lane)
            slices.append(LaneSlice(index=lane, lsb=lsb, msb=lsb + width - 1))
            lsb += width
        return slices
