"""
Port definitions for generated RAM entities.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from .base import FrozenModel


class PortDirection(str, Enum):
    """Port direction enumeration."""

    IN = "in"
    OUT = "out"

    @classmethod
    def from_string(cls, value: str) -> "PortDirection":
        """Normalize common direction aliases into ``PortDirection``."""
        normalized = value.lower().strip()
        mapping = {
            "in": cls.IN,
            "input": cls.IN,
            "out": cls.OUT,
            "output": cls.OUT,
        }
        if normalized not in mapping:
            raise ValueError(f"Unknown port direction: {value!r}")
        return mapping[normalized]


class Port(FrozenModel):
    """
    Entity port produced by the signal planner.

    Ports are ordered by name so that declarations and port maps are
    emitted in a stable order.
    """

    name: str = Field(..., description="Physical port name (HDL)")
    direction: PortDirection = Field(..., description="Port direction")
    width: int = Field(default=1, description="Port width in bits")

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, v: Any) -> Any:
        """Validate and normalize port direction."""
        if isinstance(v, str):
            return PortDirection.from_string(v)
        return v

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        """Ensure port width is positive."""
        if v <= 0:
            raise ValueError("Port width must be positive")
        return v

    @property
    def is_input(self) -> bool:
        """Check if port is input."""
        return self.direction == PortDirection.IN

    @property
    def is_output(self) -> bool:
        """Check if port is output."""
        return self.direction == PortDirection.OUT
