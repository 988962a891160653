"""
Pydantic-based data models for RAM generation.

``RamConfig`` is the single source of truth for an instance; the
remaining models are the planner's immutable declaration records.
"""

from .base import FrozenModel, RamGenBaseModel, StrictModel
from .config import BYTE_WIDTH, LaneSlice, RamConfig, ReadPolicy, TriggerPolicy
from .declarations import ArrayType, Register, StorageArray, StorageRole, Wire
from .port import Port, PortDirection

__all__ = [
    # Base
    "RamGenBaseModel",
    "StrictModel",
    "FrozenModel",
    # Configuration
    "BYTE_WIDTH",
    "RamConfig",
    "TriggerPolicy",
    "ReadPolicy",
    "LaneSlice",
    # Declarations
    "ArrayType",
    "Register",
    "StorageArray",
    "StorageRole",
    "Wire",
    # Port
    "Port",
    "PortDirection",
]
