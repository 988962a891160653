"""
Base models for RAM generation metadata.

Provides shared base models with centralized configuration for all
schema classes, so ``model_config`` is declared once.

Architecture Decision:
    Two policies exist on purpose:
    StrictModel (extra="forbid") is for user-facing description objects
    (RamConfig, StaticNetlist) where extra fields indicate user typos.
    FrozenModel (frozen=True) is for derived, planner-produced records
    (Port, Register, StorageArray, ...) which must never change once
    handed to the emitter and binder.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class RamGenBaseModel(BaseModel):
    """Base model with shared configuration for all ramgen schema models.

    Provides camelCase aliasing and allows field population by either
    alias or Python name.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class StrictModel(RamGenBaseModel):
    """Immutable model that forbids unknown fields.

    Use for description objects read from user files.
    """

    model_config = {
        **RamGenBaseModel.model_config,
        "extra": "forbid",
        "frozen": True,
    }


class FrozenModel(RamGenBaseModel):
    """Immutable, hashable model for planner and emitter records."""

    model_config = {
        **RamGenBaseModel.model_config,
        "frozen": True,
    }


def normalize_enum_key(value: str) -> str:
    """Collapse an enum alias to a comparison key (``"Rising_Edge"`` -> ``"risingedge"``)."""
    return value.strip().lower().replace("_", "").replace("-", "").replace(" ", "")


def lookup_enum(enum_cls: type, value: Any, aliases: Dict[str, Enum]) -> Any:
    """Resolve ``value`` against ``enum_cls`` members and an alias table.

    Unknown values are returned untouched so pydantic reports them.
    """
    if isinstance(value, enum_cls) or not isinstance(value, str):
        return value
    key = normalize_enum_key(value)
    for member in enum_cls:
        if normalize_enum_key(member.value) == key:
            return member
    return aliases.get(key, value)
