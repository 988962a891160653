"""Feasibility gate deciding whether a RAM instance can be generated."""

from typing import List

from ramgen.errors import UnsupportedConfigurationError
from ramgen.model.config import RamConfig, ReadPolicy


def unsupported_reasons(cfg: RamConfig) -> List[str]:
    """List why ``cfg`` cannot be synthesized, in a fixed order.

    Returns:
        Human-readable reasons; empty when the configuration is supported
    """
    reasons = []
    if not cfg.bus_separate:
        reasons.append("combined (bidirectional) data bus is not supported")
    if cfg.asynchronous:
        reasons.append(f"level-triggered ({cfg.trigger.value}) timing is not supported")
    if cfg.level_enable_ports:
        reasons.append(
            f"{cfg.level_enable_ports} level-enable port(s) present; "
            "byte enables must be the only enable mechanism"
        )
    if cfg.async_read:
        reasons.append("asynchronous read port is not supported")
    if cfg.clear_pin:
        reasons.append("memory-clear pin is not supported")
    if cfg.read_policy != ReadPolicy.READ_AFTER_WRITE:
        reasons.append(f"read policy '{cfg.read_policy.value}' is not supported")
    return reasons


def is_supported(cfg: RamConfig) -> bool:
    """Check whether VHDL can be generated for ``cfg``."""
    return not unsupported_reasons(cfg)


def require_supported(cfg: RamConfig) -> None:
    """Raise ``UnsupportedConfigurationError`` unless ``cfg`` is supported."""
    reasons = unsupported_reasons(cfg)
    if reasons:
        raise UnsupportedConfigurationError(
            f"RAM '{cfg.name}' cannot be synthesized", reasons
        )
