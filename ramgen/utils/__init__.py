"""Shared utility helpers for ramgen."""

INDENT = "   "
ZERO_BIT = "'0'"
ONE_BIT = "'1'"


def filter_none(data: dict) -> dict:
    """Remove keys with None values from a dictionary.

    Required for Pydantic v2 compatibility: passing None explicitly
    to fields with defaults causes validation errors. Filtering None
    values lets Pydantic use its own defaults.
    """
    return {k: v for k, v in data.items() if v is not None}


def vhdl_range(msb: int, lsb: int = 0) -> str:
    """VHDL descending range (``'7 DOWNTO 0'``)."""
    return f"{msb} DOWNTO {lsb}"


def vhdl_type(width: int, force_vector: bool = False) -> str:
    """VHDL type for a signal of ``width`` bits.

    Examples:
        >>> vhdl_type(1)
        'std_logic'
        >>> vhdl_type(8)
        'std_logic_vector(7 DOWNTO 0)'
    """
    if width == 1 and not force_vector:
        return "std_logic"
    return f"std_logic_vector({vhdl_range(width - 1)})"


def vhdl_constant(width: int, bit: int) -> str:
    """Constant driving every bit of a ``width``-bit signal to ``bit``."""
    literal = ONE_BIT if bit else ZERO_BIT
    if width == 1:
        return literal
    return f"(OTHERS => {literal})"


def indent(level: int, text: str) -> str:
    """Prefix ``text`` with ``level`` indentation steps; empty text stays empty."""
    return f"{INDENT * level}{text}" if text else ""
