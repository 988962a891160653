"""
Pipeline timing constants and index mappings.

The generated memory delays the external ``Tick`` strobe through a
three-bit shift register. Bit 0 qualifies the write pulse and bit 2
qualifies the read-enable pulse, so a write always commits before the
output stage of the same access samples the storage read.
"""

from typing import NamedTuple

TICK_DELAY_DEPTH = 3


class AccessTaps(NamedTuple):
    """Delay-line bits qualifying the storage write and the output latch."""

    write: int
    read: int


def access_enable_taps() -> AccessTaps:
    """Return the tick delay-line taps for the write and read-enable pulses."""
    return AccessTaps(write=0, read=TICK_DELAY_DEPTH - 1)


def byte_enable_terminal(offset: int, lane_count: int, lane: int) -> int:
    """Map a lane to its byte-enable terminal index.

    The enable bus is numbered most-significant-first on the component
    while lanes are numbered least-significant-first.

    Args:
        offset: Terminal index of the first byte-enable pin
        lane_count: Number of lanes
        lane: Lane index

    Returns:
        Terminal index carrying the enable of ``lane``

    Raises:
        ValueError: If the lane index is out of range
    """
    if not 0 <= lane < lane_count:
        raise ValueError(f"Lane {lane} out of range [0, {lane_count})")
    return offset + lane_count - lane - 1
