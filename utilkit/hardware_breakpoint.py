"""Debug-register bookkeeping for x86-64 hardware breakpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

_SLOTS = 4
_MASK64 = (1 << 64) - 1


class HardwareBreakpointError(RuntimeError):
    """Raised for a bad slot, a bad length or when no slot is free."""


class Condition(IntEnum):
    """What kind of access triggers the breakpoint."""

    EXECUTE = 0
    WRITE = 1
    READ_WRITE = 3


@dataclass
class DebugContext:
    """The four address registers DR0-DR3 and the control register DR7."""

    addresses: list[int] = field(default_factory=lambda: [0] * _SLOTS)
    dr7: int = 0

    def __post_init__(self) -> None:
        if len(self.addresses) != _SLOTS:
            raise ValueError(f"expected {_SLOTS} address registers")


def _set_bits(value: int, bit_index: int, bits: int, new_value: int) -> int:
    range_mask = (1 << bits) - 1
    cleared = value & ~(range_mask << bit_index) & _MASK64
    return (cleared | (new_value << bit_index)) & _MASK64


def _validate_index(index: int) -> None:
    if not 0 <= index < _SLOTS:
        raise HardwareBreakpointError("Invalid index")


def _translate_length(length: int) -> int:
    if length not in (1, 2, 4):
        raise HardwareBreakpointError("Invalid length")
    return length - 1


def _find_free_index(context: DebugContext) -> int:
    for index in range(_SLOTS):
        if not context.dr7 & (1 << (index << 1)):
            return index
    raise HardwareBreakpointError("No free index")


def activate(address: int, length: int, cond: Condition, context: DebugContext) -> int:
    """Arm a breakpoint in the first free slot and return that slot's index."""
    index = _find_free_index(context)
    encoded_length = _translate_length(length)

    context.addresses[index] = address & _MASK64
    dr7 = _set_bits(context.dr7, 16 + (index << 2), 2, int(Condition(cond)))
    dr7 = _set_bits(dr7, 18 + (index << 2), 2, encoded_length)
    context.dr7 = _set_bits(dr7, index << 1, 1, 1)
    return index


def deactivate(index: int, context: DebugContext) -> None:
    """Clear the local enable bit of slot ``index``."""
    _validate_index(index)
    context.dr7 = _set_bits(context.dr7, index << 1, 1, 0)


def deactivate_all(context: DebugContext) -> None:
    """Disable every breakpoint."""
    context.dr7 = 0