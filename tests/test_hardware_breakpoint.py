import pytest

from utilkit.hardware_breakpoint import (
    Condition,
    DebugContext,
    HardwareBreakpointError,
    activate,
    deactivate,
    deactivate_all,
)


@pytest.mark.parametrize(
    "cond, expected",
    [(Condition.EXECUTE, 0), (Condition.WRITE, 1), (Condition.READ_WRITE, 3)],
)
def test_condition_values_match_dr7_encoding(cond, expected):
    ctx = DebugContext()
    activate(0x40, 1, cond, ctx)
    assert (ctx.dr7 >> 16) & 3 == expected


def test_activate_uses_first_slot_and_encodes_fields():
    ctx = DebugContext()
    index = activate(0x1234, 4, Condition.WRITE, ctx)
    assert index == 0
    assert ctx.addresses[0] == 0x1234
    assert ctx.dr7 & 1 == 1
    assert (ctx.dr7 >> 16) & 3 == Condition.WRITE
    assert (ctx.dr7 >> 18) & 3 == 4 - 1


def test_slots_fill_in_order():
    ctx = DebugContext()
    indices = [activate(0x1000 + n, 1, Condition.EXECUTE, ctx) for n in range(4)]
    assert indices == [0, 1, 2, 3]
    assert ctx.addresses == [0x1000, 0x1001, 0x1002, 0x1003]
    for index in indices:
        assert ctx.dr7 & (1 << (index << 1))


def test_second_slot_fields_are_shifted():
    ctx = DebugContext()
    activate(0x10, 1, Condition.EXECUTE, ctx)
    index = activate(0x20, 2, Condition.READ_WRITE, ctx)
    assert index == 1
    assert (ctx.dr7 >> (16 + 4)) & 3 == Condition.READ_WRITE
    assert (ctx.dr7 >> (18 + 4)) & 3 == 2 - 1


def test_no_free_slot_raises():
    ctx = DebugContext()
    for n in range(4):
        activate(n, 1, Condition.EXECUTE, ctx)
    with pytest.raises(HardwareBreakpointError):
        activate(0x99, 1, Condition.EXECUTE, ctx)


@pytest.mark.parametrize("length", [0, 3, 8])
def test_invalid_length_raises(length):
    with pytest.raises(HardwareBreakpointError):
        activate(0x10, length, Condition.WRITE, DebugContext())


def test_deactivate_frees_slot_for_reuse():
    ctx = DebugContext()
    for n in range(4):
        activate(n, 1, Condition.EXECUTE, ctx)
    deactivate(2, ctx)
    assert not ctx.dr7 & (1 << 4)
    assert activate(0x77, 1, Condition.WRITE, ctx) == 2
    assert ctx.addresses[2] == 0x77


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_deactivate_invalid_index_raises(index):
    with pytest.raises(HardwareBreakpointError):
        deactivate(index, DebugContext())


def test_deactivate_all_clears_control_register():
    ctx = DebugContext()
    activate(0x10, 2, Condition.READ_WRITE, ctx)
    activate(0x20, 4, Condition.WRITE, ctx)
    deactivate_all(ctx)
    assert ctx.dr7 == 0
    assert activate(0x30, 1, Condition.EXECUTE, ctx) == 0


def test_context_requires_four_addresses():
    with pytest.raises(ValueError):
        DebugContext(addresses=[0, 0])