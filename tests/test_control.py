import pytest
from hypothesis import given
from hypothesis import strategies as st

from hantekproto.control import (
    BulkIndex,
    ControlAcquireHardData,
    ControlBeginCommand,
    ControlGetLimits,
    ControlGetSpeed,
    ControlSetOffset,
    ControlSetRelays,
    ControlSetTimeDiv,
    ControlSetVoltDivCh1,
    ControlSetVoltDivCh2,
)
from hantekproto.control_codes import ControlCode, ControlValue
from hantekproto.definitions import OffsetsPerGainStep


def test_begin_command_default_bytes():
    command = ControlBeginCommand()
    assert command.code is ControlCode.CONTROL_BEGINCOMMAND
    assert bytes(command) == bytes([0x0F, 0x03]) + bytes(8)


@pytest.mark.parametrize("index", list(BulkIndex))
def test_begin_command_index(index):
    command = ControlBeginCommand(index)
    assert command[0] == 0x0F
    assert command[1] == index


def test_get_speed_reads_first_byte():
    command = ControlGetSpeed()
    assert len(command) == 10
    command[0] = 2
    assert command.speed() == 2


def test_set_offset_wire_layout():
    command = ControlSetOffset(0x0123, 0x0456, 0x0789)
    assert len(command) == 17
    assert bytes(command[:6]) == bytes([0x01, 0x23, 0x04, 0x56, 0x07, 0x89])
    assert bytes(command[6:]) == bytes(11)


@given(
    st.integers(min_value=0, max_value=0x0FFF),
    st.integers(min_value=0, max_value=0x0FFF),
    st.integers(min_value=0, max_value=0x0FFF),
)
def test_set_offset_round_trip(ch1, ch2, trigger):
    command = ControlSetOffset(ch1, ch2, trigger)
    assert command.channel(0) == ch1
    assert command.channel(1) == ch2
    assert command.trigger() == trigger


def test_set_offset_getter_masks_high_nibble():
    command = ControlSetOffset()
    command.set_channel(1, 0xF123)
    assert command.channel(1) == 0x0123
    assert command[2] == 0xF1


def test_set_offset_rejects_overflow():
    with pytest.raises(ValueError):
        ControlSetOffset(0x10000, 0, 0)


def test_relays_default_bytes():
    command = ControlSetRelays()
    assert command.code is ControlCode.CONTROL_SETRELAYS
    assert bytes(command[:8]) == bytes([0x00, 0x04, 0x08, 0x02, 0x20, 0x40, 0x10, 0x01])


def test_relays_all_active_bytes():
    command = ControlSetRelays(True, True, True, True, True, True, True)
    assert bytes(command[:8]) == bytes([0x00, 0xFB, 0xF7, 0xFD, 0xDF, 0xBF, 0xEF, 0xFE])


@given(st.lists(st.booleans(), min_size=7, max_size=7))
def test_relays_round_trip(flags):
    command = ControlSetRelays(*flags)
    assert command.below_1v(0) == flags[0]
    assert command.below_100mv(0) == flags[1]
    assert command.coupling_dc(0) == flags[2]
    assert command.below_1v(1) == flags[3]
    assert command.below_100mv(1) == flags[4]
    assert command.coupling_dc(1) == flags[5]
    assert command.trigger_ext() == flags[6]


def test_relays_setters_toggle():
    command = ControlSetRelays()
    command.set_coupling_dc(1, True)
    command.set_below_1v(0, True)
    command.set_below_100mv(1, True)
    command.set_trigger_ext(True)
    assert command.coupling_dc(1) and not command.coupling_dc(0)
    assert command.below_1v(0) and not command.below_1v(1)
    assert command.below_100mv(1) and not command.below_100mv(0)
    assert command.trigger_ext()


def test_volt_div_defaults():
    assert bytes(ControlSetVoltDivCh1()) == bytes([5])
    assert bytes(ControlSetVoltDivCh2()) == bytes([5])
    assert ControlSetVoltDivCh1().code is ControlCode.CONTROL_SETVOLTDIV_CH1
    assert ControlSetVoltDivCh2().code is ControlCode.CONTROL_SETVOLTDIV_CH2


def test_time_div_default_and_set():
    command = ControlSetTimeDiv()
    assert command.code is ControlCode.CONTROL_SETTIMEDIV
    assert bytes(command) == bytes([1])
    command.set_div(10)
    assert bytes(command) == bytes([10])


def test_div_rejects_out_of_range():
    with pytest.raises(ValueError):
        ControlSetVoltDivCh1(256)
    with pytest.raises(ValueError):
        ControlSetTimeDiv().set_div(-1)


def test_acquire_hard_data():
    command = ControlAcquireHardData()
    assert command.code is ControlCode.CONTROL_ACQUIIRE_HARD_DATA
    assert bytes(command) == bytes([0x01])


@pytest.mark.parametrize("channels", [1, 2, 4])
def test_get_limits(channels):
    command = ControlGetLimits(channels)
    assert command.code is ControlCode.CONTROL_VALUE
    assert command.value == ControlValue.VALUE_OFFSETLIMITS
    assert len(command) == OffsetsPerGainStep.SIZE * channels
    assert command[0] == 0x01
    assert not any(command[1:])


def test_get_limits_rejects_zero_channels():
    with pytest.raises(ValueError):
        ControlGetLimits(0)