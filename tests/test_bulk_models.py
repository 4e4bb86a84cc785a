import pytest
from hypothesis import given
from hypothesis import strategies as st

from hantekproto.bulk_codes import BulkCode
from hantekproto.bulk_models import (
    BulkSetBuffer2250,
    BulkSetBuffer5200,
    BulkSetChannels2250,
    BulkSetRecordLength2250,
    BulkSetSamplerate2250,
    BulkSetSamplerate5200,
    BulkSetTrigger2250,
    BulkSetTrigger5200,
)
from hantekproto.definitions import DTriggerPositionUsed

u8 = st.integers(0, 0xFF)
u16 = st.integers(0, 0xFFFF)
u24 = st.integers(0, 0xFFFFFF)


@pytest.mark.parametrize(
    ("command", "code", "size"),
    [
        (BulkSetChannels2250(), BulkCode.BSETCHANNELS, 4),
        (BulkSetTrigger2250(), BulkCode.CSETTRIGGERORSAMPLERATE, 8),
        (BulkSetSamplerate5200(), BulkCode.CSETTRIGGERORSAMPLERATE, 6),
        (BulkSetRecordLength2250(), BulkCode.DSETBUFFER, 4),
        (BulkSetBuffer5200(), BulkCode.DSETBUFFER, 10),
        (BulkSetSamplerate2250(), BulkCode.ESETTRIGGERORSAMPLERATE, 8),
        (BulkSetTrigger5200(), BulkCode.ESETTRIGGERORSAMPLERATE, 8),
        (BulkSetBuffer2250(), BulkCode.FSETBUFFER, 10),
    ],
)
def test_code_and_size(command, code, size):
    assert command.code == code
    assert command[0] == code
    assert len(command) == size


@given(u8)
def test_channels_2250_round_trip(value):
    cmd = BulkSetChannels2250(value)
    assert cmd.used_channels() == value
    assert cmd[2] == value


@given(st.integers(0, 3), st.integers(0, 1))
def test_trigger_2250_round_trip(source, slope):
    cmd = BulkSetTrigger2250(source, slope)
    assert cmd.trigger_source() == source
    assert cmd.trigger_slope() == slope


def test_trigger_2250_rejects_wide_slope():
    with pytest.raises(ValueError):
        BulkSetTrigger2250(0, 2)


@given(u16, u8)
def test_samplerate_5200_round_trip(slow, fast):
    cmd = BulkSetSamplerate5200(slow, fast)
    assert cmd.samplerate_slow() == slow
    assert cmd.samplerate_fast() == fast
    assert cmd[2] == slow & 0xFF
    assert cmd[3] == slow >> 8


def test_samplerate_5200_rejects_large_slow():
    with pytest.raises(ValueError):
        BulkSetSamplerate5200(0x10000, 0)


@given(u8)
def test_record_length_2250_round_trip(value):
    assert BulkSetRecordLength2250(value).record_length() == value


def test_buffer_5200_fixed_bytes():
    cmd = BulkSetBuffer5200()
    assert cmd[5] == 0xFF
    assert cmd[9] == 0xFF
    assert cmd.used_post() is DTriggerPositionUsed.OFF


@given(
    u16,
    u16,
    st.sampled_from(list(DTriggerPositionUsed)),
    st.sampled_from(list(DTriggerPositionUsed)),
    st.integers(0, 7),
)
def test_buffer_5200_round_trip(pre, post, used_pre, used_post, record_length):
    cmd = BulkSetBuffer5200(pre, post, used_pre, used_post, record_length)
    assert cmd.trigger_position_pre() == pre
    assert cmd.trigger_position_post() == post
    assert cmd.used_pre() == used_pre
    assert cmd.used_post() == used_post
    assert cmd.record_length() == record_length
    assert cmd[5] == 0xFF
    assert cmd[9] == 0xFF


def test_buffer_5200_on_state_bytes():
    cmd = BulkSetBuffer5200(0, 0, DTriggerPositionUsed.ON, DTriggerPositionUsed.ON)
    assert cmd[4] == DTriggerPositionUsed.ON
    assert cmd[8] & 0x07 == DTriggerPositionUsed.ON


def test_buffer_5200_rejects_wide_record_length():
    with pytest.raises(ValueError):
        BulkSetBuffer5200(0, 0, record_length=8)


@given(st.booleans(), st.booleans(), u16)
def test_samplerate_2250_round_trip(fast, down, rate):
    cmd = BulkSetSamplerate2250(fast, down, rate)
    assert cmd.fast_rate() is fast
    assert cmd.downsampling() is down
    assert cmd.samplerate() == rate


def test_trigger_5200_default_is_all_zero_fields():
    cmd = BulkSetTrigger5200()
    assert cmd[2] == 0
    assert cmd[4] == 0x02
    assert cmd.fast_rate() is True


def test_trigger_5200_fast_rate_inverted():
    slow = BulkSetTrigger5200(0, 0)
    assert slow.fast_rate() is False
    assert slow[2] & 0x01 == 1
    fast = BulkSetTrigger5200(0, 0, fast_rate=True)
    assert fast.fast_rate() is True
    assert fast[2] & 0x01 == 0


@given(st.integers(0, 3), st.integers(0, 3), st.booleans(), st.integers(0, 3), st.booleans())
def test_trigger_5200_round_trip(source, used, fast, slope, pulse):
    cmd = BulkSetTrigger5200(source, used, fast, slope, pulse)
    assert cmd.trigger_source() == source
    assert cmd.used_channels() == used
    assert cmd.fast_rate() is fast
    assert cmd.trigger_slope() == slope
    assert cmd.trigger_pulse() is pulse
    assert cmd[4] == 0x02


def test_trigger_5200_rejects_wide_source():
    with pytest.raises(ValueError):
        BulkSetTrigger5200(4, 0)


@given(u24, u24)
def test_buffer_2250_round_trip(pre, post):
    cmd = BulkSetBuffer2250(pre, post)
    assert len(cmd) == 12
    assert cmd.trigger_position_pre() == pre
    assert cmd.trigger_position_post() == post
    assert cmd[6] == pre & 0xFF
    assert cmd[2] == post & 0xFF


def test_buffer_2250_rejects_large_position():
    with pytest.raises(ValueError):
        BulkSetBuffer2250(0x1000000, 0)


def test_setters_update_existing_command():
    cmd = BulkSetBuffer2250(1, 2)
    cmd.set_trigger_position_pre(0x7FFFF)
    assert cmd.trigger_position_pre() == 0x7FFFF
    assert cmd.trigger_position_post() == 2