"""Builders for the bulk commands specific to the DSO-2250 and DSO-5200 models."""

from __future__ import annotations

from .bulk_codes import BulkCode
from .bulk_common import _read_le, _write_field, _write_le
from .command import BitField, BulkCommand
from .definitions import DTriggerPositionUsed

# CTriggerBits (byte 2 of the DSO-2250 CSETTRIGGERORSAMPLERATE)
_CTRIGGER_SOURCE = BitField(0, 2)
_CTRIGGER_SLOPE = BitField(2, 1)

# DBufferBits (byte 8 of the DSO-5200 DSETBUFFER)
_DBUFFER_TRIGGER_POSITION_USED = BitField(0, 3)
_DBUFFER_RECORD_LENGTH = BitField(3, 3)

# ESamplerateBits (byte 2 of the DSO-2250 ESETTRIGGERORSAMPLERATE)
_ESAMPLERATE_FAST_RATE = BitField(0, 1)
_ESAMPLERATE_DOWNSAMPLING = BitField(1, 1)

# ETsrBits (byte 2 of the DSO-5200 ESETTRIGGERORSAMPLERATE)
_ETSR_FAST_RATE = BitField(0, 1)
_ETSR_USED_CHANNELS = BitField(1, 2)
_ETSR_TRIGGER_SOURCE = BitField(3, 2)
_ETSR_TRIGGER_SLOPE = BitField(5, 2)
_ETSR_TRIGGER_PULSE = BitField(7, 1)


class BulkSetChannels2250(BulkCommand):
    """The DSO-2250 BSETCHANNELS builder."""

    def __init__(self, used_channels: int = 0) -> None:
        super().__init__(BulkCode.BSETCHANNELS, 4)
        self[0] = BulkCode.BSETCHANNELS
        self.set_used_channels(used_channels)

    def used_channels(self) -> int:
        """The enabled channels, see :class:`~hantekproto.definitions.UsedChannels`."""
        return self[2]

    def set_used_channels(self, value: int) -> None:
        """Set the enabled channels."""
        _write_le(self, (2,), "used_channels", value)


class BulkSetTrigger2250(BulkCommand):
    """The DSO-2250 CSETTRIGGERORSAMPLERATE builder."""

    def __init__(self, trigger_source: int = 0, trigger_slope: int = 0) -> None:
        super().__init__(BulkCode.CSETTRIGGERORSAMPLERATE, 8)
        self[0] = BulkCode.CSETTRIGGERORSAMPLERATE
        self.set_trigger_source(trigger_source)
        self.set_trigger_slope(trigger_slope)

    def trigger_source(self) -> int:
        """The trigger source id."""
        return _CTRIGGER_SOURCE.get(self[2])

    def set_trigger_source(self, value: int) -> None:
        """Set the trigger source id."""
        _write_field(self, 2, _CTRIGGER_SOURCE, "trigger_source", value)

    def trigger_slope(self) -> int:
        """The trigger slope."""
        return _CTRIGGER_SLOPE.get(self[2])

    def set_trigger_slope(self, slope: int) -> None:
        """Set the trigger slope."""
        _write_field(self, 2, _CTRIGGER_SLOPE, "trigger_slope", slope)


class BulkSetSamplerate5200(BulkCommand):
    """The DSO-5200/DSO-5200A CSETTRIGGERORSAMPLERATE builder."""

    _SLOW = (2, 3)

    def __init__(self, samplerate_slow: int = 0, samplerate_fast: int = 0) -> None:
        super().__init__(BulkCode.CSETTRIGGERORSAMPLERATE, 6)
        self[0] = BulkCode.CSETTRIGGERORSAMPLERATE
        self.set_samplerate_fast(samplerate_fast)
        self.set_samplerate_slow(samplerate_slow)

    def samplerate_fast(self) -> int:
        """The SamplerateFast byte."""
        return self[4]

    def set_samplerate_fast(self, value: int) -> None:
        """Set the SamplerateFast byte."""
        _write_le(self, (4,), "samplerate_fast", value)

    def samplerate_slow(self) -> int:
        """The 16-bit SamplerateSlow value."""
        return _read_le(self, self._SLOW)

    def set_samplerate_slow(self, samplerate: int) -> None:
        """Set the 16-bit SamplerateSlow value."""
        _write_le(self, self._SLOW, "samplerate_slow", samplerate)


class BulkSetRecordLength2250(BulkCommand):
    """The DSO-2250 DSETBUFFER builder."""

    def __init__(self, record_length: int = 0) -> None:
        super().__init__(BulkCode.DSETBUFFER, 4)
        self[0] = BulkCode.DSETBUFFER
        self.set_record_length(record_length)

    def record_length(self) -> int:
        """The record length id."""
        return self[2]

    def set_record_length(self, value: int) -> None:
        """Set the record length id."""
        _write_le(self, (2,), "record_length", value)


class BulkSetBuffer5200(BulkCommand):
    """The DSO-5200/DSO-5200A DSETBUFFER builder."""

    _PRE = (2, 3)
    _POST = (6, 7)

    def __init__(
        self,
        trigger_position_pre: int = 0,
        trigger_position_post: int = 0,
        used_pre: DTriggerPositionUsed = DTriggerPositionUsed.OFF,
        used_post: DTriggerPositionUsed = DTriggerPositionUsed.OFF,
        record_length: int = 0,
    ) -> None:
        super().__init__(BulkCode.DSETBUFFER, 10)
        self[0] = BulkCode.DSETBUFFER
        self[5] = 0xFF
        self[9] = 0xFF
        self.set_trigger_position_pre(trigger_position_pre)
        self.set_trigger_position_post(trigger_position_post)
        self.set_used_pre(used_pre)
        self.set_used_post(used_post)
        self.set_record_length(record_length)

    def trigger_position_pre(self) -> int:
        """The 16-bit TriggerPositionPre value."""
        return _read_le(self, self._PRE)

    def set_trigger_position_pre(self, position: int) -> None:
        """Set the 16-bit TriggerPositionPre value."""
        _write_le(self, self._PRE, "trigger_position_pre", position)

    def trigger_position_post(self) -> int:
        """The 16-bit TriggerPositionPost value."""
        return _read_le(self, self._POST)

    def set_trigger_position_post(self, position: int) -> None:
        """Set the 16-bit TriggerPositionPost value."""
        _write_le(self, self._POST, "trigger_position_post", position)

    def used_pre(self) -> int:
        """The trigger position state byte for the pre position."""
        return self[4]

    def set_used_pre(self, value: DTriggerPositionUsed) -> None:
        """Set the trigger position state for the pre position."""
        self[4] = DTriggerPositionUsed(value)

    def used_post(self) -> DTriggerPositionUsed:
        """The trigger position state for the post position."""
        return DTriggerPositionUsed(_DBUFFER_TRIGGER_POSITION_USED.get(self[8]))

    def set_used_post(self, value: DTriggerPositionUsed) -> None:
        """Set the trigger position state for the post position."""
        _write_field(self, 8, _DBUFFER_TRIGGER_POSITION_USED, "used_post", DTriggerPositionUsed(value))

    def record_length(self) -> int:
        """The record length id."""
        return _DBUFFER_RECORD_LENGTH.get(self[8])

    def set_record_length(self, value: int) -> None:
        """Set the record length id."""
        _write_field(self, 8, _DBUFFER_RECORD_LENGTH, "record_length", value)


class BulkSetSamplerate2250(BulkCommand):
    """The DSO-2250 ESETTRIGGERORSAMPLERATE builder."""

    _SAMPLERATE = (4, 5)

    def __init__(self, fast_rate: bool = False, downsampling: bool = False, samplerate: int = 0) -> None:
        super().__init__(BulkCode.ESETTRIGGERORSAMPLERATE, 8)
        self[0] = BulkCode.ESETTRIGGERORSAMPLERATE
        self.set_fast_rate(fast_rate)
        self.set_downsampling(downsampling)
        self.set_samplerate(samplerate)

    def fast_rate(self) -> bool:
        """The fast rate state."""
        return _ESAMPLERATE_FAST_RATE.get(self[2]) == 1

    def set_fast_rate(self, fast_rate: bool) -> None:
        """Set the fast rate state."""
        _write_field(self, 2, _ESAMPLERATE_FAST_RATE, "fast_rate", bool(fast_rate))

    def downsampling(self) -> bool:
        """True if the downsampler is activated."""
        return _ESAMPLERATE_DOWNSAMPLING.get(self[2]) == 1

    def set_downsampling(self, downsampling: bool) -> None:
        """Enable or disable the downsampler."""
        _write_field(self, 2, _ESAMPLERATE_DOWNSAMPLING, "downsampling", bool(downsampling))

    def samplerate(self) -> int:
        """The 16-bit samplerate value."""
        return _read_le(self, self._SAMPLERATE)

    def set_samplerate(self, samplerate: int) -> None:
        """Set the 16-bit samplerate value."""
        _write_le(self, self._SAMPLERATE, "samplerate", samplerate)


class BulkSetTrigger5200(BulkCommand):
    """The DSO-5200/DSO-5200A ESETTRIGGERORSAMPLERATE builder.

    The fast rate bit is stored inverted. Created without a trigger source or
    used channels, every field is zero, which reads as fast rate on; otherwise
    ``fast_rate`` defaults to false.
    """

    def __init__(
        self,
        trigger_source: int | None = None,
        used_channels: int | None = None,
        fast_rate: bool | None = None,
        trigger_slope: int = 0,
        trigger_pulse: bool = False,
    ) -> None:
        super().__init__(BulkCode.ESETTRIGGERORSAMPLERATE, 8)
        self[0] = BulkCode.ESETTRIGGERORSAMPLERATE
        self[4] = 0x02
        if fast_rate is None:
            fast_rate = trigger_source is None and used_channels is None
        self.set_trigger_source(0 if trigger_source is None else trigger_source)
        self.set_used_channels(0 if used_channels is None else used_channels)
        self.set_fast_rate(fast_rate)
        self.set_trigger_slope(trigger_slope)
        self.set_trigger_pulse(trigger_pulse)

    def trigger_source(self) -> int:
        """The trigger source id."""
        return _ETSR_TRIGGER_SOURCE.get(self[2])

    def set_trigger_source(self, value: int) -> None:
        """Set the trigger source id."""
        _write_field(self, 2, _ETSR_TRIGGER_SOURCE, "trigger_source", value)

    def used_channels(self) -> int:
        """The enabled channels, see :class:`~hantekproto.definitions.UsedChannels`."""
        return _ETSR_USED_CHANNELS.get(self[2])

    def set_used_channels(self, value: int) -> None:
        """Set the enabled channels."""
        _write_field(self, 2, _ETSR_USED_CHANNELS, "used_channels", value)

    def fast_rate(self) -> bool:
        """The fast rate state (the stored bit inverted)."""
        return _ETSR_FAST_RATE.get(self[2]) == 0

    def set_fast_rate(self, fast_rate: bool) -> None:
        """Set the fast rate state; the bit is stored inverted."""
        _write_field(self, 2, _ETSR_FAST_RATE, "fast_rate", not fast_rate)

    def trigger_slope(self) -> int:
        """The 2-bit trigger slope."""
        return _ETSR_TRIGGER_SLOPE.get(self[2])

    def set_trigger_slope(self, slope: int) -> None:
        """Set the 2-bit trigger slope."""
        _write_field(self, 2, _ETSR_TRIGGER_SLOPE, "trigger_slope", slope)

    def trigger_pulse(self) -> bool:
        """True if pulses cause trigger events."""
        return _ETSR_TRIGGER_PULSE.get(self[2]) == 1

    def set_trigger_pulse(self, pulse: bool) -> None:
        """Enable or disable pulse triggering."""
        _write_field(self, 2, _ETSR_TRIGGER_PULSE, "trigger_pulse", bool(pulse))


class BulkSetBuffer2250(BulkCommand):
    """The DSO-2250 FSETBUFFER builder.

    Created without trigger positions the buffer is 10 bytes long, otherwise 12.
    """

    _POST = (2, 3, 4)
    _PRE = (6, 7, 8)

    def __init__(self, trigger_position_pre: int | None = None, trigger_position_post: int | None = None) -> None:
        empty = trigger_position_pre is None and trigger_position_post is None
        super().__init__(BulkCode.FSETBUFFER, 10 if empty else 12)
        self[0] = BulkCode.FSETBUFFER
        self.set_trigger_position_pre(0 if trigger_position_pre is None else trigger_position_pre)
        self.set_trigger_position_post(0 if trigger_position_post is None else trigger_position_post)

    def trigger_position_post(self) -> int:
        """The 24-bit TriggerPositionPost value."""
        return _read_le(self, self._POST)

    def set_trigger_position_post(self, position: int) -> None:
        """Set the 24-bit TriggerPositionPost value."""
        _write_le(self, self._POST, "trigger_position_post", position)

    def trigger_position_pre(self) -> int:
        """The 24-bit TriggerPositionPre value."""
        return _read_le(self, self._PRE)

    def set_trigger_position_pre(self, position: int) -> None:
        """Set the 24-bit TriggerPositionPre value."""
        _write_le(self, self._PRE, "trigger_position_pre", position)