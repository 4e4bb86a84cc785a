"""Builders and parsers for the bulk commands shared by most models."""

from __future__ import annotations

from .bulk_codes import BulkCode
from .command import BitField, BulkCommand
from .definitions import ChannelID

# FilterBits (byte 2 of SETFILTER)
_FILTER_CH1 = BitField(0, 1)
_FILTER_CH2 = BitField(1, 1)
_FILTER_TRIGGER = BitField(2, 1)

# GainBits (byte 2 of SETGAIN)
_GAIN_CH1 = BitField(0, 2)
_GAIN_CH2 = BitField(2, 2)

# Tsr1Bits (byte 2 of SETTRIGGERANDSAMPLERATE)
_TSR1_TRIGGER_SOURCE = BitField(0, 2)
_TSR1_RECORD_LENGTH = BitField(2, 3)
_TSR1_SAMPLERATE_ID = BitField(5, 2)
_TSR1_DOWNSAMPLING_MODE = BitField(7, 1)

# Tsr2Bits (byte 3 of SETTRIGGERANDSAMPLERATE)
_TSR2_USED_CHANNELS = BitField(0, 2)
_TSR2_FAST_RATE = BitField(2, 1)
_TSR2_TRIGGER_SLOPE = BitField(3, 1)


def _write_field(command: bytearray, pos: int, bits: BitField, name: str, value: int) -> None:
    value = int(value)
    if not 0 <= value <= bits.mask:
        raise ValueError(f"{name} must fit in {bits.width} bits, got {value}")
    command[pos] = bits.set(command[pos], value)


def _write_le(command: bytearray, positions: tuple[int, ...], name: str, value: int) -> None:
    value = int(value)
    bits = 8 * len(positions)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in {bits} bits, got {value}")
    for shift, pos in enumerate(positions):
        command[pos] = (value >> (8 * shift)) & 0xFF


def _read_le(command: bytearray, positions: tuple[int, ...]) -> int:
    return sum(command[pos] << (8 * shift) for shift, pos in enumerate(positions))


class BulkSetFilter(BulkCommand):
    """The SETFILTER builder."""

    def __init__(self, channel1: bool = False, channel2: bool = False, trigger: bool = False) -> None:
        super().__init__(BulkCode.SETFILTER, 8)
        self[0] = BulkCode.SETFILTER
        self[1] = 0x0F
        self.set_channel_filtered(0, channel1)
        self.set_channel_filtered(1, channel2)
        self.set_trigger(trigger)

    @staticmethod
    def _field(channel: ChannelID) -> BitField:
        return _FILTER_CH1 if channel == 0 else _FILTER_CH2

    def channel_filtered(self, channel: ChannelID) -> bool:
        """True if ``channel`` is filtered."""
        return self._field(channel).get(self[2]) == 1

    def set_channel_filtered(self, channel: ChannelID, filtered: bool) -> None:
        """Enable or disable filtering of ``channel``."""
        _write_field(self, 2, self._field(channel), "filtered", bool(filtered))

    def trigger(self) -> bool:
        """True if the trigger is filtered."""
        return _FILTER_TRIGGER.get(self[2]) == 1

    def set_trigger(self, filtered: bool) -> None:
        """Enable or disable filtering of the trigger."""
        _write_field(self, 2, _FILTER_TRIGGER, "filtered", bool(filtered))


class BulkSetTriggerAndSamplerate(BulkCommand):
    """The SETTRIGGERANDSAMPLERATE builder (DSO-2090, DSO-2150).

    Created without a downsampler or trigger position, every field is zero;
    otherwise ``downsampling_mode`` defaults to true.
    """

    _DOWNSAMPLER = (4, 5)
    _TRIGGER_POSITION = (6, 7, 10)

    def __init__(
        self,
        downsampler: int | None = None,
        trigger_position: int | None = None,
        trigger_source: int = 0,
        record_length: int = 0,
        samplerate_id: int = 0,
        downsampling_mode: bool | None = None,
        used_channels: int = 0,
        fast_rate: bool = False,
        trigger_slope: int = 0,
    ) -> None:
        super().__init__(BulkCode.SETTRIGGERANDSAMPLERATE, 12)
        self[0] = BulkCode.SETTRIGGERANDSAMPLERATE
        if downsampling_mode is None:
            downsampling_mode = downsampler is not None or trigger_position is not None
        self.set_trigger_source(trigger_source)
        self.set_record_length(record_length)
        self.set_samplerate_id(samplerate_id)
        self.set_downsampling_mode(downsampling_mode)
        self.set_used_channels(used_channels)
        self.set_fast_rate(fast_rate)
        self.set_trigger_slope(trigger_slope)
        self.set_downsampler(0 if downsampler is None else downsampler)
        self.set_trigger_position(0 if trigger_position is None else trigger_position)

    def trigger_source(self) -> int:
        """The trigger source id."""
        return _TSR1_TRIGGER_SOURCE.get(self[2])

    def set_trigger_source(self, value: int) -> None:
        """Set the trigger source id."""
        _write_field(self, 2, _TSR1_TRIGGER_SOURCE, "trigger_source", value)

    def record_length(self) -> int:
        """The record length id."""
        return _TSR1_RECORD_LENGTH.get(self[2])

    def set_record_length(self, value: int) -> None:
        """Set the record length id."""
        _write_field(self, 2, _TSR1_RECORD_LENGTH, "record_length", value)

    def samplerate_id(self) -> int:
        """The samplerate id used when the downsampler is off."""
        return _TSR1_SAMPLERATE_ID.get(self[2])

    def set_samplerate_id(self, value: int) -> None:
        """Set the samplerate id."""
        _write_field(self, 2, _TSR1_SAMPLERATE_ID, "samplerate_id", value)

    def downsampling_mode(self) -> bool:
        """True if the downsampler is used."""
        return _TSR1_DOWNSAMPLING_MODE.get(self[2]) == 1

    def set_downsampling_mode(self, downsampling: bool) -> None:
        """Enable or disable the downsampler."""
        _write_field(self, 2, _TSR1_DOWNSAMPLING_MODE, "downsampling_mode", bool(downsampling))

    def used_channels(self) -> int:
        """The enabled channels, see :class:`~hantekproto.definitions.UsedChannels`."""
        return _TSR2_USED_CHANNELS.get(self[3])

    def set_used_channels(self, value: int) -> None:
        """Set the enabled channels."""
        _write_field(self, 3, _TSR2_USED_CHANNELS, "used_channels", value)

    def fast_rate(self) -> bool:
        """True if one channel uses all buffers."""
        return _TSR2_FAST_RATE.get(self[3]) == 1

    def set_fast_rate(self, fast_rate: bool) -> None:
        """Set the fast rate state."""
        _write_field(self, 3, _TSR2_FAST_RATE, "fast_rate", bool(fast_rate))

    def trigger_slope(self) -> int:
        """The trigger slope."""
        return _TSR2_TRIGGER_SLOPE.get(self[3])

    def set_trigger_slope(self, slope: int) -> None:
        """Set the trigger slope."""
        _write_field(self, 3, _TSR2_TRIGGER_SLOPE, "trigger_slope", slope)

    def downsampler(self) -> int:
        """The 16-bit downsampler value."""
        return _read_le(self, self._DOWNSAMPLER)

    def set_downsampler(self, downsampler: int) -> None:
        """Set the 16-bit downsampler value."""
        _write_le(self, self._DOWNSAMPLER, "downsampler", downsampler)

    def trigger_position(self) -> int:
        """The 24-bit horizontal trigger position."""
        return _read_le(self, self._TRIGGER_POSITION)

    def set_trigger_position(self, position: int) -> None:
        """Set the 24-bit horizontal trigger position."""
        _write_le(self, self._TRIGGER_POSITION, "trigger_position", position)


class _CodeOnly(BulkCommand):
    _CODE: BulkCode

    def __init__(self) -> None:
        super().__init__(self._CODE, 2)
        self[0] = self._CODE


class BulkForceTrigger(_CodeOnly):
    """The FORCETRIGGER builder."""

    _CODE = BulkCode.FORCETRIGGER

    def __init__(self) -> None:
        super().__init__()


class BulkCaptureStart(_CodeOnly):
    """The STARTSAMPLING builder."""

    _CODE = BulkCode.STARTSAMPLING

    def __init__(self) -> None:
        super().__init__()


class BulkTriggerEnabled(_CodeOnly):
    """The ENABLETRIGGER builder."""

    _CODE = BulkCode.ENABLETRIGGER

    def __init__(self) -> None:
        super().__init__()


class BulkGetData(_CodeOnly):
    """The GETDATA builder."""

    _CODE = BulkCode.GETDATA

    def __init__(self) -> None:
        super().__init__()


class BulkGetCaptureState(_CodeOnly):
    """The GETCAPTURESTATE builder."""

    _CODE = BulkCode.GETCAPTURESTATE

    def __init__(self) -> None:
        super().__init__()


class BulkResponseGetCaptureState(BulkCommand):
    """The parser for the GETCAPTURESTATE response."""

    def __init__(self) -> None:
        super().__init__(BulkCode.GETCAPTURESTATE_RESPONSE, 512)

    def capture_state(self) -> int:
        """The capture state byte of the oscilloscope."""
        return self[0]

    def trigger_point(self) -> int:
        """The trigger point of the captured samples."""
        return self[2] | (self[3] << 8) | (self[1] << 16)


class BulkSetGain(BulkCommand):
    """The SETGAIN builder."""

    def __init__(self, channel1: int = 0, channel2: int = 0) -> None:
        super().__init__(BulkCode.SETGAIN, 8)
        self[0] = BulkCode.SETGAIN
        self.set_gain(0, channel1)
        self.set_gain(1, channel2)

    @staticmethod
    def _field(channel: ChannelID) -> BitField:
        return _GAIN_CH1 if channel == 0 else _GAIN_CH2

    def gain(self, channel: ChannelID) -> int:
        """The 2-bit gain value of ``channel``."""
        return self._field(channel).get(self[2])

    def set_gain(self, channel: ChannelID, value: int) -> None:
        """Set the 2-bit gain value of ``channel``."""
        _write_field(self, 2, self._field(channel), "gain", value)


class BulkSetLogicalData(BulkCommand):
    """The SETLOGICALDATA builder."""

    def __init__(self, data: int = 0) -> None:
        super().__init__(BulkCode.SETLOGICALDATA, 8)
        self[0] = BulkCode.SETLOGICALDATA
        self.set_data(data)

    def data(self) -> int:
        """The data byte."""
        return self[2]

    def set_data(self, value: int) -> None:
        """Set the data byte."""
        _write_le(self, (2,), "data", value)


class BulkGetLogicalData(_CodeOnly):
    """The GETLOGICALDATA builder."""

    _CODE = BulkCode.GETLOGICALDATA

    def __init__(self) -> None:
        super().__init__()