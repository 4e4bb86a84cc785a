"""Builders and parsers for the control commands."""

from __future__ import annotations

from enum import IntEnum

from .command import ControlCommand
from .control_codes import ControlCode, ControlValue
from .definitions import ChannelID, OffsetsPerGainStep


def _check_range(name: str, value: int, bits: int) -> int:
    value = int(value)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in {bits} bits, got {value}")
    return value


class BulkIndex(IntEnum):
    """Command index sent with CONTROL_BEGINCOMMAND."""

    COMMANDINDEX_0 = 0x03  # used most of the time
    COMMANDINDEX_1 = 0x0A
    COMMANDINDEX_2 = 0x09
    COMMANDINDEX_3 = 0x01  # sometimes used for SETTRIGGERANDSAMPLERATE
    COMMANDINDEX_4 = 0x02
    COMMANDINDEX_5 = 0x08


class ControlBeginCommand(ControlCommand):
    """The CONTROL_BEGINCOMMAND builder, sent before any bulk command."""

    def __init__(self, index: BulkIndex = BulkIndex.COMMANDINDEX_0) -> None:
        super().__init__(ControlCode.CONTROL_BEGINCOMMAND, 10)
        self[0] = 0x0F
        self[1] = BulkIndex(index)


class ControlGetSpeed(ControlCommand):
    """The CONTROL_GETSPEED response parser."""

    def __init__(self) -> None:
        super().__init__(ControlCode.CONTROL_GETSPEED, 10)

    def speed(self) -> int:
        """The speed level of the USB connection."""
        return self[0]


class ControlSetOffset(ControlCommand):
    """The CONTROL_SETOFFSET builder; offsets are stored big-endian."""

    def __init__(self, channel1: int = 0, channel2: int = 0, trigger: int = 0) -> None:
        super().__init__(ControlCode.CONTROL_SETOFFSET, 17)
        self.set_channel(0, channel1)
        self.set_channel(1, channel2)
        self.set_trigger(trigger)

    @staticmethod
    def _position(channel: ChannelID) -> int:
        return 0 if channel == 0 else 2

    def channel(self, channel: ChannelID) -> int:
        """The 12-bit offset of ``channel``."""
        pos = self._position(channel)
        return ((self[pos] & 0x0F) << 8) | self[pos + 1]

    def set_channel(self, channel: ChannelID, offset: int) -> None:
        """Set the offset of ``channel``."""
        offset = _check_range("offset", offset, 16)
        pos = self._position(channel)
        self[pos] = offset >> 8
        self[pos + 1] = offset & 0xFF

    def trigger(self) -> int:
        """The 12-bit external trigger level."""
        return ((self[4] & 0x0F) << 8) | self[5]

    def set_trigger(self, level: int) -> None:
        """Set the external trigger level."""
        level = _check_range("level", level, 16)
        self[4] = level >> 8
        self[5] = level & 0xFF


class ControlSetRelays(ControlCommand):
    """The CONTROL_SETRELAYS builder; a relay is active when its bit is cleared."""

    # (byte index, bit) for channel 1 and channel 2
    _BELOW_1V = ((1, 0x04), (4, 0x20))
    _BELOW_100MV = ((2, 0x08), (5, 0x40))
    _COUPLING = ((3, 0x02), (6, 0x10))
    _TRIGGER = (7, 0x01)

    def __init__(
        self,
        ch1_below_1v: bool = False,
        ch1_below_100mv: bool = False,
        ch1_coupling_dc: bool = False,
        ch2_below_1v: bool = False,
        ch2_below_100mv: bool = False,
        ch2_coupling_dc: bool = False,
        trigger_ext: bool = False,
    ) -> None:
        super().__init__(ControlCode.CONTROL_SETRELAYS, 17)
        self.set_below_1v(0, ch1_below_1v)
        self.set_below_100mv(0, ch1_below_100mv)
        self.set_coupling_dc(0, ch1_coupling_dc)
        self.set_below_1v(1, ch2_below_1v)
        self.set_below_100mv(1, ch2_below_100mv)
        self.set_coupling_dc(1, ch2_coupling_dc)
        self.set_trigger_ext(trigger_ext)

    def _get(self, relay: tuple[int, int]) -> bool:
        pos, bit = relay
        return self[pos] & bit == 0

    def _set(self, relay: tuple[int, int], active: bool) -> None:
        pos, bit = relay
        self[pos] = (~bit & 0xFF) if active else bit

    @staticmethod
    def _pick(relays: tuple[tuple[int, int], tuple[int, int]], channel: ChannelID) -> tuple[int, int]:
        return relays[0] if channel == 0 else relays[1]

    def below_1v(self, channel: ChannelID) -> bool:
        """True if the gain of ``channel`` is below 1 V."""
        return self._get(self._pick(self._BELOW_1V, channel))

    def set_below_1v(self, channel: ChannelID, below: bool) -> None:
        """Set the below 1 V relay of ``channel``."""
        self._set(self._pick(self._BELOW_1V, channel), below)

    def below_100mv(self, channel: ChannelID) -> bool:
        """True if the gain of ``channel`` is below 100 mV."""
        return self._get(self._pick(self._BELOW_100MV, channel))

    def set_below_100mv(self, channel: ChannelID, below: bool) -> None:
        """Set the below 100 mV relay of ``channel``."""
        self._set(self._pick(self._BELOW_100MV, channel), below)

    def coupling_dc(self, channel: ChannelID) -> bool:
        """True if ``channel`` uses DC coupling."""
        return self._get(self._pick(self._COUPLING, channel))

    def set_coupling_dc(self, channel: ChannelID, dc: bool) -> None:
        """Set the coupling relay of ``channel``."""
        self._set(self._pick(self._COUPLING, channel), dc)

    def trigger_ext(self) -> bool:
        """True if the trigger comes from the EXT connector."""
        return self._get(self._TRIGGER)

    def set_trigger_ext(self, ext: bool) -> None:
        """Set the external trigger relay."""
        self._set(self._TRIGGER, ext)


class _SingleByteDiv(ControlCommand):
    _CODE: ControlCode

    def __init__(self, div: int) -> None:
        super().__init__(self._CODE, 1)
        self.set_div(div)

    def set_div(self, value: int) -> None:
        """Set the divisor byte."""
        self[0] = _check_range("div", value, 8)


class ControlSetVoltDivCh1(_SingleByteDiv):
    """Channel 1 voltage division setting (DSO-6022)."""

    _CODE = ControlCode.CONTROL_SETVOLTDIV_CH1

    def __init__(self, div: int = 5) -> None:
        super().__init__(div)

    def set_div(self, value: int) -> None:
        """Set the voltage division id."""
        super().set_div(value)


class ControlSetVoltDivCh2(_SingleByteDiv):
    """Channel 2 voltage division setting (DSO-6022)."""

    _CODE = ControlCode.CONTROL_SETVOLTDIV_CH2

    def __init__(self, div: int = 5) -> None:
        super().__init__(div)

    def set_div(self, value: int) -> None:
        """Set the voltage division id."""
        super().set_div(value)


class ControlSetTimeDiv(_SingleByteDiv):
    """Time division setting (DSO-6022)."""

    _CODE = ControlCode.CONTROL_SETTIMEDIV

    def __init__(self, div: int = 1) -> None:
        super().__init__(div)

    def set_div(self, value: int) -> None:
        """Set the time division id."""
        super().set_div(value)


class ControlAcquireHardData(ControlCommand):
    """Request for sample data (DSO-6022)."""

    def __init__(self) -> None:
        super().__init__(ControlCode.CONTROL_ACQUIIRE_HARD_DATA, 1)
        self[0] = 0x01


class ControlGetLimits(ControlCommand):
    """Reads the offset calibration for ``channels`` channels."""

    def __init__(self, channels: int) -> None:
        if channels < 1:
            raise ValueError(f"at least one channel is needed, got {channels}")
        super().__init__(ControlCode.CONTROL_VALUE, OffsetsPerGainStep.SIZE * channels)
        self.value = ControlValue.VALUE_OFFSETLIMITS
        self[0] = 0x01