"""Shared protocol definitions: channel selections, trigger states and calibration layouts."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

HANTEK_GAIN_STEPS = 9
"""Number of gain steps with their own offset calibration."""

DIVS_TIME = 10.0
"""Number of horizontal screen divisions."""

DIVS_VOLTAGE = 8.0
"""Number of vertical screen divisions."""

DIVS_SUB = 5
"""Number of sub-divisions per division."""

ChannelID = int
RecordLengthID = int


class UsedChannels(IntEnum):
    """The enabled channels.

    The ``BUSED_*`` names give the different meaning of the same values on the DSO-2250.
    """

    USED_CH1 = 0
    USED_CH2 = 1
    USED_CH1CH2 = 2
    USED_NONE = 3

    BUSED_CH1 = 0
    BUSED_NONE = 1
    BUSED_CH1CH2 = 2
    BUSED_CH2 = 3


class DTriggerPositionUsed(IntEnum):
    """Trigger position states for the DSETBUFFER command."""

    OFF = 0  # roll mode
    ON = 7  # normal operation


_OFFSET_STRUCT = struct.Struct("<HH")


@dataclass
class Offset:
    """Calibrated offset values for the top and bottom of the screen."""

    start: int = 0x0000
    end: int = 0xFFFF

    SIZE: ClassVar[int] = _OFFSET_STRUCT.size

    def to_bytes(self) -> bytes:
        """Pack as two little-endian 16-bit values."""
        try:
            return _OFFSET_STRUCT.pack(self.start, self.end)
        except struct.error as exc:
            raise ValueError(f"offset values out of 16-bit range: {self}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Offset:
        """Unpack from exactly :attr:`SIZE` bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        start, end = _OFFSET_STRUCT.unpack(bytes(data))
        return cls(start, end)


def _default_steps() -> list[Offset]:
    return [Offset() for _ in range(HANTEK_GAIN_STEPS)]


@dataclass
class OffsetsPerGainStep:
    """Offset calibration of one channel, one :class:`Offset` per gain step."""

    step: list[Offset] = field(default_factory=_default_steps)

    SIZE: ClassVar[int] = Offset.SIZE * HANTEK_GAIN_STEPS

    def __post_init__(self) -> None:
        if len(self.step) != HANTEK_GAIN_STEPS:
            raise ValueError(f"expected {HANTEK_GAIN_STEPS} gain steps, got {len(self.step)}")

    def to_bytes(self) -> bytes:
        """Pack all gain steps in order."""
        return b"".join(offset.to_bytes() for offset in self.step)

    @classmethod
    def from_bytes(cls, data: bytes) -> OffsetsPerGainStep:
        """Unpack from exactly :attr:`SIZE` bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        raw = bytes(data)
        return cls(
            [
                Offset.from_bytes(raw[pos : pos + Offset.SIZE])
                for pos in range(0, cls.SIZE, Offset.SIZE)
            ]
        )