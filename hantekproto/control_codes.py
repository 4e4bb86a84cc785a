"""Codes of the control transfers and the values they give access to."""

from enum import IntEnum


class ControlCode(IntEnum):
    """All supported control commands (the USB control request number)."""

    CONTROL_VALUE = 0xA2
    CONTROL_GETSPEED = 0xB2
    CONTROL_BEGINCOMMAND = 0xB3
    CONTROL_SETOFFSET = 0xB4
    CONTROL_SETRELAYS = 0xB5
    CONTROL_SETVOLTDIV_CH1 = 0xE0
    CONTROL_SETVOLTDIV_CH2 = 0xE1
    CONTROL_SETTIMEDIV = 0xE2
    CONTROL_ACQUIIRE_HARD_DATA = 0xE3


class ControlValue(IntEnum):
    """Values that can be read or written with :attr:`ControlCode.CONTROL_VALUE`."""

    VALUE_OFFSETLIMITS = 0x08
    VALUE_DEVICEADDRESS = 0x0A
    VALUE_FASTRATECALIBRATION = 0x60
    VALUE_ETSCORRECTION = 0x70