"""Codes of the bulk commands understood by the oscilloscopes."""

from enum import IntEnum


class BulkCode(IntEnum):
    """All supported bulk commands; the code is the first byte of each command."""

    SETFILTER = 0x00
    SETTRIGGERANDSAMPLERATE = 0x01
    FORCETRIGGER = 0x02
    STARTSAMPLING = 0x03
    ENABLETRIGGER = 0x04
    GETDATA = 0x05
    GETCAPTURESTATE = 0x06
    SETGAIN = 0x07
    SETLOGICALDATA = 0x08
    GETLOGICALDATA = 0x09
    AUNKNOWN = 0x0A
    BSETCHANNELS = 0x0B
    CSETTRIGGERORSAMPLERATE = 0x0C
    DSETBUFFER = 0x0D
    ESETTRIGGERORSAMPLERATE = 0x0E
    FSETBUFFER = 0x0F

    GETCAPTURESTATE_RESPONSE = 0xFE
    INVALID = 0xFF