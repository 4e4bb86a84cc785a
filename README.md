# hantekproto

Byte-exact builders and parsers for the command packets used by Hantek USB
oscilloscopes (DSO-2090, DSO-2150, DSO-2250, DSO-5200/5200A and the 6022
family). Every command is a `bytearray` subclass, so it can be handed
directly to a USB write call, and it carries its command code in `.code`.

## Installation

```
pip install hantekproto
```

The package has no runtime dependencies.

## Modules

- `hantekproto.definitions` – `UsedChannels`, `DTriggerPositionUsed`, the
  calibration records `Offset` and `OffsetsPerGainStep` (each with
  `to_bytes()` and `from_bytes()`), and the constants `HANTEK_GAIN_STEPS`,
  `DIVS_TIME`, `DIVS_VOLTAGE` and `DIVS_SUB`.
- `hantekproto.bulk_codes` – the `BulkCode` enumeration.
- `hantekproto.control_codes` – the `ControlCode` and `ControlValue`
  enumerations.
- `hantekproto.command` – the `BulkCommand` and `ControlCommand` base
  classes (zero-filled buffers with `code`, `pending` and `next` attributes;
  control commands also have `value`) and `BitField` for packed bit fields.
- `hantekproto.control` – control transfers: `ControlBeginCommand`,
  `ControlGetSpeed`, `ControlSetOffset`, `ControlSetRelays`,
  `ControlSetVoltDivCh1`, `ControlSetVoltDivCh2`, `ControlSetTimeDiv`,
  `ControlAcquireHardData`, `ControlGetLimits`, plus the `BulkIndex`
  enumeration.
- `hantekproto.bulk_common` – bulk commands shared by most models:
  `BulkSetFilter`, `BulkSetTriggerAndSamplerate`, `BulkForceTrigger`,
  `BulkCaptureStart`, `BulkTriggerEnabled`, `BulkGetData`,
  `BulkGetCaptureState`, `BulkSetGain`, `BulkSetLogicalData`,
  `BulkGetLogicalData` and the `BulkResponseGetCaptureState` parser.
- `hantekproto.bulk_models` – bulk commands for the DSO-2250 and DSO-5200
  series: `BulkSetChannels2250`, `BulkSetTrigger2250`,
  `BulkSetSamplerate5200`, `BulkSetRecordLength2250`, `BulkSetBuffer5200`,
  `BulkSetSamplerate2250`, `BulkSetTrigger5200` and `BulkSetBuffer2250`.

Fields are read with a method named after the field (`gain(0)`,
`trigger_position()`) and written with the matching `set_...` method.
Values that do not fit their field raise `ValueError`.

## Example

```python
from hantekproto.bulk_common import BulkSetGain, BulkResponseGetCaptureState
from hantekproto.control import ControlSetRelays

gain = BulkSetGain(1, 2)
payload = bytes(gain)          # b"\x07\x00\x09\x00\x00\x00\x00\x00"
print(gain.code, gain.gain(0), gain.gain(1))

relays = ControlSetRelays(ch1_below_1v=True, ch1_coupling_dc=True)
print(relays.code, relays.below_1v(0), relays.coupling_dc(1))

state = BulkResponseGetCaptureState()
state[0:4] = b"\x01\x02\x03\x04"   # bytes as read back from the device
print(state.capture_state(), state.trigger_point())
```

## A few details worth knowing

- `BulkSetTriggerAndSamplerate()` with no downsampler or trigger position
  leaves every field zero; given either, `downsampling_mode` defaults to true.
- `BulkSetTrigger5200` stores the fast rate bit inverted. Created with no
  trigger source or used channels, every field is zero, which reads back as
  fast rate on.
- `BulkSetBuffer2250()` with no trigger positions is 10 bytes long; with
  positions it is 12.

## What the package does not do

It performs no USB I/O, has no device detection, no sample decoding and no
command-line tool or user interface. It only produces and reads command
payloads; sending them is left to whatever USB library you use.

## Running the tests

```
pip install -e ".[test]"
pytest
```