# rfidgate

Control logic for an RFID door opener: read ISO14443A cards, check them
against a small list of authorised UIDs, pulse two relays in sequence when a
card is accepted, and play audio cues for start-up, waiting, acceptance and
refusal. Repeated refusals are met with a growing penalty delay to deter
brute-force scanning.

## Hardware objects

The package drives three small hardware objects. Each comes with an
in-memory implementation that records what it is asked to do, which is what
the components use by default and what the tests run against. To drive real
hardware, subclass it (or supply an object with the same methods):

- `rfidgate.relays.PinDriver` with `pin_mode(pin, mode)` and
  `digital_write(pin, level)`. The built-in one keeps `modes`, `levels` and a
  `history` list of every `(pin, level)` write.
- `rfidgate.rfid.CardReader` with `begin()`, `firmware_version()`,
  `sam_config()` and `read_passive_target_id()`. The built-in one is created
  with a firmware number and a sequence of card UIDs, and hands the UIDs out
  one per read, then `None`.
- `rfidgate.audio.MP3Device` with `reset()`, `set_source(source)`,
  `set_volume(volume)`, `play_file_by_index_number(track)`, `get_status()`
  and `current_file_position_in_seconds()`. The built-in one remembers the
  last track, volume, source and play state.

## Components

`rfidgate.relays.RelayController(pins, relay_pins)` drives active-low
relays: "on" writes LOW to the relay's pin, "off" writes HIGH. It defaults to
a fresh `PinDriver` and the pins `(9, 10, 20, 21)`. `begin()` sets each pin to
`PinMode.OUTPUT` and switches every relay off. `set_relay`, `set_all_relays`
and `relay_state` address relays by index; indices outside the bank are
ignored and report off.

`rfidgate.audio.AudioPlayer(device, sleep)` wraps the MP3 module. `begin()`
resets it, selects `Source.BUILTIN` and applies the volume (20 by default),
pausing in between through `sleep` (in seconds); it always returns `True`.
Volumes are clamped to 0..30. Before `begin()`, or when no device was given,
the player stays silent, `status()` reports `Status.STOPPED`, and `volume()`
and `current_position()` report 0. `set_source` accepts only `Source.BUILTIN`
and `Source.SDCARD`; `source()` returns the last one selected. The cue track
numbers are in `rfidgate.audio.Sound`.

`rfidgate.rfid.RFIDController(reader, log)` reads cards and validates UIDs
(as `bytes`). It keeps room for one 4-byte UID and two 7-byte UIDs; further
additions are ignored, and adding a UID of the wrong length raises
`ValueError`. UIDs of any other length are never valid.
`initialize_default_uids()` loads a built-in set of test UIDs. `begin()`
raises `rfidgate.rfid.ReaderNotFoundError` when the reader reports firmware
version 0. `print_firmware_version()` sends the chip and firmware version to
`log`.

`rfidgate.access.AccessController(rfid, relays, audio, clock, sleep, log)`
ties them together. `setup()` starts every component, then `loop_once()` or
`run(iterations)` polls for cards:

- once more than ten seconds have passed since the controller was created
  with no card scanned, the waiting cue plays once;
- an accepted card plays the acceptance cue, resets the refusal count, and
  switches relay 1 on for one second, then relay 2 for one second; the
  sequence advances on later calls to `handle_relay_sequence()` (made by
  every `loop_once()`), and `relay_state` holds a `RelayState`;
- a refused card plays one of three refusal cues and waits three seconds plus
  a penalty of 1, 3, 4, 5, 8, 12, 17, 23, 30, 38, 47, 57 or 68 seconds,
  growing with each consecutive refusal; `penalty_delay(attempts)` returns
  the total wait in seconds.

`loop_once()` returns `True` for an accepted card, `False` for a refused one
and `None` when no card was read. `run(None)` loops forever.

## Example

```python
from rfidgate.access import AccessController
from rfidgate.audio import AudioPlayer, MP3Device
from rfidgate.relays import RelayController
from rfidgate.rfid import CardReader, RFIDController

reader = CardReader(cards=[bytes([0xB4, 0x12, 0x34, 0x56])])
rfid = RFIDController(reader)
relays = RelayController()
audio = AudioPlayer(MP3Device(), sleep=lambda seconds: None)

now = [0]
gate = AccessController(
    rfid, relays, audio,
    clock=lambda: now[0],
    sleep=lambda seconds: None,
)
gate.setup()
assert gate.loop_once() is True
assert relays.relay_state(0)
```

`clock` returns the time in milliseconds (by default a monotonic clock),
`sleep` waits a number of seconds (by default `time.sleep`), and `log`
receives status messages (by default `print`).

## What it does not do

The package contains no drivers for real pins, card readers or MP3 modules,
and installs no command: to run a door, supply hardware objects of your own
and call `AccessController.run()` from your own program. Authorised UIDs are
held in memory only; there is no storage or management of them beyond
`add_uid_4b`, `add_uid_7b` and `initialize_default_uids`.