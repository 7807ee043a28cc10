"""Door access loop: read a card, check it, pulse the relays, play sounds."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from rfidgate.audio import AudioPlayer, Sound
from rfidgate.relays import RelayController
from rfidgate.rfid import RFIDController

MAXIMUM_INVALID_ATTEMPTS = 13
INVALID_DELAYS = (1, 3, 4, 5, 8, 12, 17, 23, 30, 38, 47, 57, 68)
BASE_PENALTY = 3

RELAY1_DURATION_MS = 1000
RELAY2_DURATION_MS = 1000
RELAY1 = 0
RELAY2 = 1

WAITING_SOUND_AFTER_MS = 10000
STARTUP_VOLUME = 20


def _millis() -> int:
    return time.monotonic_ns() // 1_000_000


class RelayState(Enum):
    """Stage of the two-relay unlock sequence."""

    IDLE = "idle"
    RELAY1_ACTIVE = "relay1_active"
    RELAY2_PENDING = "relay2_pending"
    RELAY2_ACTIVE = "relay2_active"


class AccessController:
    """Ties the card reader, relay bank and audio player into one control loop.

    ``clock`` returns milliseconds; ``sleep`` takes seconds.
    """

    def __init__(
        self,
        rfid: RFIDController,
        relays: RelayController,
        audio: AudioPlayer,
        clock: Callable[[], int] = _millis,
        sleep: Callable[[float], None] = time.sleep,
        log: Callable[[str], None] = print,
    ) -> None:
        self.rfid = rfid
        self.relays = relays
        self.audio = audio
        self._clock = clock
        self._sleep = sleep
        self._log = log
        self._boot = clock()
        self.invalid_attempts = 0
        self.scanned = False
        self.impatient = False
        self.relay_active = False
        self.relay_activated_at = 0
        self.relay_state = RelayState.IDLE

    def _uptime(self) -> int:
        return self._clock() - self._boot

    def setup(self) -> None:
        """Bring up every device; raises ReaderNotFoundError without a reader."""
        self._sleep(2.0)
        self._log("Starting up!")

        self.rfid.begin()
        self.rfid.print_firmware_version()
        self.rfid.initialize_default_uids()

        self.relays.begin()
        self.relays.set_all_relays(False)

        if self.audio.begin():
            self.audio.set_volume(STARTUP_VOLUME)
            self._sleep(0.5)
            self.audio.play_track(Sound.STARTUP)

        self._log("Waiting for an ISO14443A card")

    def handle_relay_sequence(self) -> None:
        """Advance the relay sequence once its current stage has timed out."""
        elapsed = self._clock() - self.relay_activated_at
        if self.relay_state is RelayState.RELAY1_ACTIVE:
            if elapsed >= RELAY1_DURATION_MS:
                self.relays.set_relay(RELAY1, False)
                self.relays.set_relay(RELAY2, True)
                self.relay_activated_at = self._clock()
                self.relay_state = RelayState.RELAY2_ACTIVE
                self._log("Relay 1 OFF, Relay 2 ON")
        elif self.relay_state is RelayState.RELAY2_ACTIVE:
            if elapsed >= RELAY2_DURATION_MS:
                self.relays.set_relay(RELAY2, False)
                self.relay_state = RelayState.IDLE
                self.relay_active = False
                self._log("Relay 2 OFF - Sequence complete")

    def activate_relays(self) -> None:
        """Switch relay 1 on and start the timed sequence."""
        self.relays.set_relay(RELAY1, True)
        self.relay_activated_at = self._clock()
        self.relay_state = RelayState.RELAY1_ACTIVE
        self.relay_active = True
        self._log("Starting relay sequence - Relay 1 ON")

    def penalty_delay(self, attempts: int) -> int:
        """Seconds to wait after a rejected card, given earlier failures."""
        if attempts < 0:
            raise ValueError("attempts must not be negative")
        index = min(attempts, MAXIMUM_INVALID_ATTEMPTS - 1)
        return BASE_PENALTY + INVALID_DELAYS[index]

    def _deny(self) -> None:
        self._log("Unauthorised card")
        if self.invalid_attempts == 0:
            self.audio.play_track(Sound.DENIED_1)
        elif self.invalid_attempts == 1:
            self.audio.play_track(Sound.DENIED_2)
        else:
            self.audio.play_track(Sound.DENIED_3)
        self._sleep(BASE_PENALTY)
        self._sleep(self.penalty_delay(self.invalid_attempts) - BASE_PENALTY)
        if self.invalid_attempts < MAXIMUM_INVALID_ATTEMPTS - 1:
            self.invalid_attempts += 1

    def loop_once(self) -> bool | None:
        """Run one pass of the loop.

        Returns True for an accepted card, False for a rejected one and
        None when no card was read.
        """
        self.handle_relay_sequence()

        if self._uptime() > WAITING_SOUND_AFTER_MS and not self.impatient and not self.scanned:
            self.audio.play_track(Sound.WAITING)
            self.impatient = True

        uid = self.rfid.read_card()
        if uid is None:
            return None

        uid = bytes(uid)
        self.scanned = True
        self._log("Found a card!")
        self._log(f"UID Length: {len(uid)} bytes")
        self._log("UID Value: " + "".join(f" 0x{byte:X}" for byte in uid))

        valid = self.rfid.validate_uid(uid)

        if len(uid) == 4:
            self._log("4B UID")
        elif len(uid) == 7:
            self._log("7B UID")
        else:
            self._log("Unknown UID type / length")

        if valid:
            self._log("Card match found!")
            self.invalid_attempts = 0
            self.audio.play_track(Sound.ACCEPTED)
            self.activate_relays()
            return True

        self._deny()
        return False

    def run(self, iterations: int | None = None) -> None:
        """Set up, then loop ``iterations`` times, or forever when None."""
        self.setup()
        if iterations is None:
            while True:
                self.loop_once()
        for _ in range(iterations):
            self.loop_once()