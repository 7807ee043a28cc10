"""Card reading and UID whitelist checks."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable

MAX_4B_UIDS = 1
MAX_7B_UIDS = 2

DEFAULT_FIRMWARE = 0x32010607

DEFAULT_UID_4B = bytes([0xB4, 0x12, 0x34, 0x56])
DEFAULT_UIDS_7B = (
    bytes([0x04, 0x12, 0x34, 0x56, 0x78, 0x9A, 0xBC]),
    bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD]),
)


class ReaderNotFoundError(RuntimeError):
    """No PN53x board answered."""


class CardReader:
    """In-memory PN532-style reader; cards placed in ``cards`` are read in turn."""

    def __init__(self, firmware: int = DEFAULT_FIRMWARE, cards: Iterable[bytes] = ()) -> None:
        self.firmware = firmware
        self.cards: deque[bytes] = deque(bytes(c) for c in cards)
        self.started = False
        self.configured = False

    def begin(self) -> None:
        self.started = True

    def firmware_version(self) -> int:
        return self.firmware

    def sam_config(self) -> None:
        self.configured = True

    def read_passive_target_id(self) -> bytes | None:
        """Return the UID of the next ISO14443A card in the field, if any."""
        return self.cards.popleft() if self.cards else None


class RFIDController:
    """Reads cards and checks their UIDs against a small whitelist."""

    def __init__(self, reader: CardReader, log: Callable[[str], None] = print) -> None:
        self.reader = reader
        self._log = log
        self._uids_4b: list[bytes] = []
        self._uids_7b: list[bytes] = []

    def begin(self) -> bool:
        """Start the reader; raise ReaderNotFoundError if it does not answer."""
        self.reader.begin()
        if self.reader.firmware_version() == 0:
            self._log("Didn't find PN53x board")
            raise ReaderNotFoundError("Didn't find PN53x board")
        self.reader.sam_config()
        return True

    def read_card(self) -> bytes | None:
        return self.reader.read_passive_target_id()

    def validate_uid(self, uid: bytes) -> bool:
        uid = bytes(uid)
        if len(uid) == 4:
            return uid in self._uids_4b
        if len(uid) == 7:
            return uid in self._uids_7b
        return False

    @staticmethod
    def _checked(uid: bytes, size: int) -> bytes:
        uid = bytes(uid)
        if len(uid) != size:
            raise ValueError(f"expected a {size}-byte UID, got {len(uid)} bytes")
        return uid

    def add_uid_4b(self, uid: bytes) -> None:
        """Whitelist a 4-byte UID; ignored once the table is full."""
        uid = self._checked(uid, 4)
        if len(self._uids_4b) < MAX_4B_UIDS:
            self._uids_4b.append(uid)

    def add_uid_7b(self, uid: bytes) -> None:
        """Whitelist a 7-byte UID; ignored once the table is full."""
        uid = self._checked(uid, 7)
        if len(self._uids_7b) < MAX_7B_UIDS:
            self._uids_7b.append(uid)

    def firmware_version(self) -> int:
        return self.reader.firmware_version()

    def print_firmware_version(self) -> None:
        version = self.firmware_version()
        if version == 0:
            return
        self._log(f"Found chip PN5{(version >> 24) & 0xFF:X}")
        self._log(f"Firmware ver. {(version >> 16) & 0xFF}.{(version >> 8) & 0xFF}")

    def initialize_default_uids(self) -> None:
        self.add_uid_4b(DEFAULT_UID_4B)
        for uid in DEFAULT_UIDS_7B:
            self.add_uid_7b(uid)