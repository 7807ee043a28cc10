"""Relay bank driven through active-low output pins."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

LOW = 0
HIGH = 1

DEFAULT_RELAY_PINS = (9, 10, 20, 21)


class PinMode(IntEnum):
    """Direction of a digital pin."""

    INPUT = 0
    OUTPUT = 1


@dataclass
class PinDriver:
    """In-memory digital pin bank that remembers modes, levels and every write."""

    modes: dict[int, PinMode] = field(default_factory=dict)
    levels: dict[int, int] = field(default_factory=dict)
    history: list[tuple[int, int]] = field(default_factory=list)

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        """Set the direction of ``pin``."""
        self.modes[pin] = PinMode(mode)

    def digital_write(self, pin: int, level: int) -> None:
        """Drive ``pin`` to ``level`` (LOW or HIGH) and record the change."""
        level = HIGH if level else LOW
        self.levels[pin] = level
        self.history.append((pin, level))


@dataclass
class _Relay:
    pin: int
    state: bool = False


class RelayController:
    """A fixed set of relays wired with active-low logic."""

    def __init__(
        self,
        pins: PinDriver | None = None,
        relay_pins: Sequence[int] = DEFAULT_RELAY_PINS,
    ) -> None:
        self.pins = pins if pins is not None else PinDriver()
        self._relays = [_Relay(pin) for pin in relay_pins]

    def __len__(self) -> int:
        return len(self._relays)

    def _valid(self, relay: int) -> bool:
        return 0 <= relay < len(self._relays)

    def begin(self) -> None:
        """Configure every relay pin as an output and switch all relays off."""
        for index, relay in enumerate(self._relays):
            self.pins.pin_mode(relay.pin, PinMode.OUTPUT)
            self.set_relay(index, False)

    def set_relay(self, relay: int, state: bool) -> None:
        """Switch one relay; indices outside the bank are ignored."""
        if not self._valid(relay):
            return
        entry = self._relays[relay]
        entry.state = bool(state)
        self.pins.digital_write(entry.pin, LOW if state else HIGH)

    def set_all_relays(self, state: bool) -> None:
        """Switch every relay to the same state."""
        for index in range(len(self._relays)):
            self.set_relay(index, state)

    def relay_state(self, relay: int) -> bool:
        """Return whether a relay is on; unknown relays read as off."""
        if not self._valid(relay):
            return False
        return self._relays[relay].state