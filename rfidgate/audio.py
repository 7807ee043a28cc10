"""Sound playback through a JQ6500-style MP3 module."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable

MAX_VOLUME = 30
DEFAULT_VOLUME = 20


class Status(IntEnum):
    STOPPED = 0
    PLAYING = 1
    PAUSED = 2


class Source(IntEnum):
    BUILTIN = 0
    SDCARD = 1


class Sound(IntEnum):
    """Track numbers of the sound effects stored on the module."""

    STARTUP = 1
    WAITING = 2
    ACCEPTED = 3
    DENIED_1 = 4
    DENIED_2 = 5
    DENIED_3 = 6


class MP3Device:
    """In-memory model of the MP3 module; subclass it to drive real hardware."""

    def __init__(self) -> None:
        self.source = Source.BUILTIN
        self.volume = DEFAULT_VOLUME
        self.last_track: int | None = None
        self.state = Status.STOPPED
        self.position = 0
        self.reset_count = 0

    def reset(self) -> None:
        self.state = Status.STOPPED
        self.position = 0
        self.reset_count += 1

    def set_source(self, source: int) -> None:
        self.source = Source(source)

    def set_volume(self, volume: int) -> None:
        self.volume = volume

    def play_file_by_index_number(self, track: int) -> None:
        self.last_track = track
        self.state = Status.PLAYING
        self.position = 0

    def get_status(self) -> Status:
        return self.state

    def current_file_position_in_seconds(self) -> int:
        return self.position


class AudioPlayer:
    """Plays sound effects; without a device every call is silently a no-op."""

    def __init__(
        self,
        device: MP3Device | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._device = device
        self._sleep = sleep
        self._player: MP3Device | None = None
        self._initialized = False
        self._enabled = False
        self._volume = DEFAULT_VOLUME
        self._source = Source.BUILTIN

    @property
    def _active(self) -> bool:
        return self._initialized and self._enabled and self._player is not None

    def begin(self) -> bool:
        """Bring up the module; always reports success."""
        if self._device is None:
            self._initialized = True
            return True
        self._sleep(0.5)
        self._player = self._device
        self.reset()
        self._sleep(0.5)
        self.set_source(Source.BUILTIN)
        self._sleep(0.1)
        self._player.set_volume(self._volume)
        self._enabled = True
        self._initialized = True
        return True

    def set_volume(self, volume: int) -> None:
        """Set the volume, clamped to 0..30; ignored before ``begin``."""
        if not self._initialized:
            return
        self._volume = max(0, min(MAX_VOLUME, int(volume)))
        if self._active:
            self._player.set_volume(self._volume)

    def play_track(self, track: int) -> None:
        if self._active:
            self._player.play_file_by_index_number(int(track))

    def reset(self) -> None:
        if self._player is not None:
            self._player.reset()

    def status(self) -> Status:
        if not self._active:
            return Status.STOPPED
        return Status(self._player.get_status())

    def volume(self) -> int:
        """Return the cached volume, or 0 when audio is not running."""
        return self._volume if self._active else 0

    def current_position(self) -> int:
        if not self._active:
            return 0
        return self._player.current_file_position_in_seconds()

    def set_source(self, source: int) -> None:
        """Select built-in flash or SD card; other values are ignored."""
        if not self._active:
            return
        try:
            chosen = Source(source)
        except ValueError:
            return
        self._source = chosen
        self._player.set_source(chosen)

    def source(self) -> Source:
        """Return the last source selected, tracked locally."""
        return self._source