import pytest

from rfidgate.audio import AudioPlayer, MP3Device, Sound, Source, Status


@pytest.fixture
def device():
    return MP3Device()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def audio(device, sleeps):
    return AudioPlayer(device, sleep=sleeps.append)


def test_audio_initialization(audio, sleeps, device):
    assert audio.begin() is True
    assert sleeps == [0.5, 0.5, 0.1]
    assert device.volume == 20


def test_audio_volume_control(audio, device):
    audio.begin()
    audio.set_volume(15)
    assert audio.volume() == 15
    assert device.volume == 15
    audio.set_volume(50)
    assert audio.volume() == 30
    audio.set_volume(-5)
    assert audio.volume() == 0


def test_volume_ignored_before_begin(audio, device):
    audio.set_volume(10)
    assert audio.volume() == 0
    assert device.volume == 20


@pytest.mark.parametrize("sound", list(Sound))
def test_audio_play_tracks(audio, device, sound):
    audio.begin()
    audio.play_track(sound)
    assert device.last_track == sound


def test_play_before_initialization(audio, device):
    audio.play_track(1)
    assert device.last_track is None


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "STARTUP"),
        (2, "WAITING"),
        (3, "ACCEPTED"),
        (4, "DENIED_1"),
        (5, "DENIED_2"),
        (6, "DENIED_3"),
    ],
)
def test_audio_track_constants(value, expected):
    assert Sound(value).name == expected


def test_sound_rejects_unknown_track():
    with pytest.raises(ValueError):
        Sound(7)


def test_audio_reset(audio, device):
    audio.begin()
    assert device.reset_count == 1
    audio.reset()
    assert device.reset_count == 2


def test_reset_before_begin_does_nothing(audio, device):
    audio.reset()
    assert device.reset_count == 0


def test_audio_status_monitoring(audio, device):
    audio.begin()
    assert audio.status() == Status.STOPPED
    audio.play_track(Sound.STARTUP)
    assert audio.status() == Status.PLAYING
    audio.set_volume(25)
    assert audio.volume() == 25
    assert audio.current_position() == 0
    device.position = 10
    assert audio.current_position() == 10


def test_audio_source_control(audio, device):
    audio.begin()
    assert audio.source() == Source.BUILTIN
    audio.set_source(Source.SDCARD)
    assert audio.source() == Source.SDCARD
    assert device.source == Source.SDCARD
    audio.set_source(Source.BUILTIN)
    assert audio.source() == Source.BUILTIN
    assert device.source == Source.BUILTIN


def test_invalid_source_ignored(audio, device):
    audio.begin()
    audio.set_source(Source.SDCARD)
    audio.set_source(7)
    assert audio.source() == Source.SDCARD
    assert device.source == Source.SDCARD


def test_audio_source_builtin_on_init():
    player = AudioPlayer(MP3Device(), sleep=lambda _s: None)
    assert player.begin() is True
    assert player.source() == Source.BUILTIN


def test_without_device_everything_is_idle():
    player = AudioPlayer(sleep=lambda _s: None)
    assert player.begin() is True
    player.play_track(Sound.ACCEPTED)
    player.set_volume(10)
    player.set_source(Source.SDCARD)
    assert player.status() == Status.STOPPED
    assert player.volume() == 0
    assert player.current_position() == 0
    assert player.source() == Source.BUILTIN