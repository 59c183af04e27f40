"""Loading sounds and keeping track of their playback settings.

The context records what each sound was asked to do (play, loop, volume,
stop); actual output is left to whatever backend consumes that state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


class FileError(OSError):
    """A sound file could not be read."""


@dataclass(frozen=True)
class PlaySoundParams:
    looped: bool = False
    volume: float = 1.0


@dataclass(frozen=True)
class Sound:
    """Handle to a sound loaded into an AudioContext."""

    id: int


@dataclass
class _SoundState:
    data: bytes
    format: Optional[str]
    playing: bool = False
    looped: bool = False
    volume: float = 1.0


def _detect_format(data: bytes) -> Optional[str]:
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WAVE":
        return "wav"
    if data[:4] == b"OggS":
        return "ogg"
    if data[:3] == b"ID3" or (len(data) >= 2 and data[0] == 0xFF and data[1] & 0xE0 == 0xE0):
        return "mp3"
    return None


class AudioContext:
    """Registry of loaded sounds and their playback state."""

    def __init__(self) -> None:
        self._sounds: dict[int, _SoundState] = {}
        self._next_id = 0

    def _state(self, sound: Sound) -> _SoundState:
        try:
            return self._sounds[sound.id]
        except KeyError:
            raise KeyError(f"unknown sound {sound.id}") from None

    def load_sound(self, path: Union[str, Path]) -> Sound:
        """Read an audio file and register it."""
        try:
            data = Path(path).read_bytes()
        except OSError as err:
            raise FileError(f"cannot read sound file {path}: {err}") from err
        return self.load_sound_from_bytes(data)

    def load_sound_from_bytes(self, data: bytes) -> Sound:
        """Register audio data, detecting its format from the header."""
        sound = Sound(self._next_id)
        self._sounds[sound.id] = _SoundState(bytes(data), _detect_format(data))
        self._next_id += 1
        return sound

    def sound_format(self, sound: Sound) -> Optional[str]:
        """Detected container format: "wav", "ogg", "mp3" or None."""
        return self._state(sound).format

    def play_sound_once(self, sound: Sound) -> None:
        self.play_sound(sound, PlaySoundParams(looped=False, volume=1.0))

    def play_sound(self, sound: Sound, params: PlaySoundParams) -> None:
        state = self._state(sound)
        state.playing = True
        state.looped = params.looped
        state.volume = params.volume

    def stop_sound(self, sound: Sound) -> None:
        self._state(sound).playing = False

    def set_sound_volume(self, sound: Sound, volume: float) -> None:
        self._state(sound).volume = volume

    def volume(self, sound: Sound) -> float:
        return self._state(sound).volume

    def is_looped(self, sound: Sound) -> bool:
        return self._state(sound).looped

    def is_playing(self, sound: Sound) -> bool:
        return self._state(sound).playing