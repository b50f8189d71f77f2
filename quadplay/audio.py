"""Loading sounds and tracking their playback."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


class FileError(OSError):
    """A sound file could not be read."""


@dataclass(frozen=True)
class PlaySoundParams:
    """How a sound is played."""

    looped: bool = False
    volume: float = 1.0


@dataclass(frozen=True)
class Sound:
    """Handle of a sound loaded into an :class:`AudioContext`."""

    id: int


@dataclass
class SoundState:
    """Data and playback state of a loaded sound."""

    data: bytes
    playing: bool = False
    looped: bool = False
    volume: float = 1.0


class AudioContext:
    """Registry of loaded sounds and their playback state."""

    def __init__(self) -> None:
        self._sounds: dict[int, SoundState] = {}
        self._next_id = 0

    def load_sound_from_bytes(self, data: bytes) -> Sound:
        """Register audio data and return its handle."""
        sound = Sound(self._next_id)
        self._sounds[sound.id] = SoundState(bytes(data))
        self._next_id += 1
        return sound

    def load_sound(self, path: Union[str, Path]) -> Sound:
        """Read an audio file and register it."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise FileError(f"cannot load sound {path}: {exc}") from exc
        return self.load_sound_from_bytes(data)

    def sound_state(self, sound: Sound) -> SoundState:
        """State of a loaded sound; unknown handles raise KeyError."""
        try:
            return self._sounds[sound.id]
        except KeyError:
            raise KeyError(f"unknown sound {sound.id}") from None

    def play_sound_once(self, sound: Sound) -> None:
        self.play_sound(sound, PlaySoundParams(looped=False, volume=1.0))

    def play_sound(self, sound: Sound, params: PlaySoundParams) -> None:
        state = self.sound_state(sound)
        state.playing = True
        state.looped = params.looped
        state.volume = params.volume

    def stop_sound(self, sound: Sound) -> None:
        self.sound_state(sound).playing = False

    def set_sound_volume(self, sound: Sound, volume: float) -> None:
        self.sound_state(sound).volume = volume