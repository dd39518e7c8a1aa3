from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import EnumDecodeError


class RepeatMode(Enum):
    """Playlist repeat setting, with the indicator shown in the status header."""
    NONE = "-"
    TRACK = "r"
    PLAYLIST = "R"

    @classmethod
    def from_code(cls, code: int) -> RepeatMode:
        """Map the server's numeric code. Unknown codes mean no repeat."""
        return _REPEAT_CODES.get(code, cls.NONE)


class ShuffleMode(Enum):
    """Playlist shuffle setting, with the indicator shown in the status header."""
    NONE = "-"
    TRACK = "z"
    ALBUM = "Z"

    @classmethod
    def from_code(cls, code: int) -> ShuffleMode:
        """Map the server's numeric code. Unknown codes mean no shuffle."""
        return _SHUFFLE_CODES.get(code, cls.NONE)


class PlayMode(Enum):
    """Transport state of a player."""
    STOPPED = "stop"
    PLAYING = "play"
    PAUSED = "pause"

    @classmethod
    def from_code(cls, code: str) -> PlayMode:
        """Map the server's mode string.

        Raises:
            EnumDecodeError: If the string is not one of "play", "stop" or "pause".
        """
        try:
            return cls(code)
        except ValueError:
            raise EnumDecodeError("PlayMode", code) from None

    @property
    def label(self) -> str:
        return _PLAY_MODE_LABELS[self]


_REPEAT_CODES = {
    0: RepeatMode.NONE,
    1: RepeatMode.TRACK,
    2: RepeatMode.PLAYLIST,
}

_SHUFFLE_CODES = {
    0: ShuffleMode.NONE,
    1: ShuffleMode.TRACK,
    2: ShuffleMode.ALBUM,
}

_PLAY_MODE_LABELS = {
    PlayMode.STOPPED: "STOPPED",
    PlayMode.PLAYING: "PLAYING",
    PlayMode.PAUSED: "PAUSED",
}


@dataclass(frozen=True)
class Status:
    """Playback status of the observed player, rebuilt on every tick.

    Attributes:
        player_name: Display name reported by the server
        current_index: Index of the current song in the playlist
        repeat: Playlist repeat mode
        shuffle: Playlist shuffle mode
        mode: Play/pause/stop state
        total_tracks: Number of songs in the playlist
        elapsed: Seconds into the current song, 0 when stopped or empty
    """
    player_name: str
    current_index: int
    repeat: RepeatMode
    shuffle: ShuffleMode
    mode: PlayMode
    total_tracks: int
    elapsed: float

    @property
    def is_empty(self) -> bool:
        return self.total_tracks == 0
