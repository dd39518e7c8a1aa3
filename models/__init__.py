from .errors import (
    LyraError,
    TransportError,
    ResponseDecodeError,
    FieldMissing,
    FieldTypeMismatch,
    EnumDecodeError,
    InvalidStatus,
)
from .player import Player
from .track import Song, Playlist, format_time
from .status import Status, RepeatMode, ShuffleMode, PlayMode

__all__ = [
    "LyraError",
    "TransportError",
    "ResponseDecodeError",
    "FieldMissing",
    "FieldTypeMismatch",
    "EnumDecodeError",
    "InvalidStatus",
    "Player",
    "Song",
    "Playlist",
    "format_time",
    "Status",
    "RepeatMode",
    "ShuffleMode",
    "PlayMode",
]
