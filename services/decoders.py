"""
Decoders from LMS responses to domain values.

The server is inconsistent about numbers: the same field can arrive as a
JSON number on one tick and as a numeric string on the next (``"1"`` for
``playlist_cur_index`` is common). Each numeric decoder tries the native
type first and only on a type mismatch parses the string form. A missing
field is never retried, and a string that does not parse is an error.
"""

from __future__ import annotations

import dataclasses
import logging
import math

from models.errors import FieldTypeMismatch, InvalidStatus
from models.player import Player
from models.status import PlayMode, RepeatMode, ShuffleMode, Status
from models.track import Playlist, Song
from services.lms_response import LmsResponse

logger = logging.getLogger(__name__)


def _string_fallback(response: LmsResponse, key: str, mismatch: FieldTypeMismatch) -> str:
    try:
        return response.get_str(key).strip()
    except FieldTypeMismatch:
        raise mismatch from None


def _parse_int_text(key: str, text: str, kind: str) -> int:
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise FieldTypeMismatch(key, kind, text)
    return int(text)


def decode_int(response: LmsResponse, key: str) -> int:
    """Decode an integer sent either as a JSON number or a numeric string."""
    try:
        return response.get_int(key)
    except FieldTypeMismatch as mismatch:
        text = _string_fallback(response, key, mismatch)
        return _parse_int_text(key, text, "int")


def decode_uint(response: LmsResponse, key: str) -> int:
    """Decode a non-negative integer sent either as a JSON number or a numeric string."""
    try:
        return response.get_uint(key)
    except FieldTypeMismatch as mismatch:
        text = _string_fallback(response, key, mismatch)
        if text.startswith("-"):
            raise FieldTypeMismatch(key, "uint", text) from None
        return _parse_int_text(key, text, "uint")


def decode_float(response: LmsResponse, key: str) -> float:
    """Decode a float sent either as a JSON number or a numeric string."""
    try:
        return response.get_float(key)
    except FieldTypeMismatch as mismatch:
        text = _string_fallback(response, key, mismatch)
        try:
            value = float(text)
        except ValueError:
            raise FieldTypeMismatch(key, "float", text) from None
        if not math.isfinite(value):
            raise FieldTypeMismatch(key, "float", text)
        return value


def decode_players(response: LmsResponse) -> tuple[Player, ...]:
    """Decode the player list of a ``serverstatus`` response.

    The server leaves out ``players_loop`` entirely when no player is connected.
    """
    if decode_uint(response, "player count") == 0:
        return ()

    return tuple(
        Player(name=record.get_str("name"), id=record.get_str("playerid"))
        for record in response.get_records("players_loop")
    )


def decode_song(record: LmsResponse) -> Song:
    """Decode one entry of ``playlist_loop``.

    Artist and album tags are omitted by the server when a track has none.
    """
    return Song(
        playlist_index=decode_uint(record, "playlist index"),
        title=record.get_str("title"),
        artist=record.get_str("artist") if "artist" in record else "",
        album=record.get_str("album") if "album" in record else "",
        duration=decode_float(record, "duration"),
    )


def decode_playlist(response: LmsResponse) -> Playlist:
    """Decode the songs of a tagged ``status`` response."""
    if decode_uint(response, "playlist_tracks") == 0:
        return Playlist()

    return Playlist(tuple(decode_song(record) for record in response.get_records("playlist_loop")))


def decode_status(response: LmsResponse) -> Status:
    """Decode a ``status`` response into a Status with no elapsed time yet.

    Raises:
        FieldMissing: If a required field is absent.
        FieldTypeMismatch: If a field has an unusable value.
        EnumDecodeError: If ``mode`` is not a known play mode.
        InvalidStatus: If the current index is outside the playlist.
    """
    player_name = response.get_str("player_name")
    total_tracks = decode_uint(response, "playlist_tracks")

    if total_tracks == 0:
        current_index = 0
    else:
        current_index = decode_uint(response, "playlist_cur_index")
        if current_index >= total_tracks:
            raise InvalidStatus(
                f"playlist_cur_index {current_index} is outside a playlist of {total_tracks} tracks"
            )

    return Status(
        player_name=player_name,
        current_index=current_index,
        repeat=RepeatMode.from_code(decode_int(response, "playlist repeat")),
        shuffle=ShuffleMode.from_code(decode_int(response, "playlist shuffle")),
        mode=PlayMode.from_code(response.get_str("mode")),
        total_tracks=total_tracks,
        elapsed=0.0,
    )


def with_elapsed(status: Status, elapsed: float) -> Status:
    """Return status with its elapsed time, zeroed when stopped or empty."""
    if status.mode is PlayMode.STOPPED or status.total_tracks == 0:
        elapsed = 0.0
    return dataclasses.replace(status, elapsed=elapsed)
