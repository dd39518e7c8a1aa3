from __future__ import annotations

from typing import Any

import pytest

from models.errors import TransportError
from services.lms_response import LmsResponse


class FakeGateway:
    """In-memory stand-in for LmsClient.

    Responses are keyed by (scope, command) where command is the first
    element of the args, plus "status+tags" for the tagged status query.
    A value may be a dict (the ``result``) or an exception to raise.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], Any] = {}
        self.calls: list[tuple[str, list[Any]]] = []

    def set(self, scope: str, command: str, result: Any) -> None:
        self.responses[(scope, command)] = result

    async def query(self, scope: str, args: list[Any]) -> LmsResponse:
        self.calls.append((scope, list(args)))
        command = args[0]
        if command == "status" and any(str(a).startswith("tags:") for a in args):
            command = "status+tags"

        try:
            result = self.responses[(scope, command)]
        except KeyError:
            raise TransportError(f"no canned response for {scope} {command}") from None

        if isinstance(result, Exception):
            raise result
        return LmsResponse(result)

    def commands(self) -> list[str]:
        return [args[0] for _, args in self.calls]


def serverstatus(*players: tuple[str, str]) -> dict:
    result: dict[str, Any] = {"player count": len(players)}
    if players:
        result["players_loop"] = [{"playerid": pid, "name": name} for pid, name in players]
    return result


def status_result(
    total: Any = 3,
    index: Any = "1",
    repeat: Any = 1,
    shuffle: Any = 0,
    mode: str = "play",
    name: str = "Kitchen",
) -> dict:
    result = {
        "player_name": name,
        "playlist_tracks": total,
        "playlist repeat": repeat,
        "playlist shuffle": shuffle,
        "mode": mode,
    }
    if index is not None:
        result["playlist_cur_index"] = index
    return result


def playlist_result(*songs: dict) -> dict:
    result: dict[str, Any] = {"playlist_tracks": len(songs)}
    if songs:
        result["playlist_loop"] = list(songs)
    return result


def song(index: int, title: str = "Song", artist: str = "Artist", album: str = "Album", duration: Any = 200.0) -> dict:
    return {
        "playlist index": index,
        "title": title,
        "artist": artist,
        "album": album,
        "duration": duration,
    }


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def kitchen(gateway: FakeGateway) -> FakeGateway:
    """Server with one player, p1 "Kitchen", playing song 2 of 3."""
    gateway.set("-", "serverstatus", serverstatus(("p1", "Kitchen")))
    gateway.set("p1", "status", status_result())
    gateway.set("p1", "time", {"_time": 42.5})
    gateway.set("p1", "status+tags", playlist_result(
        song(0, "One", duration=180.0),
        song(1, "Two", duration=240.0),
        song(2, "Three", duration=300.0),
    ))
    return gateway
