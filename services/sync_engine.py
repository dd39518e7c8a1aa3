"""
Synchronization engine.

Owns the connection to the server, the committed snapshot of what the
observed player is doing, and the selection state that survives between
ticks. Everything the views draw is read from here.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol

from models.errors import ResponseDecodeError, TransportError
from models.player import Player
from models.status import Status
from models.track import Playlist, Song
from services.decoders import (
    decode_float,
    decode_players,
    decode_playlist,
    decode_status,
    with_elapsed,
)
from services.lms_response import LmsResponse
from services.navigation import ListCursor

logger = logging.getLogger(__name__)

# Upper bound for "status" and "serverstatus" windows; large enough for any real playlist.
QUERY_WINDOW = 9999
PLAYLIST_TAGS = "tags:adl"


class Gateway(Protocol):
    async def query(self, scope: str, args: list[Any]) -> LmsResponse: ...


class AppState(Enum):
    """What the user is looking at."""
    SELECTING_PLAYER = "selecting_player"
    OBSERVING = "observing"


@dataclass(frozen=True)
class Snapshot:
    """Everything decoded about the observed player. Replaced, never mutated."""
    status: Status | None = None
    playlist: Playlist | None = None

    @property
    def current_song(self) -> Song | None:
        if self.status is None or self.playlist is None or self.status.is_empty:
            return None
        return self.playlist.song_at(self.status.current_index)


class SyncEngine:
    """Two-state machine polling the server on every tick.

    In SELECTING_PLAYER a tick refreshes the player list. In OBSERVING a tick
    refreshes the status (status + time queries) and then the playlist; the
    two are committed independently so a failure in one keeps the other.
    While the committed status is empty the playlist is empty too and is
    not queried.
    """

    def __init__(self, client: Gateway):
        self.client = client
        self.state = AppState.SELECTING_PLAYER
        self.players: tuple[Player, ...] = ()
        self.cursor = ListCursor()
        self.player: Player | None = None
        self.snapshot = Snapshot()
        self.quit = False
        # Ticks run from the poll worker while transitions run from key handlers.
        self._lock = asyncio.Lock()

    @property
    def highlighted_player(self) -> Player | None:
        """Player under the cursor in the player list."""
        index = self.cursor.clamped()
        if index is None:
            return None
        return self.players[index]

    @property
    def playlist_row(self) -> int | None:
        """Highlighted playlist row; always the current song of the latest status."""
        status = self.snapshot.status
        if status is None or status.is_empty:
            return None
        return status.current_index

    async def tick(self) -> None:
        """Run one polling pass for the current state.

        Raises:
            TransportError: If any request of this pass could not be completed.
        """
        async with self._lock:
            if self.state is AppState.SELECTING_PLAYER:
                await self._refresh_players()
            else:
                await self._refresh_observed()

    async def select_player(self) -> bool:
        """Start observing the highlighted player.

        The status and playlist are refreshed before returning, so the first
        frame drawn in OBSERVING is never left over from another player.

        Returns:
            False if there was no player to select.

        Raises:
            TransportError: If the first refresh failed. The state is still OBSERVING.
        """
        async with self._lock:
            player = self.highlighted_player
            if player is None:
                return False

            logger.info(f"Observing player {player.name} ({player.id})")
            self.player = player
            self.snapshot = Snapshot()
            self.state = AppState.OBSERVING
            await self._refresh_observed()
            return True

    async def back_to_player_selection(self) -> None:
        """Stop observing and re-poll the player list.

        Raises:
            TransportError: If the player list could not be fetched.
        """
        async with self._lock:
            logger.info("Returning to player selection")
            self.state = AppState.SELECTING_PLAYER
            self.player = None
            self.snapshot = Snapshot()
            await self._refresh_players()

    def move_down(self) -> None:
        if self.state is AppState.SELECTING_PLAYER:
            self.cursor.move_down()

    def move_up(self) -> None:
        if self.state is AppState.SELECTING_PLAYER:
            self.cursor.move_up()

    def jump_top(self) -> None:
        if self.state is AppState.SELECTING_PLAYER:
            self.cursor.jump_top()

    def jump_bottom(self) -> None:
        if self.state is AppState.SELECTING_PLAYER:
            self.cursor.jump_bottom()

    async def _refresh_players(self) -> None:
        try:
            response = await self.client.query("-", ["serverstatus", 0, QUERY_WINDOW])
            players = decode_players(response)
        except ResponseDecodeError as e:
            logger.warning(f"Could not decode player list: {e}")
            players = ()

        if players != self.players:
            logger.info(f"Player list changed: {[p.name for p in players]}")
        self.players = players
        self.cursor.resize(len(players))

    async def _refresh_observed(self) -> None:
        player = self.player
        if player is None:
            return

        failures: list[TransportError] = []
        await self._run_step(self._refresh_status, player, failures)

        status = self.snapshot.status
        if status is not None and status.is_empty:
            # An empty status means an empty playlist, whatever the tagged query would say.
            self.snapshot = replace(self.snapshot, playlist=Playlist())
        else:
            await self._run_step(self._refresh_playlist, player, failures)

        if failures:
            raise failures[0]

    async def _run_step(self, step, player: Player, failures: list[TransportError]) -> None:
        try:
            await step(player)
        except ResponseDecodeError as e:
            logger.warning(f"{step.__name__} for {player.id} skipped: {e}")
        except TransportError as e:
            failures.append(e)

    async def _refresh_status(self, player: Player) -> None:
        response = await self.client.query(player.id, ["status", 0, QUERY_WINDOW])
        status = decode_status(response)

        elapsed = 0.0
        if not status.is_empty:
            time_response = await self.client.query(player.id, ["time", "?"])
            elapsed = decode_float(time_response, "_time")

        self.snapshot = replace(self.snapshot, status=with_elapsed(status, elapsed))

    async def _refresh_playlist(self, player: Player) -> None:
        response = await self.client.query(player.id, ["status", 0, QUERY_WINDOW, PLAYLIST_TAGS])
        playlist = decode_playlist(response)
        self.snapshot = replace(self.snapshot, playlist=playlist)
