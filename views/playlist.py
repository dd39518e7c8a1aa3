from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static
from rich.text import Text

from models.track import Playlist
from services.config import Config
from services.sync_engine import SyncEngine
from services.track_layout import MIN_LAYOUT_WIDTH, index_digits_for, layout_track, window_start
from styles import HIGHLIGHT_STYLE
from widgets.playbar import Playbar
from widgets.status_header import StatusHeader


class PlaylistRows(Static):
    """Songs of the observed player's playlist; the current song is highlighted."""

    def __init__(self, config: Config, **kwargs):
        super().__init__(**kwargs)
        self.config = config
        self._start = 0

    def show(self, playlist: Playlist | None, highlighted: int | None) -> None:
        width = self.content_size.width
        height = self.content_size.height
        if playlist is None or width < MIN_LAYOUT_WIDTH or height <= 0:
            self.update("")
            return

        self._start = window_start(highlighted, len(playlist), height, self._start)
        long_durations = playlist.has_long_tracks
        digits = index_digits_for(len(playlist))

        result = Text(no_wrap=True, overflow="crop")
        for position in range(self._start, min(len(playlist), self._start + height)):
            row = layout_track(width, playlist[position], long_durations, digits)
            line = Text.assemble(*((s.text, self.config.style(s.role)) for s in row.segments))
            if position == highlighted:
                line.stylize(HIGHLIGHT_STYLE)
            if position > self._start:
                result.append("\n")
            result.append_text(line)
        self.update(result)


class PlaylistView(Vertical):
    """Status header, playlist and playbar for the observed player."""

    DEFAULT_CSS = """
    PlaylistView > StatusHeader {
        height: 2;
    }

    PlaylistView > PlaylistRows {
        height: 1fr;
    }

    PlaylistView > Playbar {
        height: 4;
    }
    """

    def __init__(self, engine: SyncEngine, config: Config, **kwargs):
        super().__init__(**kwargs)
        self.engine = engine
        self.config = config

    def compose(self) -> ComposeResult:
        yield StatusHeader(self.config, id="status-header")
        yield PlaylistRows(self.config, id="playlist-rows")
        yield Playbar(self.config, id="playbar")

    def on_resize(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw from the engine's committed snapshot."""
        snapshot = self.engine.snapshot
        width = self.size.width

        self.query_one(StatusHeader).show(snapshot.status, snapshot.playlist, width)
        self.query_one(PlaylistRows).show(snapshot.playlist, self.engine.playlist_row)
        self.query_one(Playbar).show(snapshot.status, snapshot.current_song, width)
