from textual.widgets import Static
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from models.status import Status
from models.track import Song, format_time
from services.config import Config
from services.track_layout import shorten
from widgets.status_header import construct_bar

# "Now Playing: " plus the (elapsed/duration) block on the right
NOW_PLAYING_RESERVED = 33


class Playbar(Static):
    """Progress gauge and now-playing line under the playlist."""

    def __init__(self, config: Config, **kwargs):
        super().__init__(**kwargs)
        self.config = config

    def show(self, status: Status | None, song: Song | None, width: int) -> None:
        if status is None:
            self.update("")
            return
        self.update(self._render_playbar(status, song, width))

    def _render_playbar(self, status: Status, song: Song | None, width: int) -> RenderableType:
        duration = song.duration if song is not None else 0.0
        elapsed = status.elapsed

        gauge = Padding(
            ProgressBar(
                total=duration if duration > 0 else 1.0,
                completed=max(0.0, min(elapsed, duration)),
                width=max(width - 2, 1),
                complete_style=self.config.style("PlaybarGauge"),
                finished_style=self.config.style("PlaybarGauge"),
            ),
            (0, 1),
        )

        info = Table.grid(expand=True)
        info.add_column(justify="left", ratio=1)
        info.add_column(justify="right")

        left = Text()
        if width > NOW_PLAYING_RESERVED:
            if song is not None:
                now_playing = f"{song.title} - {song.artist}"
            else:
                now_playing = "N/A"
            left.append("Now Playing: ", style="bold")
            left.append(shorten(now_playing, width - NOW_PLAYING_RESERVED, marker="..."))
        right = Text(f"({format_time(elapsed)}/{format_time(duration)})")
        info.add_row(left, right)

        bar = Text(construct_bar(width))
        return Group(bar, gauge, bar, info)
