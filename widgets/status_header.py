from textual.widgets import Static
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from models.status import PlayMode, RepeatMode, ShuffleMode, Status
from models.track import Playlist, format_time
from services.config import Config
from styles import COLOR_TEXT

CENTER_MIN_WIDTH = 50

_MODE_ROLES = {
    PlayMode.STOPPED: "StoppedIndicator",
    PlayMode.PLAYING: "PlayingIndicator",
    PlayMode.PAUSED: "PausedIndicator",
}


def construct_bar(width: int) -> str:
    """Horizontal rule with tees at both ends."""
    if width < 2:
        return "─" * max(width, 0)
    return "├" + "─" * (width - 2) + "┤"


class StatusHeader(Static):
    """Player name, playlist summary and mode indicators above the playlist."""

    def __init__(self, config: Config, **kwargs):
        super().__init__(**kwargs)
        self.config = config

    def show(self, status: Status | None, playlist: Playlist | None, width: int) -> None:
        if status is None:
            self.update("")
            return
        self.update(self._render_header(status, playlist, width))

    def _render_header(self, status: Status, playlist: Playlist | None, width: int) -> RenderableType:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left", ratio=1)
        if width > CENTER_MIN_WIDTH:
            grid.add_column(justify="center", ratio=1)
        grid.add_column(justify="right", ratio=1)

        left = Text.assemble(
            ("Player: ", "bold"),
            (status.player_name, self.config.style("PlayerName")),
        )

        repeat_style = COLOR_TEXT if status.repeat is RepeatMode.NONE else self.config.style("RepeatIndicator")
        shuffle_style = COLOR_TEXT if status.shuffle is ShuffleMode.NONE else self.config.style("ShuffleIndicator")
        right = Text.assemble(
            (status.mode.label, f"{self.config.style(_MODE_ROLES[status.mode])} bold"),
            " | [",
            (status.repeat.value, f"{repeat_style} bold"),
            (status.shuffle.value, f"{shuffle_style} bold"),
            "]",
        )

        if width > CENTER_MIN_WIDTH:
            total = playlist.total_duration if playlist is not None else 0.0
            center = Text.assemble(
                (f"{status.total_tracks} Tracks", "bold"),
                " | ",
                (format_time(total), "bold"),
            )
            grid.add_row(left, center, right)
        else:
            grid.add_row(left, right)

        return Group(grid, Text(construct_bar(width)))
