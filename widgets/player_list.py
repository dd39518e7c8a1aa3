from __future__ import annotations

from textual.widgets import Static
from rich.cells import cell_len
from rich.text import Text

from models.player import Player
from services.track_layout import fit_cells, window_start
from styles import HIGHLIGHT_STYLE

NO_PLAYERS_MESSAGE = "There are currently no connected players."


class PlayerList(Static):
    """Connected players with the cursor row highlighted."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._start = 0

    def show(self, players: tuple[Player, ...], selected: int | None) -> None:
        if not players:
            self._start = 0
            self.update(Text(NO_PLAYERS_MESSAGE, style="bold", justify="center"))
            return

        height = self.content_size.height or len(players)
        width = self.content_size.width or max(cell_len(p.name) for p in players)
        self.update(self.rows(players, selected, width, height))

    def rows(self, players: tuple[Player, ...], selected: int | None, width: int, height: int) -> Text:
        """Visible player names, each padded or truncated to ``width`` cells."""
        self._start = window_start(selected, len(players), height, self._start)

        result = Text()
        for index in range(self._start, min(len(players), self._start + height)):
            line = Text(fit_cells(players[index].name, width))
            if index == selected:
                line.stylize(HIGHLIGHT_STYLE)
            if index > self._start:
                result.append("\n")
            result.append_text(line)
        return result
