from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Static

from services.config import Config
from services.sync_engine import SyncEngine
from widgets.banner import Banner
from widgets.player_list import PlayerList

VERSION = "1.0.0"
FULL_BANNER_MIN_HEIGHT = 16


class PlayerMenuView(Vertical):
    """Banner, connected player list and credits."""

    DEFAULT_CSS = """
    PlayerMenuView {
        align-horizontal: center;
    }

    PlayerMenuView > Banner {
        height: auto;
        width: 100%;
    }

    PlayerMenuView #player-list-container {
        height: 1fr;
        width: 40%;
        border: round $accent;
        border-title-align: center;
    }

    PlayerMenuView #player-menu-footer {
        height: auto;
        width: 100%;
        text-align: center;
    }
    """

    def __init__(self, engine: SyncEngine, config: Config, **kwargs):
        super().__init__(**kwargs)
        self.engine = engine
        self.config = config

    def compose(self) -> ComposeResult:
        yield Banner(self.config, id="banner")
        with Container(id="player-list-container") as container:
            container.border_title = "Players"
            yield PlayerList(id="player-list")
        yield Static(f"lyra v{VERSION}", id="player-menu-footer")

    def on_resize(self) -> None:
        self.query_one(Banner).compact = self.size.height < FULL_BANNER_MIN_HEIGHT
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw from the engine's current player list and cursor."""
        self.query_one(PlayerList).show(self.engine.players, self.engine.cursor.clamped())
