from textual.app import App, ComposeResult
from textual.widgets import Footer, ContentSwitcher
from textual.binding import Binding
from textual.css.query import NoMatches
import asyncio
import logging
import sys
from pathlib import Path

from models.errors import TransportError
from services.config import Config, ConfigError, load_config
from services.lms_client import LmsClient
from services.sync_engine import AppState, Gateway, SyncEngine
from views import PlayerMenuView, PlaylistView
from widgets import HelpScreen

MIN_TERMINAL_WIDTH = 20
MIN_TERMINAL_HEIGHT = 9

log_dir = Path.home() / '.local' / 'share' / 'lyra'
log_dir.mkdir(parents=True, exist_ok=True)
log_file = log_dir / 'lyra.log'

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_file)
    ]
)

logger = logging.getLogger(__name__)

# Actions that only make sense in one state; the footer hides the others.
STATE_ACTIONS = {
    "confirm": AppState.SELECTING_PLAYER,
    "move_down": AppState.SELECTING_PLAYER,
    "move_up": AppState.SELECTING_PLAYER,
    "jump_top": AppState.SELECTING_PLAYER,
    "jump_bottom": AppState.SELECTING_PLAYER,
    "escape_quit": AppState.SELECTING_PLAYER,
    "back_to_players": AppState.OBSERVING,
}


class LyraApp(App):
    """Terminal viewer for the players and playlists of a Logitech Media Server."""
    
    CSS_PATH = "styles/app.tcss"
    
    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("escape", "escape_quit", "Quit", show=False),
        Binding("enter", "confirm", "Select"),
        Binding("space", "confirm", "Select", show=False),
        Binding("j", "move_down", "Down"),
        Binding("down", "move_down", "Down", show=False),
        Binding("k", "move_up", "Up"),
        Binding("up", "move_up", "Up", show=False),
        Binding("g", "jump_top", "Top"),
        Binding("home", "jump_top", "Top", show=False),
        Binding("G", "jump_bottom", "Bottom"),
        Binding("end", "jump_bottom", "Bottom", show=False),
        Binding("p", "back_to_players", "Players"),
        Binding("?", "show_help", "Help"),
    ]
    
    def __init__(self, config: Config, client: Gateway | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        
        self.config = config
        self.client = client or LmsClient(
            config.lms_ip,
            config.lms_port,
            timeout=config.request_timeout,
        )
        self.engine = SyncEngine(self.client)
        self._connection_lost = False
        logger.info(f"Starting lyra for server {config.server}")
    
    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        with ContentSwitcher(id="view-switcher", initial="player-menu"):
            yield PlayerMenuView(self.engine, self.config, id="player-menu")
            yield PlaylistView(self.engine, self.config, id="playlist-view")
        
        yield Footer()
    
    async def on_mount(self) -> None:
        """Fetch the player list once before polling starts.
        
        A server that cannot be reached at startup is reported and ends the app.
        """
        try:
            await self.engine.tick()
        except TransportError as e:
            logger.critical(f"Cannot reach LMS at {self.config.server}: {e}")
            self.exit(
                return_code=1,
                message=f"Could not connect to LMS at {self.config.server}: {e}",
            )
            return
        
        self._refresh_views()
        self.run_worker(self._poll, exclusive=True, group="poll")
    
    async def on_unmount(self) -> None:
        close = getattr(self.client, "aclose", None)
        if close is not None:
            await close()
    
    async def _poll(self) -> None:
        """Poll the server until quit; a slow tick delays the next one."""
        while not self.engine.quit:
            await asyncio.sleep(self.config.poll_interval)
            if self.engine.quit:
                break
            try:
                await self.engine.tick()
            except TransportError as e:
                self._report_transport_error(e)
            else:
                self._report_recovered()
            self._refresh_views()
    
    def _report_transport_error(self, error: TransportError) -> None:
        if not self._connection_lost:
            self._connection_lost = True
            self.notify(f"❌ {error}", severity="error", timeout=5)
    
    def _report_recovered(self) -> None:
        if self._connection_lost:
            self._connection_lost = False
            logger.info("Connection to LMS restored")
            self.notify("✓ Connection restored", severity="information", timeout=3)
    
    def _refresh_views(self) -> None:
        """Show the view for the engine's state and redraw it from the committed snapshot."""
        switcher = self.query_one("#view-switcher", ContentSwitcher)
        too_small = self.size.width < MIN_TERMINAL_WIDTH or self.size.height < MIN_TERMINAL_HEIGHT
        switcher.display = not too_small
        
        if self.engine.state is AppState.OBSERVING:
            switcher.current = "playlist-view"
            self.query_one(PlaylistView).refresh_view()
        else:
            switcher.current = "player-menu"
            self.query_one(PlayerMenuView).refresh_view()
        self.refresh_bindings()
    
    def on_resize(self) -> None:
        try:
            self._refresh_views()
        except NoMatches:
            pass
    
    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Only enable the keys of the current view."""
        wanted = STATE_ACTIONS.get(action)
        if wanted is not None and wanted is not self.engine.state:
            return False
        return True
    
    def action_quit(self) -> None:
        """Handle quit action for clean shutdown."""
        self.engine.quit = True
        self.exit()
    
    def action_escape_quit(self) -> None:
        self.action_quit()
    
    async def action_confirm(self) -> None:
        """Start watching the highlighted player."""
        try:
            await self.engine.select_player()
        except TransportError as e:
            logger.error(f"First refresh after selecting a player failed: {e}")
            self._report_transport_error(e)
        self._refresh_views()
    
    async def action_back_to_players(self) -> None:
        """Return to the player list."""
        try:
            await self.engine.back_to_player_selection()
        except TransportError as e:
            logger.error(f"Could not refresh player list: {e}")
            self._report_transport_error(e)
        self._refresh_views()
    
    def action_move_down(self) -> None:
        self.engine.move_down()
        self._refresh_views()
    
    def action_move_up(self) -> None:
        self.engine.move_up()
        self._refresh_views()
    
    def action_jump_top(self) -> None:
        self.engine.jump_top()
        self._refresh_views()
    
    def action_jump_bottom(self) -> None:
        self.engine.jump_bottom()
        self._refresh_views()
    
    def action_show_help(self) -> None:
        """Show help screen for the current view."""
        view_type = "playlist" if self.engine.state is AppState.OBSERVING else "players"
        self.push_screen(HelpScreen(view_type=view_type))


def main():
    """Entry point for lyra.
    
    Handles configuration and connection errors with user-friendly messages.
    """
    try:
        config = load_config()
    except ConfigError as e:
        logger.critical(f"Invalid configuration: {e}")
        print(f"\n❌ lyra cannot start\n\n{e}\n")
        sys.exit(1)
    
    try:
        logger.info("=" * 60)
        logger.info("lyra starting up")
        logger.info("=" * 60)
        
        app = LyraApp(config)
        app.run()
        
        logger.info(f"lyra shut down with code {app.return_code}")
        
    except KeyboardInterrupt:
        logger.info("lyra interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.critical(f"Unexpected fatal error: {type(e).__name__}: {e}", exc_info=True)
        print("\n❌ lyra encountered an unexpected error\n")
        print(f"{type(e).__name__}: {e}\n")
        print(f"Check {log_file} for more details.\n")
        sys.exit(1)
    
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
