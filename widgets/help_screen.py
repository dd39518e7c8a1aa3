from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Container, VerticalScroll
from textual.app import ComposeResult


class HelpScreen(ModalScreen[None]):
    """Modal screen listing the keys of the current view."""
    
    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    
    #help-container {
        width: 60;
        height: auto;
        max-height: 90%;
        border: thick $accent;
        padding: 1 2;
    }
    
    #help-scroll {
        width: 100%;
        height: auto;
        margin-bottom: 1;
    }
    
    #help-close-button {
        width: 100%;
    }
    """
    
    def __init__(self, view_type: str = "players") -> None:
        """Initialize help screen.
        
        Args:
            view_type: Either "players" or "playlist" to show the keys of that view.
        """
        super().__init__()
        self.view_type = view_type
    
    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with Container(id="help-container"):
            with VerticalScroll(id="help-scroll"):
                if self.view_type == "playlist":
                    yield self._compose_playlist_help()
                else:
                    yield self._compose_players_help()
            
            yield Button("Close (Esc)", id="help-close-button", variant="primary")
    
    def _compose_players_help(self) -> Static:
        help_text = """[bold]lyra - LMS Playlist Viewer[/bold]

[bold]PLAYER SELECTION[/bold]
  j/Down      Move down (wraps around)
  k/Up        Move up (wraps around)
  g/Home      Jump to first player
  G/End       Jump to last player
  Enter/Space Watch the selected player
  ?           Show this help
  q/Esc       Quit"""
        
        return Static(help_text, id="help-content")
    
    def _compose_playlist_help(self) -> Static:
        help_text = """[bold]lyra - LMS Playlist Viewer[/bold]

[bold]PLAYLIST[/bold]
  p           Back to player selection
  ?           Show this help
  q           Quit

[bold]INDICATORS[/bold]
  r / R       Repeat track / playlist
  z / Z       Shuffle tracks / albums
  -           Off"""
        
        return Static(help_text, id="help-content")
    
    def on_mount(self) -> None:
        """Focus the button when screen mounts."""
        self.call_after_refresh(self._focus_button)
    
    def _focus_button(self) -> None:
        button = self.query_one("#help-close-button", Button)
        button.focus()
    
    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help-close-button":
            self.dismiss()
    
    async def on_key(self, event) -> None:
        if event.key == "escape":
            self.dismiss()
            event.prevent_default()
            event.stop()
