from textual.widgets import Static
from textual.reactive import reactive
from rich.text import Text

from services.config import Config

LYRA_ASCII = r"""
    __                
   / /_  ___________ _
  / / / / / ___/ __ `/
 / / /_/ / /  / /_/ / 
/_/\__, /_/   \__,_/  
  /____/              
"""

TAGLINE = "An LMS Playlist Viewer for the Terminal"


class Banner(Static):
    """Logo above the player list; shrinks to a one-word title on short terminals."""

    compact: reactive[bool] = reactive(False)

    def __init__(self, config: Config, **kwargs):
        super().__init__(**kwargs)
        self.config = config

    def on_mount(self) -> None:
        self.update(self._render_banner())

    def _render_banner(self) -> Text:
        style = f"{self.config.style('Banner')} bold"
        logo = "\nlyra\n" if self.compact else LYRA_ASCII
        result = Text(justify="center")
        result.append(logo, style=style)
        result.append(f"\n{TAGLINE}\n", style=style)
        return result

    def watch_compact(self, new_value: bool) -> None:
        self.update(self._render_banner())
