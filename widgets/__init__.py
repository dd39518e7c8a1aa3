from .banner import Banner
from .player_list import PlayerList
from .status_header import StatusHeader
from .playbar import Playbar
from .help_screen import HelpScreen

__all__ = [
    "Banner",
    "PlayerList",
    "StatusHeader",
    "Playbar",
    "HelpScreen",
]
