from .player_menu import PlayerMenuView
from .playlist import PlaylistView

__all__ = ["PlayerMenuView", "PlaylistView"]
