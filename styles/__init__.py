"""Shared style constants for lyra."""

# Role name -> 256-colour palette index. Every role the UI draws must be here.
DEFAULT_COLORS = {
    "Banner": 2,
    "PlayerName": 1,
    "PlayingIndicator": 2,
    "PausedIndicator": 3,
    "StoppedIndicator": 1,
    "RepeatIndicator": 5,
    "ShuffleIndicator": 6,
    "TrackIndex": 5,
    "TrackTitle": 3,
    "TrackArtist": 4,
    "TrackAlbum": 1,
    "TrackDuration": 6,
    "PlaybarGauge": 2,
}

COLOR_TEXT = "white"
HIGHLIGHT_STYLE = "reverse"
