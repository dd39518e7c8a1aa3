from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Song:
    """One slot of a player's playlist."""
    playlist_index: int
    title: str
    artist: str
    album: str
    duration: float  # seconds


@dataclass(frozen=True)
class Playlist:
    """Ordered songs of one snapshot. Indices are only meaningful within that snapshot."""
    songs: tuple[Song, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.songs)

    def __iter__(self):
        return iter(self.songs)

    def __getitem__(self, index: int) -> Song:
        return self.songs[index]

    @property
    def total_duration(self) -> float:
        return sum(song.duration for song in self.songs)

    @property
    def has_long_tracks(self) -> bool:
        """True when any song lasts an hour or more."""
        return any(song.duration >= 3600 for song in self.songs)

    def song_at(self, index: int) -> Song | None:
        if 0 <= index < len(self.songs):
            return self.songs[index]
        return None


def format_time(seconds: float, full_width: bool = False) -> str:
    """Format seconds as M:SS or H:MM:SS.

    Args:
        seconds: Duration in seconds. Fractions are truncated.
        full_width: Pad the leading field to two columns so values line up.

    Returns:
        Formatted time string.
    """
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)

    if minutes >= 60:
        hours, minutes = divmod(minutes, 60)
        if full_width:
            return f"{hours:2d}:{minutes:02d}:{secs:02d}"
        return f"{hours}:{minutes:02d}:{secs:02d}"

    if full_width:
        return f"{minutes:2d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
