"""
Column layout for playlist rows.

Pure functions: the same width and song always give the same row. Widths
are measured in terminal cells (``rich.cells``), so East Asian wide glyphs
count as two columns and padding stays aligned.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len, get_character_cell_size

from models.track import Song, format_time

MIN_LAYOUT_WIDTH = 20
RESERVED_COLUMNS = 1
INDEX_DIGITS = 2
SHORT_DURATION_WIDTH = 5  # "MM:SS"
LONG_DURATION_WIDTH = 8  # "HH:MM:SS"
ARTIST_MIN_WIDTH = 50
ALBUM_MIN_WIDTH = 80
ELLIPSIS = "…"


@dataclass(frozen=True)
class Segment:
    """One padded column of a row, tagged with the colour role used to draw it."""
    text: str
    width: int
    role: str


@dataclass(frozen=True)
class ColumnWidths:
    index: int
    title: int
    artist: int  # 0 when the column is omitted
    album: int  # 0 when the column is omitted
    duration: int

    @property
    def total(self) -> int:
        return self.index + self.title + self.artist + self.album + self.duration


@dataclass(frozen=True)
class TrackRow:
    index: Segment
    title: Segment
    artist: Segment | None
    album: Segment | None
    duration: Segment

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Present columns in display order."""
        return tuple(
            s for s in (self.index, self.title, self.artist, self.album, self.duration)
            if s is not None
        )

    @property
    def width(self) -> int:
        return sum(s.width for s in self.segments)


def shorten(text: str, max_width: int, marker: str = ELLIPSIS) -> str:
    """Cut text to at most ``max_width`` cells, ending with ``marker`` when cut."""
    if cell_len(text) <= max_width:
        return text
    if max_width <= 0:
        return ""

    budget = max_width - cell_len(marker)
    if budget < 0:
        return marker[:max_width]

    kept = []
    used = 0
    for character in text:
        size = get_character_cell_size(character)
        if used + size > budget:
            break
        kept.append(character)
        used += size
    return "".join(kept) + marker


def fit_cells(text: str, width: int, align: str = "left") -> str:
    """Pad or truncate text to exactly ``width`` cells."""
    text = shorten(text, width)
    padding = " " * (width - cell_len(text))
    if align == "right":
        return padding + text
    return text + padding


def column_widths(width: int, long_durations: bool = False, index_digits: int = INDEX_DIGITS) -> ColumnWidths:
    """Split ``width`` terminal columns between the five playlist columns.

    Index and duration are fixed; artist appears above ``ARTIST_MIN_WIDTH``
    and album above ``ALBUM_MIN_WIDTH``; title takes what is left. The
    result always sums to ``width - RESERVED_COLUMNS``.

    Raises:
        ValueError: If ``width`` is below ``MIN_LAYOUT_WIDTH``.
    """
    if width < MIN_LAYOUT_WIDTH:
        raise ValueError(f"Cannot lay out a track in {width} columns (minimum {MIN_LAYOUT_WIDTH})")

    index = max(INDEX_DIGITS, index_digits) + 1
    duration = LONG_DURATION_WIDTH if long_durations else SHORT_DURATION_WIDTH

    artist = album = 0
    if width > ALBUM_MIN_WIDTH:
        artist = album = width * 3 // 11
    elif width > ARTIST_MIN_WIDTH:
        artist = width // 3

    title = width - RESERVED_COLUMNS - index - artist - album - duration
    if title < 2:
        raise ValueError(f"Cannot lay out a track in {width} columns with a {index - 1} digit index")

    return ColumnWidths(index=index, title=title, artist=artist, album=album, duration=duration)


def _text_column(text: str, width: int, role: str) -> Segment:
    # last cell of a text column is the gap before the next one
    return Segment(fit_cells(text, width - 1) + " ", width, role)


def layout_track(
    width: int,
    song: Song,
    long_durations: bool = False,
    index_digits: int = INDEX_DIGITS,
) -> TrackRow:
    """Lay out one playlist row.

    Args:
        width: Terminal columns available for the row
        song: Song to show
        long_durations: True when any song of the playlist lasts an hour or
            more, so every row uses the H:MM:SS column
        index_digits: Digits needed for the largest index in the playlist

    Returns:
        TrackRow whose segment widths sum to ``width - RESERVED_COLUMNS``
    """
    widths = column_widths(width, long_durations, index_digits)

    number = fit_cells(str(song.playlist_index + 1), widths.index - 1, align="right")
    index = Segment(number + " ", widths.index, "TrackIndex")
    title = _text_column(song.title, widths.title, "TrackTitle")
    artist = _text_column(song.artist, widths.artist, "TrackArtist") if widths.artist else None
    album = _text_column(song.album, widths.album, "TrackAlbum") if widths.album else None
    duration = Segment(
        fit_cells(format_time(song.duration, full_width=True), widths.duration, align="right"),
        widths.duration,
        "TrackDuration",
    )

    return TrackRow(index=index, title=title, artist=artist, album=album, duration=duration)


def index_digits_for(count: int) -> int:
    """Digits needed to number ``count`` rows starting at 1."""
    return max(INDEX_DIGITS, len(str(count)))


def window_start(selected: int | None, total: int, height: int, current_start: int = 0) -> int:
    """First visible row of a list so that ``selected`` stays on screen.

    Keeps ``current_start`` when the selection is already visible.
    """
    if height <= 0 or total <= height:
        return 0
    start = min(max(current_start, 0), total - height)
    if selected is None:
        return start
    if selected < start:
        return selected
    if selected >= start + height:
        return selected - height + 1
    return start
