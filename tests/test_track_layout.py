import pytest
from rich.cells import cell_len

from models.track import Song
from services.track_layout import (
    ELLIPSIS,
    RESERVED_COLUMNS,
    column_widths,
    fit_cells,
    index_digits_for,
    layout_track,
    shorten,
    window_start,
)

SONG = Song(
    playlist_index=4,
    title="A Fairly Long Song Title That Will Not Fit Anywhere Narrow",
    artist="Some Artist With A Long Name",
    album="An Album Name",
    duration=245.0,
)


@pytest.mark.parametrize("width", [20, 33, 50, 51, 80, 81, 120, 200])
@pytest.mark.parametrize("long_durations", [False, True])
def test_segments_fill_width_exactly(width, long_durations):
    row = layout_track(width, SONG, long_durations)
    assert row.width == width - RESERVED_COLUMNS
    for segment in row.segments:
        assert cell_len(segment.text) == segment.width


def test_layout_is_deterministic():
    assert layout_track(100, SONG) == layout_track(100, SONG)


def test_narrow_layout_omits_artist_and_album():
    row = layout_track(50, SONG)
    assert row.artist is None
    assert row.album is None
    assert [s.role for s in row.segments] == ["TrackIndex", "TrackTitle", "TrackDuration"]


def test_artist_appears_above_fifty_columns():
    row = layout_track(51, SONG)
    assert row.artist is not None
    assert row.album is None


def test_album_appears_above_eighty_columns():
    row = layout_track(81, SONG)
    assert row.artist is not None
    assert row.album is not None
    assert [s.role for s in row.segments] == [
        "TrackIndex", "TrackTitle", "TrackArtist", "TrackAlbum", "TrackDuration",
    ]


def test_index_is_one_based_and_right_aligned():
    assert layout_track(40, SONG).index.text == " 5 "


def test_duration_column_width():
    assert layout_track(40, SONG).duration.text == " 4:05"
    assert layout_track(40, SONG, long_durations=True).duration.text == "    4:05"
    hour = Song(0, "t", "", "", 3725.0)
    assert layout_track(40, hour, long_durations=True).duration.text == " 1:02:05"


def test_title_truncated_with_ellipsis():
    row = layout_track(30, SONG)
    assert ELLIPSIS in row.title.text
    assert row.title.text.endswith(" ")


def test_short_title_is_padded():
    song = Song(0, "Hi", "", "", 60.0)
    row = layout_track(30, song)
    assert row.title.text.startswith("Hi ")
    assert ELLIPSIS not in row.title.text


def test_wide_glyphs_truncate_earlier_but_fill_the_same_cells():
    ascii_song = Song(0, "abcdefghijklmnopqrstuvwxyzabcdefghijkl", "", "", 60.0)
    wide_song = Song(0, "日本語のとても長い曲のタイトルです日本語のとても長い", "", "", 60.0)
    ascii_row = layout_track(40, ascii_song)
    wide_row = layout_track(40, wide_song)

    assert cell_len(ascii_row.title.text) == cell_len(wide_row.title.text)
    assert len(wide_row.title.text) < len(ascii_row.title.text)
    assert ascii_row.width == wide_row.width == 40 - RESERVED_COLUMNS


def test_wide_glyph_that_does_not_fit_is_padded():
    assert fit_cells("日本語", 4) == "日… "
    assert cell_len(fit_cells("日本語", 4)) == 4


def test_fit_cells_right_align():
    assert fit_cells("ab", 4, align="right") == "  ab"


def test_shorten_with_custom_marker():
    assert shorten("Hello world", 8, marker="...") == "Hello..."
    assert shorten("Hello", 8, marker="...") == "Hello"
    assert shorten("Hello", 0) == ""


def test_large_playlists_widen_the_index():
    song = Song(123, "t", "", "", 60.0)
    row = layout_track(40, song, index_digits=index_digits_for(500))
    assert row.index.text == "124 "
    assert row.width == 40 - RESERVED_COLUMNS


def test_too_narrow_is_rejected():
    with pytest.raises(ValueError):
        column_widths(19)


def test_column_widths_sum():
    widths = column_widths(120, long_durations=True)
    assert widths.total == 120 - RESERVED_COLUMNS
    assert widths.artist == widths.album == 120 * 3 // 11


@pytest.mark.parametrize("selected, total, height, start, expected", [
    (0, 5, 10, 0, 0),
    (None, 50, 10, 0, 0),
    (15, 50, 10, 0, 6),
    (3, 50, 10, 6, 3),
    (8, 50, 10, 6, 6),
    (49, 50, 10, 45, 40),
])
def test_window_start(selected, total, height, start, expected):
    assert window_start(selected, total, height, start) == expected
