"""Unit tests for the transferplaylist command line."""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from main import build_parser, format_hierarchy, main
from playlist.models import Album, Artist, Song


@pytest.fixture
def no_logging_setup():
    """Keep main() from adding eliot destinations during tests."""
    with patch('main.setup_logging') as mock_setup:
        yield mock_setup


@pytest.fixture
def fake_mutagen(tag_reader):
    """Make scanners built by main() use the fake tag reader."""
    with patch('playlist.scanner.MutagenTagReader', return_value=tag_reader):
        yield tag_reader


class TestFormatHierarchy:
    """Test tree rendering."""

    def test_indents_albums_and_songs(self):
        artist = Artist("Band")
        album = Album("Record")
        album.add_song(Song("Track"))
        artist.add_album(album)

        assert format_hierarchy([artist]) == ["Band", "  Record", "    Track"]

    def test_placeholders_for_empty_fields(self):
        artist = Artist("")
        album = Album("")
        album.add_song(Song(""))
        artist.add_album(album)

        assert format_hierarchy([artist]) == ["<unknown artist>", "  <unknown album>", "    <untitled>"]


class TestParser:
    """Test argument parsing."""

    def test_remove_is_repeatable(self):
        args = build_parser().parse_args(["list.m3u", "--remove", "a.mp3", "--remove", "b.mp3"])
        assert args.remove == ["a.mp3", "b.mp3"]
        assert args.flat is False


class TestMain:
    """Test the command-line entry point end to end."""

    def test_prints_tree(self, make_playlist, fake_mutagen, no_logging_setup, capsys):
        playlist_file = make_playlist(["a.mp3", "b.mp3"])

        assert main([str(playlist_file)]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Artist One",
            "  Album One",
            "    Song A",
            "Artist Two",
            "  Album Two",
            "    Song B",
        ]
        no_logging_setup.assert_called_once()

    def test_flat_lists_artists_only(self, make_playlist, fake_mutagen, no_logging_setup, capsys):
        playlist_file = make_playlist(["a.mp3", "b.mp3"])

        assert main([str(playlist_file), "--flat"]) == 0

        assert capsys.readouterr().out.splitlines() == ["Artist One", "Artist Two"]

    def test_missing_track_exits_with_error(self, make_playlist, fake_mutagen, no_logging_setup, capsys):
        playlist_file = make_playlist(["a.mp3", "B.mp3"], missing={"B.mp3"})

        assert main([str(playlist_file)]) == 1

        captured = capsys.readouterr()
        assert "Track file not found: B.mp3" in captured.err
        assert captured.out == ""

    def test_remove_skips_missing_track(self, make_playlist, fake_mutagen, no_logging_setup, capsys):
        playlist_file = make_playlist(["a.mp3", "B.mp3"], missing={"B.mp3"})

        assert main([str(playlist_file), "--remove", "B.mp3"]) == 0

        assert capsys.readouterr().out.splitlines()[0] == "Artist One"

    def test_invalid_playlist(self, tmp_path, fake_mutagen, no_logging_setup, capsys):
        assert main([str(tmp_path / "missing.m3u")]) == 1
        assert "Not a playlist file" in capsys.readouterr().err

    def test_undecodable_playlist_exits_with_error(self, tmp_path, fake_mutagen, no_logging_setup, capsys):
        playlist_file = tmp_path / "list.m3u"
        playlist_file.write_bytes(b"\xff\xfe\xfaabc\n")

        assert main([str(playlist_file)]) == 1

        captured = capsys.readouterr()
        assert "Cannot read playlist" in captured.err
        assert captured.out == ""
