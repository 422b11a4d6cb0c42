import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Hypothesis configuration for property-based testing
from hypothesis import settings
from playlist.models import TrackRecord
from tests.helpers.fake_tags import FakeTagReader

# Register Hypothesis profiles
settings.register_profile("fast", max_examples=50, deadline=None)
settings.register_profile("thorough", max_examples=1000, deadline=None)
settings.load_profile("fast")  # Default to fast profile


def pytest_collection_modifyitems(items):
    """Automatically order tests: unit tests first, then property tests.

    Individual tests marked with @pytest.mark.order("last") will run at the very end.
    """
    for item in items:
        # Skip if item already has explicit order marker
        if hasattr(item, 'get_closest_marker') and item.get_closest_marker('order'):
            continue

        # Assign order based on test file name
        test_file = str(item.fspath)
        if 'test_unit_' in test_file:
            item.add_marker(pytest.mark.order(1))
        elif 'test_props_' in test_file:
            item.add_marker(pytest.mark.order(2))


@pytest.fixture
def make_playlist(tmp_path):
    """Write a playlist into tmp_path and create the listed track files.

    Args:
        lines: Playlist lines, written joined by newlines
        missing: Entries that must not exist on disk
        name: Playlist file name

    Returns:
        Path: The playlist file
    """

    def _make(lines, missing=(), name="playlist.m3u"):
        for line in lines:
            if not line.strip() or line.startswith("#") or line in missing:
                continue
            track = tmp_path / line
            track.parent.mkdir(parents=True, exist_ok=True)
            track.write_bytes(b"")
        playlist_file = tmp_path / name
        playlist_file.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return playlist_file

    return _make


@pytest.fixture
def tag_reader():
    """Fake tag reader with a few tagged tracks."""
    return FakeTagReader(
        {
            "a.mp3": TrackRecord("Song A", "Artist One", "Album One", "1999"),
            "b.mp3": TrackRecord("Song B", "Artist Two", "Album Two", "2001"),
            "c.mp3": TrackRecord("Song C", "Artist One", "Album Three", "2003"),
        }
    )
