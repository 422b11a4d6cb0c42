"""Playlist scanning and Artist -> Album -> Song aggregation."""

from playlist.errors import (
    InvalidPlaylistPath,
    ScanError,
    TagExtractionFailure,
    TrackFileNotFound,
    UnreadablePlaylist,
)
from playlist.hierarchy import build_hierarchy
from playlist.models import Album, Artist, Song, TrackRecord
from playlist.progress import ProgressEvent, ProgressNotifier
from playlist.scanner import PlaylistScanner
from playlist.tags import MutagenTagReader, TagReader

__all__ = [
    'Album',
    'Artist',
    'InvalidPlaylistPath',
    'MutagenTagReader',
    'PlaylistScanner',
    'ProgressEvent',
    'ProgressNotifier',
    'ScanError',
    'Song',
    'TagExtractionFailure',
    'TagReader',
    'TrackFileNotFound',
    'TrackRecord',
    'UnreadablePlaylist',
    'build_hierarchy',
]
