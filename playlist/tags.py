"""Reading track metadata from embedded audio tags."""

import eliot
import mutagen
import mutagen.apev2
import mutagen.asf
import mutagen.id3
import mutagen.mp4
from eliot import log_message
from pathlib import Path
from playlist.errors import TagExtractionFailure
from playlist.logging import log_error, tags_logger
from playlist.models import TrackRecord
from typing import Protocol

# Frame/atom/field names for title, artist, album and release date per tag format
ID3_KEYS = {"title": "TIT2", "artist": "TPE1", "album": "TALB", "release_date": "TDRC"}
MP4_KEYS = {"title": "\xa9nam", "artist": "\xa9ART", "album": "\xa9alb", "release_date": "\xa9day"}
ASF_KEYS = {"title": "Title", "artist": "Author", "album": "WM/AlbumTitle", "release_date": "WM/Year"}
APE_KEYS = {"title": "Title", "artist": "Artist", "album": "Album", "release_date": "Year"}
VORBIS_KEYS = {"title": "title", "artist": "artist", "album": "album", "release_date": "date"}


class TagReader(Protocol):
    """Anything that turns a file path into a TrackRecord, or None when unreadable.

    Implementations must not raise for unreadable tags.
    """

    def __call__(self, path: str | Path) -> TrackRecord | None: ...


def _first_value(tags, key: str) -> str:
    if key not in tags:
        return ""
    value = tags[key]
    if hasattr(value, "text"):
        return str(value.text[0]) if value.text else ""
    if isinstance(value, list):
        return str(value[0]) if value else ""
    return str(value)


def tag_keys(tags) -> dict[str, str]:
    """Pick the TrackRecord field -> tag key mapping for a mutagen tag container."""
    if isinstance(tags, mutagen.id3.ID3):
        return ID3_KEYS
    if isinstance(tags, mutagen.mp4.MP4Tags):
        return MP4_KEYS
    if isinstance(tags, mutagen.asf.ASFTags):
        return ASF_KEYS
    if isinstance(tags, mutagen.apev2.APEv2):
        # Monkey's Audio, WavPack, Musepack
        return APE_KEYS
    # FLAC, OGG, etc.
    return VORBIS_KEYS


def record_from_tags(tags) -> TrackRecord:
    """Build a TrackRecord from a mutagen tag container.

    Missing fields become empty strings.
    """
    keys = tag_keys(tags)
    return TrackRecord(**{field: _first_value(tags, key) for field, key in keys.items()})


class MutagenTagReader:
    """Tag reader backed by mutagen.

    Unreadable files are logged and reported as None.
    """

    def __init__(self, logger: eliot.Logger | None = None):
        self.logger = logger if logger is not None else tags_logger

    def __call__(self, path: str | Path) -> TrackRecord | None:
        return self.read(path)

    def read(self, path: str | Path) -> TrackRecord | None:
        """Read title, artist, album and release date from a file.

        Returns:
            TrackRecord | None: None if the tags could not be extracted
        """
        try:
            record = self._extract(str(path))
        except TagExtractionFailure as e:
            log_error(self.logger, e, filepath=str(path))
            return None
        log_message(message_type="tag_read", filepath=str(path), title=record.title, artist=record.artist)
        return record

    def _extract(self, filepath: str) -> TrackRecord:
        try:
            audio = mutagen.File(filepath)
        except (mutagen.MutagenError, OSError) as e:
            raise TagExtractionFailure(filepath, str(e)) from e

        if audio is None:
            raise TagExtractionFailure(filepath, "unsupported audio format")
        tags = getattr(audio, "tags", None)
        if not tags:
            raise TagExtractionFailure(filepath, "no tag block")
        if not any(key in tags for key in tag_keys(tags).values()):
            raise TagExtractionFailure(filepath, "no title, artist, album or date tag")
        return record_from_tags(tags)
