"""Playlist scanning: playlist lines -> tag records -> artist hierarchy."""

import eliot
from collections import Counter
from collections.abc import Iterator
from config import PLAYLIST_ENCODING, RELATIVE_TO_PLAYLIST
from eliot import log_message, start_action
from pathlib import Path
from playlist.errors import InvalidPlaylistPath, TrackFileNotFound, UnreadablePlaylist
from playlist.hierarchy import build_hierarchy
from playlist.logging import log_file_operation, log_scan_progress, scanner_logger
from playlist.models import Artist, TrackRecord
from playlist.progress import ProgressCallback, ProgressNotifier
from playlist.tags import MutagenTagReader, TagReader
from utils.files import canonical_file, is_audio_file, is_comment, resolve_entry, track_exists

PROGRESS_PROPERTY = "progress"


class PlaylistScanner:
    """One playlist's scan session.

    Owns the pending track file-name list and the artist hierarchy produced by
    the last successful scan. Not safe for concurrent use.
    """

    def __init__(
        self,
        playlist_path: str | Path,
        tag_reader: TagReader | None = None,
        logger: eliot.Logger | None = None,
        relative_to_playlist: bool = RELATIVE_TO_PLAYLIST,
        nest: bool = True,
    ):
        """Initialize PlaylistScanner.

        Args:
            playlist_path: Playlist file scanned when scan() gets no path
            tag_reader: Callable returning a TrackRecord or None for a track path
            logger: Eliot logger used for scan actions
            relative_to_playlist: Resolve relative entries against the playlist's directory
            nest: Attach songs and albums when building the hierarchy
        """
        self.playlist_path = playlist_path
        self.logger = logger if logger is not None else scanner_logger
        self.tag_reader = tag_reader if tag_reader is not None else MutagenTagReader(self.logger)
        self.relative_to_playlist = relative_to_playlist
        self.nest = nest
        self.progress = ProgressNotifier()
        self._track_file_names: list[str] = []
        self._removed: Counter[str] = Counter()
        self._artists: list[Artist] | None = None

    @property
    def track_file_names(self) -> list[str]:
        """Copy of the pending track file-name list."""
        return list(self._track_file_names)

    @property
    def artists(self) -> list[Artist] | None:
        """Artists from the last successful scan, or None if none has completed."""
        return None if self._artists is None else list(self._artists)

    def subscribe(self, callback: ProgressCallback) -> None:
        self.progress.subscribe(callback)

    def unsubscribe(self, callback: ProgressCallback) -> None:
        self.progress.unsubscribe(callback)

    def scan(self, playlist_path: str | Path | None = None, progress_callback: ProgressCallback | None = None) -> list[Artist]:
        """Read the playlist, read every pending track's tags and build the hierarchy.

        Lines are appended to the pending list, so scanning twice without reset()
        processes the entries twice. Each pop_file(name) call keeps one matching
        line out of the pending list. A progress event ``("progress", i - 1, i)`` is
        sent before pending entry ``i`` is checked.

        Args:
            playlist_path: Playlist to read; defaults to the one given at construction
            progress_callback: Subscriber for this scan only

        Returns:
            list[Artist]: The new hierarchy

        Raises:
            InvalidPlaylistPath: The playlist is not an existing regular file
            UnreadablePlaylist: The playlist could not be opened or decoded
            TrackFileNotFound: A pending entry does not exist; the previous hierarchy is kept
        """
        path = self.playlist_path if playlist_path is None else playlist_path

        with start_action(self.logger, "playlist_scan", playlist=str(path)):
            playlist_file = canonical_file(path)
            if playlist_file is None:
                raise InvalidPlaylistPath(path)

            added = self._read_playlist(playlist_file)
            log_file_operation("read", str(playlist_file), entries_added=added, pending=len(self._track_file_names))

            base_dir = playlist_file.parent if self.relative_to_playlist else None
            if progress_callback is not None:
                self.progress.subscribe(progress_callback)
            try:
                records = self._read_tracks(base_dir)
            finally:
                if progress_callback is not None:
                    self.progress.unsubscribe(progress_callback)

            self._artists = build_hierarchy(records, nest=self.nest)
            log_message(
                message_type="scan_complete",
                tracks=len(records),
                unreadable=sum(1 for r in records if r is None),
                artists=len(self._artists),
                description=f"Scanned {len(records)} tracks into {len(self._artists)} artists",
            )
            return list(self._artists)

    def _read_playlist(self, playlist_file: Path) -> int:
        # Collect every line first so a decoding error leaves the pending list untouched
        entries = []
        skips = Counter(self._removed)
        try:
            with open(playlist_file, encoding=PLAYLIST_ENCODING) as f:
                for raw_line in f:
                    line = raw_line.rstrip('\r\n')
                    if is_comment(line):
                        continue
                    if skips[line] > 0:
                        skips[line] -= 1
                        log_message(message_type="playlist_line_removed", entry=line)
                        continue
                    log_message(message_type="playlist_line_read", entry=line)
                    entries.append(line)
        except (OSError, UnicodeDecodeError) as e:
            raise UnreadablePlaylist(playlist_file, str(e)) from e
        self._track_file_names.extend(entries)
        return len(entries)

    def _read_tracks(self, base_dir: Path | None) -> list[TrackRecord | None]:
        entries = list(self._track_file_names)
        records: list[TrackRecord | None] = []
        for i, entry in enumerate(entries):
            self.progress.fire(PROGRESS_PROPERTY, i - 1, i)
            log_scan_progress(i - 1, i, len(entries), entry)

            if not track_exists(entry, base_dir):
                raise TrackFileNotFound(entry)
            track_file = resolve_entry(entry, base_dir)
            if not is_audio_file(track_file):
                log_message(message_type="unknown_extension", filepath=str(track_file))
            records.append(self.tag_reader(track_file))
        return records

    def pop_file(self, name: str) -> None:
        """Remove the first pending entry equal to name; absent names are ignored.

        Each call also hides one occurrence of name from later scans of the
        playlist, so the entry stays removed after a rescan. The playlist file
        itself is never modified; restore_file() takes a removal back.
        """
        self._removed[name] += 1
        try:
            self._track_file_names.remove(name)
        except ValueError:
            log_message(message_type="pop_file_missing", entry=name)
            return
        log_file_operation("remove", name, pending=len(self._track_file_names))

    def restore_file(self, name: str) -> None:
        """Undo one pop_file(name) for later scans. The pending list is unchanged."""
        if self._removed[name] <= 1:
            self._removed.pop(name, None)
        else:
            self._removed[name] -= 1

    def reset(self) -> None:
        """Clear the pending track file-name list. Removals stay in effect."""
        self._track_file_names.clear()

    @property
    def removed_file_names(self) -> dict[str, int]:
        """Names dropped with pop_file(), with how many occurrences each hides."""
        return dict(self._removed)

    def save(self) -> None:
        """Persist the playlist. Reserved; currently does nothing."""
        log_message(message_type="save_requested", playlist=str(self.playlist_path))

    def __iter__(self) -> Iterator[Artist]:
        return iter(self._artists or ())
