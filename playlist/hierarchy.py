"""Aggregation of flat track records into Artist -> Album -> Song."""

from collections.abc import Iterable
from playlist.models import Album, Artist, Song, TrackRecord


def build_hierarchy(records: Iterable[TrackRecord | None], nest: bool = True) -> list[Artist]:
    """Build the deduplicated artist list for a sequence of track records.

    Records are processed in order and the first occurrence wins:

    - a record whose song title was already seen anywhere is dropped;
    - a record whose album (case-insensitive) was already seen surfaces no artist;
    - otherwise its artist is appended unless an equal artist is already listed.

    None entries (unreadable tags) are skipped.

    Args:
        records: Track records in playlist order
        nest: Also attach accepted songs to their album and new albums to their artist.
            The surfaced artists are the same either way.

    Returns:
        list[Artist]: Distinct artists in order of first appearance
    """
    seen_songs: set[Song] = set()
    seen_albums: dict[Album, Album] = {}
    artists: dict[Artist, Artist] = {}

    for record in records:
        if record is None:
            continue

        song = Song(record.title)
        if song in seen_songs:
            continue
        seen_songs.add(song)

        album = Album(record.album)
        if album in seen_albums:
            if nest:
                seen_albums[album].add_song(song)
            continue
        seen_albums[album] = album

        candidate = Artist(record.artist)
        artist = artists.setdefault(candidate, candidate)
        if nest:
            album.add_song(song)
            artist.add_album(album)

    return list(artists.values())
