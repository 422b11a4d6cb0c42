"""Track metadata and the Artist -> Album -> Song hierarchy."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class TrackRecord:
    """Raw tag information for one music file as read from disk."""

    title: str = ""
    artist: str = ""
    album: str = ""
    release_date: str = ""


class Song:
    """A track as displayed in the interface.

    Two songs are equal when their titles match exactly.
    """

    __slots__ = ('_title',)

    def __init__(self, title: str):
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def __eq__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return self._title == other._title

    def __hash__(self):
        return hash(('song', self._title))

    def __repr__(self):
        return f"Song({self._title!r})"


class Album:
    """An ordered collection of distinct songs.

    Albums compare equal when their titles match regardless of case.
    Iterating an album yields its songs.
    """

    def __init__(self, title: str):
        self._title = title
        self._songs: list[Song] = []

    @property
    def title(self) -> str:
        return self._title

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    def add_song(self, song: Song) -> bool:
        """Add a song unless the album already has one with the same title.

        Returns:
            bool: True if the song was added
        """
        if song in self._songs:
            return False
        self._songs.append(song)
        return True

    def has_song(self, song: Song) -> bool:
        return song in self._songs

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __len__(self):
        return len(self._songs)

    def __eq__(self, other):
        if not isinstance(other, Album):
            return NotImplemented
        return self._title.lower() == other._title.lower()

    def __hash__(self):
        return hash(('album', self._title.lower()))

    def __repr__(self):
        return f"Album({self._title!r}, songs={len(self._songs)})"


class Artist:
    """An ordered collection of distinct albums.

    Artists compare equal by exact name. Iterating an artist yields its albums.
    """

    def __init__(self, name: str):
        self._name = name
        self._albums: list[Album] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def albums(self) -> tuple[Album, ...]:
        return tuple(self._albums)

    def add_album(self, album: Album) -> bool:
        """Add an album unless an equal one (case-insensitive title) is present.

        Returns:
            bool: True if the album was added
        """
        if self.has_album(album):
            return False
        self._albums.append(album)
        return True

    def has_album(self, album: Album) -> bool:
        return album in self._albums

    def __iter__(self) -> Iterator[Album]:
        return iter(self._albums)

    def __len__(self):
        return len(self._albums)

    def __eq__(self, other):
        if not isinstance(other, Artist):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(('artist', self._name))

    def __repr__(self):
        return f"Artist({self._name!r}, albums={len(self._albums)})"
