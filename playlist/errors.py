"""Exceptions raised while scanning a playlist."""


class ScanError(Exception):
    """Base class for playlist scan failures."""

    def __init__(self, path, message: str | None = None):
        self.path = str(path)
        super().__init__(message or self.path)


class InvalidPlaylistPath(ScanError):
    """The playlist argument does not refer to an existing regular file."""

    def __init__(self, path):
        super().__init__(path, f"Not a playlist file: {path}")


class UnreadablePlaylist(InvalidPlaylistPath):
    """The playlist exists but could not be opened or decoded as text."""

    def __init__(self, path, reason: str = ""):
        self.reason = reason
        message = f"Cannot read playlist {path}"
        if reason:
            message = f"{message}: {reason}"
        ScanError.__init__(self, path, message)


class TrackFileNotFound(ScanError, FileNotFoundError):
    """A track listed in the playlist does not exist on disk.

    ``path`` is the entry exactly as it appears in the playlist.
    """

    def __init__(self, path):
        ScanError.__init__(self, path, f"Track file not found: {path}")


class TagExtractionFailure(ScanError):
    """The tag library could not read a file's metadata.

    Only raised inside a tag reader; never escapes a scan.
    """

    def __init__(self, path, reason: str = ""):
        self.reason = reason
        message = f"Could not read tags from {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(path, message)
