from config import AUDIO_EXTENSIONS, COMMENT_PREFIX
from pathlib import Path


def canonical_file(path) -> Path | None:
    """Return the absolute, symlink-free path of a regular file, or None."""
    try:
        resolved = Path(path).expanduser().resolve()
    except (OSError, RuntimeError, ValueError):
        return None
    return resolved if resolved.is_file() else None


def is_comment(line: str, prefix: str = COMMENT_PREFIX) -> bool:
    return line.startswith(prefix)


def resolve_entry(entry: str, base_dir: Path | None = None) -> Path:
    """Turn a playlist entry into a filesystem path.

    Absolute entries are used as-is. Relative entries are joined to base_dir
    when given, otherwise they stay relative to the working directory.
    """
    path = Path(entry).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def track_exists(entry: str, base_dir: Path | None = None) -> bool:
    """Check a playlist entry refers to something on disk.

    An empty entry never exists, even though Path("") means the current directory.
    """
    return bool(entry) and resolve_entry(entry, base_dir).exists()


def is_audio_file(path) -> bool:
    return Path(path).suffix.lower() in AUDIO_EXTENSIONS
