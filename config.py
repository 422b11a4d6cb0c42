from decouple import config
from pathlib import Path

# Playlist Configuration
PLAYLIST_ENCODING = config('TP_PLAYLIST_ENCODING', default='utf-8-sig')
COMMENT_PREFIX = config('TP_COMMENT_PREFIX', default='#')

# Resolve relative track entries against the playlist's directory instead of the cwd
RELATIVE_TO_PLAYLIST = config('TP_RELATIVE_TO_PLAYLIST', default=True, cast=bool)

# Logging Configuration
LOG_LEVEL = config('TP_LOG_LEVEL', default='INFO')
LOG_FILE = config('TP_LOG_FILE', default='') or None

# Audio Configuration
AUDIO_EXTENSIONS = {
    '.aac',
    '.aif',
    '.aiff',
    '.ape',
    '.flac',
    '.m4a',
    '.m4b',
    '.mp2',
    '.mp3',
    '.mpc',
    '.ogg',
    '.opus',
    '.tta',
    '.wav',
    '.wma',
    '.wv',
}


def get_version():
    """Get version from pyproject.toml"""
    import tomllib

    pyproject_path = Path(__file__).parent / "pyproject.toml"
    if pyproject_path.exists():
        with open(pyproject_path, 'rb') as f:
            data = tomllib.load(f)
            return data.get("project", {}).get("version", "unknown")
    return "unknown"


__version__ = get_version()
