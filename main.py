#!/usr/bin/env python

import argparse
import sys
from config import LOG_FILE, LOG_LEVEL, __version__
from eliot import log_message, start_action
from playlist.errors import ScanError
from playlist.logging import app_logger, log_error, setup_logging
from playlist.scanner import PlaylistScanner


def format_hierarchy(artists) -> list[str]:
    """Render artists, albums and songs as indented lines."""
    lines = []
    for artist in artists:
        lines.append(artist.name or "<unknown artist>")
        for album in artist:
            lines.append(f"  {album.title or '<unknown album>'}")
            for song in album:
                lines.append(f"    {song.title or '<untitled>'}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transferplaylist",
        description="Scan a playlist and show its tracks grouped by artist, album and song",
    )
    parser.add_argument("playlist", help="Playlist file, one track path per line")
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="NAME",
        help="Drop a track entry before scanning (repeatable)",
    )
    parser.add_argument("--flat", action="store_true", help="Only list the artists")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    parser.add_argument("--log-file", default=LOG_FILE, help="Append JSON logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    with start_action(app_logger, "application_run", playlist=args.playlist):
        scanner = PlaylistScanner(args.playlist, nest=not args.flat)
        for name in args.remove:
            scanner.pop_file(name)
        try:
            scanner.scan()
        except ScanError as e:
            log_error(app_logger, e, playlist=args.playlist)
            print(f"Error: {e}", file=sys.stderr)
            return 1

        for line in format_hierarchy(scanner):
            print(line)
        log_message(message_type="application_done", artists=len(scanner.artists or []))
    return 0


if __name__ == "__main__":
    sys.exit(main())
