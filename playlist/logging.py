"""
Logging configuration for transferplaylist using eliot.

Library code only emits eliot messages and actions. Destinations are added by
the caller (the command-line entry point calls setup_logging()); until then
nothing is written anywhere.
"""

import eliot
import logging
import sys
from eliot import log_message, write_traceback
from eliot.stdlib import EliotHandler
from pathlib import Path


class HumanReadableDestination:
    """Destination that formats log messages as single readable lines."""

    # Message types that are too chatty for the console
    skip_messages = {
        "playlist_line_read",
        "tag_read",
    }

    def __init__(self, file):
        self.file = file

    def __call__(self, message):
        """Format and write log message."""
        # Skip internal eliot action start/finish messages
        if message.get("action_type") and not message.get("message_type"):
            return

        msg_type = message.get("message_type", "")
        if msg_type in self.skip_messages:
            return

        if msg_type == "scan_progress":
            output = f"[SCAN] {message.get('new_index', 0) + 1}/{message.get('total', '?')}: {message.get('entry', '')}"
        elif msg_type == "error_occurred":
            output = f"[ERROR] {message.get('error_type', '')}: {message.get('error_message', '')}"
        elif "description" in message:
            output = message["description"]
        elif "message" in message:
            output = message["message"]
        else:
            return

        if output and output.strip():
            self.file.write(output + "\n")
            self.file.flush()


_configured = False


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """
    Set up eliot logging for the application.

    Destinations are installed once per process; later calls only adjust the
    stdlib level.

    Args:
        log_level: Logging level for the stdlib bridge (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write raw JSON logs to (stdout is always used)
    """
    global _configured
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    if _configured:
        return
    _configured = True

    eliot.add_destinations(HumanReadableDestination(sys.stdout))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        eliot.to_file(open(log_path, "a"))

    # Route stdlib logging (mutagen and friends) through eliot
    logger.addHandler(EliotHandler())

    log_message(message_type="logging_setup", log_level=log_level, log_file=log_file or "stdout")


def get_logger(name: str) -> eliot.Logger:
    """
    Get an eliot logger instance for a specific component.

    The returned Logger is meant for start_action(); use log_message() to log
    individual messages inside the action.

    Args:
        name: Component name (kept for readability at the call site)

    Returns:
        Eliot Logger instance
    """
    return eliot.Logger()


# Default logger instances for the components
app_logger = get_logger("tp_app")
scanner_logger = get_logger("tp_scanner")
tags_logger = get_logger("tp_tags")


def log_file_operation(operation: str, filepath: str, **context):
    """
    Log file operations with context.

    Args:
        operation: File operation type (read, scan, remove, etc.)
        filepath: Path to the file
        **context: Additional context data
    """
    log_message(message_type="file_operation", operation=operation, filepath=str(filepath), **context)


def log_scan_progress(old_index: int, new_index: int, total: int, entry: str):
    """
    Log a scan progress step.

    Args:
        old_index: Index of the previously processed entry (-1 before the first)
        new_index: Index of the entry about to be processed
        total: Number of pending entries
        entry: Pending entry text
    """
    log_message(message_type="scan_progress", old_index=old_index, new_index=new_index, total=total, entry=entry)


def log_error(logger: eliot.Logger, error: Exception, **context):
    """
    Log errors with full context and traceback.

    Args:
        logger: Eliot logger instance
        error: Exception that occurred
        **context: Additional context data
    """
    write_traceback(logger, exc_info=sys.exc_info())
    log_message(message_type="error_occurred", error_message=str(error), error_type=type(error).__name__, **context)
