"""
Custom formatters for git-mirror logging.
"""

import logging
from .utils import sanitize_url
from gitmirror.constants import LOG_DATE_FORMAT


class MirrorFormatter(logging.Formatter):
    """
    Formatter for operation log lines.

    Produces ``[YYYY-MM-DD HH:MM:SS] message`` lines, prefixes errors with
    ``ERROR:`` and masks credentials before the line is rendered.
    """

    def __init__(self, include_timestamps: bool = True, sanitize_sensitive: bool = True):
        self.include_timestamps = include_timestamps
        self.sanitize_sensitive = sanitize_sensitive
        fmt_string = "[%(asctime)s] %(message)s" if include_timestamps else "%(message)s"
        super().__init__(fmt=fmt_string, datefmt=LOG_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record with optional sanitization.
        Args:
            record: The log record to format
        Returns:
            str: Formatted log line
        """
        message = record.getMessage()
        if self.sanitize_sensitive:
            message = sanitize_url(message)

        if record.levelno >= logging.ERROR:
            message = f"ERROR: {message}"

        # Format a copy so other handlers still see the original record
        rendered = logging.makeLogRecord(record.__dict__)
        rendered.msg = message
        rendered.args = None
        return super().format(rendered)
