"""Custom exceptions for envlines.

Exceptions:
    EnvFileReadError — Raised when the environment file cannot be read
        (missing, unreadable, permission denied or not valid text in the
        configured encoding). Captures the path and the underlying error.
"""

from __future__ import annotations

from envlines.lib import config


class EnvFileReadError(Exception):
    """Raised when the environment file cannot be read.

    Every read failure is reported the same way; the original ``OSError``
    or ``UnicodeDecodeError`` stays available on ``original_error``.
    """

    def __init__(self, path: str, original_error: Exception) -> None:
        """Initialize with read failure details.

        Args:
            path: Path of the file that could not be read.
            original_error: The underlying exception raised by the read.
        """
        self.path = path
        self.original_error = original_error
        msg = config.get_str("messages.read_error")
        super().__init__(msg.format(path=path, error=original_error))
