"""envlines engine — read, filter and encode an environment file.

Composes the library modules into one pipeline: read the whole file as
text, split it into lines, drop comment lines and encode what is left as a
JSON array.  The engine never writes to stdout or stderr; it returns an
``EnvListResult`` or raises ``EnvFileReadError`` and leaves presentation to
the caller.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

from envlines.exceptions import EnvFileReadError
from envlines.lib import config
from envlines.lib.lines import encode_lines, filter_lines, split_lines
from envlines.lib.logger import log_run


@dataclass
class EnvListResult:
    """Outcome of one successful run."""

    path: str
    lines: list[str] = field(default_factory=list)
    total_lines: int = 0
    comment_lines: int = 0
    output: str = ""
    elapsed_ms: int = 0


def read_env_file(path: str) -> str:
    """Read the whole environment file as text.

    Args:
        path: Path to the file.

    Returns:
        The file contents.

    Raises:
        EnvFileReadError: If the file cannot be opened, read or decoded.
    """
    encoding = config.get_str("input.encoding")
    try:
        with open(path, "r", encoding=encoding, newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileReadError(path, exc) from exc


def generate_env_list(
    path: Optional[str] = None,
    *,
    log_dir: str = "",
) -> EnvListResult:
    """Turn an environment file into a JSON array of its non-comment lines.

    This is the primary entry point for programmatic usage.

    Args:
        path: File to read. Defaults to the configured ``./.env``.
        log_dir: Directory for JSONL run telemetry. Empty disables it.

    Returns:
        EnvListResult with the retained lines and the encoded output.

    Raises:
        EnvFileReadError: If the file cannot be read. Nothing is encoded.
        OSError: If *log_dir* is set but the run log cannot be written.
            This propagates even after a successful read, and the
            computed result is not returned.
    """
    if path is None:
        path = config.get_str("input.path")

    start = time.time()

    try:
        text = read_env_file(path)
    except EnvFileReadError as exc:
        log_run(
            log_dir,
            path,
            config.get_str("statuses.read_error"),
            "",
            0,
            0,
            int((time.time() - start) * 1000),
            error=str(exc),
        )
        raise

    lines = split_lines(text)
    kept = filter_lines(lines)
    output = encode_lines(kept)
    elapsed_ms = int((time.time() - start) * 1000)

    log_run(
        log_dir,
        path,
        config.get_str("statuses.ok"),
        text,
        len(lines),
        len(kept),
        elapsed_ms,
    )

    return EnvListResult(
        path=path,
        lines=kept,
        total_lines=len(lines),
        comment_lines=len(lines) - len(kept),
        output=output,
        elapsed_ms=elapsed_ms,
    )
