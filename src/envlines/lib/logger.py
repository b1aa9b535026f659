"""logger — JSONL run telemetry.

Each run of the engine can append a single JSON line to a log file inside a
log directory.  An entry records the file read, the outcome, line counts, a
truncated SHA-256 hash of the content and the elapsed time.  File name and
formatting constants come from ``config/defaults.yaml``.  Logging is off
unless a directory is given.
"""

from __future__ import annotations

import datetime
import hashlib
import json
import os
from typing import Any

from envlines.lib import config


def log_run(
    log_dir: str,
    filepath: str,
    status: str,
    content: str,
    total_lines: int,
    retained_lines: int,
    elapsed_ms: int,
    error: str = "",
) -> None:
    """Append a JSONL log entry describing one run.

    Args:
        log_dir: Directory to write the log file in. Empty disables logging.
        filepath: Path of the environment file.
        status: Run status ('ok' or 'read_error').
        content: The text that was read (empty on read failure).
        total_lines: Number of lines in the file.
        retained_lines: Number of non-comment lines emitted.
        elapsed_ms: Run duration in milliseconds.
        error: Error text for failed runs.
    """
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, config.get_str("filenames.run_log"))

    utc_src = config.get_str("formatting.utc_offset_source")
    utc_rep = config.get_str("formatting.utc_offset_replacement")
    hash_prefix = config.get_str("formatting.hash_prefix")
    hash_trunc = config.get_int("defaults.hash_truncation_length")
    separators = tuple(config.get_list("formatting.log_separators"))

    entry: dict[str, Any] = {
        "timestamp": (
            datetime.datetime.now(datetime.timezone.utc)
            .isoformat()
            .replace(utc_src, utc_rep)
        ),
        "event": "run",
        "file": filepath,
        "status": status,
        "total_lines": total_lines,
        "retained_lines": retained_lines,
        "comment_lines": total_lines - retained_lines,
        "content_hash": hash_prefix + hashlib.sha256(content.encode()).hexdigest()[:hash_trunc],
        "elapsed_ms": elapsed_ms,
    }
    if error:
        entry["error"] = error

    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write(json.dumps(entry, separators=separators) + "\n")
