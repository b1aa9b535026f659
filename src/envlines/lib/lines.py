"""lines — pure operations on the text of an environment file.

The file is treated as plain lines: no ``KEY=value`` parsing, quoting or
interpolation happens here.  Lines are split on the configured delimiter
only, so a Windows ``\\r`` stays part of the line it ends.  A line is a
comment only when its very first character is the comment marker; leading
whitespace makes it an ordinary line.
"""

from __future__ import annotations

import json
from typing import Iterable

from envlines.lib import config


def split_lines(text: str) -> list[str]:
    """Split file text into its ordered line sequence.

    Zero-length text has no lines.  Any other text keeps every segment,
    including the empty one after a trailing delimiter.

    Args:
        text: Full file contents.

    Returns:
        Lines in file order.
    """
    if not text:
        return []
    return text.split(config.get_str("parsing.line_delimiter"))


def is_comment(line: str) -> bool:
    """Return True if *line* starts with the comment marker."""
    return line.startswith(config.get_str("parsing.comment_marker"))


def filter_lines(lines: Iterable[str]) -> list[str]:
    """Drop comment lines, keeping the rest unchanged and in order."""
    return [line for line in lines if not is_comment(line)]


def encode_lines(lines: list[str]) -> str:
    """Serialize *lines* as a compact single-line JSON array of strings.

    Args:
        lines: The retained lines.

    Returns:
        JSON text such as ``["A=1","B=2"]``.
    """
    separators = tuple(config.get_list("output.json_separators"))
    return json.dumps(
        lines,
        separators=separators,
        ensure_ascii=config.get_bool("output.ensure_ascii"),
    )
