"""theme — ANSI colouring for diagnostics written to stderr.

Role names (``error``, ``warning`` ...) are mapped to escape codes by
``cli/theme.yaml``, read lazily on first use.  Nothing is coloured unless the
target stream is a TTY, so redirected stderr carries the bare message.
"""

from __future__ import annotations

import sys
from typing import Any, Optional

from envlines._paths import theme_path
from envlines.lib.yaml_loader import load_yaml


def is_tty(stream: Any) -> bool:
    """Return True when *stream* reports itself as an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Theme:
    """Lazy-loaded role-to-ANSI mapping.

    Attributes:
        resolved: Mapping of semantic role names to ANSI escape codes.
    """

    def __init__(self) -> None:
        self._resolved: Optional[dict[str, str]] = None

    def _load(self) -> dict[str, str]:
        tp = theme_path()
        if not tp.is_file():
            return {}
        raw = load_yaml(tp) or {}
        ansi: dict[str, str] = raw.get("ansi", {})
        resolved = {
            role: ansi.get(color, "") for role, color in raw.get("roles", {}).items()
        }
        resolved["reset"] = ansi.get("reset", "")
        return resolved

    @property
    def resolved(self) -> dict[str, str]:
        """Return the role mapping, reading theme.yaml on first access."""
        if self._resolved is None:
            self._resolved = self._load()
        return self._resolved

    def colorize(self, text: str, role: str, *, stream: Any = None) -> str:
        """Wrap *text* in the escape codes for *role*.

        Args:
            text: The text to colour.
            role: Semantic role name from theme.yaml.
            stream: Stream the text is destined for. Defaults to sys.stderr.

        Returns:
            Coloured text on a TTY, *text* unchanged otherwise.
        """
        if not is_tty(stream or sys.stderr):
            return text
        start = self.resolved.get(role, "")
        if not start:
            return text
        return f"{start}{text}{self.resolved.get('reset', '')}"


_theme = Theme()


def colorize(text: str, role: str, *, stream: Any = None) -> str:
    """Colour *text* for *role* using the shared theme."""
    return _theme.colorize(text, role, stream=stream)
