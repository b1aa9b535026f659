"""Shared fixtures for the envlines test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


SCENARIO_TEXT = "A=1\n#comment\nB=2"


@pytest.fixture()
def write_env(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes raw text to ``tmp_path/.env``.

    Bytes are written directly so line endings reach the file untouched.
    """

    def _write(text: str) -> Path:
        env_file = tmp_path / ".env"
        env_file.write_bytes(text.encode("utf-8"))
        return env_file

    return _write


@pytest.fixture()
def scenario_env(write_env) -> Path:
    """A .env with two assignments around a comment."""
    return write_env(SCENARIO_TEXT)
