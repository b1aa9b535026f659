"""Centralized path resolution for the envlines package.

This is the ONLY module that touches __file__ or computes directory paths.
Every other module imports from here.
"""

from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


def config_dir() -> Path:
    """Return the config/ directory path."""
    return _PACKAGE_DIR / "config"


def defaults_path() -> Path:
    """Return the path to config/defaults.yaml."""
    return config_dir() / "defaults.yaml"


def cli_dir() -> Path:
    """Return the cli/ directory path."""
    return _PACKAGE_DIR / "cli"


def theme_path() -> Path:
    """Return the path to cli/theme.yaml."""
    from envlines.lib.config import get_str

    return cli_dir() / get_str("filenames.theme")
