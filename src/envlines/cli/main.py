"""envlines CLI entry point.

Reads ``./.env`` from the current working directory and prints its
non-comment lines as a JSON array, ready to paste into a container
orchestration file.  No arguments, flags or environment variables are
consulted; everything configurable lives in ``config/defaults.yaml``.

Usage::

    envlines
    python -m envlines.cli.main
"""

from __future__ import annotations

import sys

from envlines.engine import generate_env_list
from envlines.exceptions import EnvFileReadError
from envlines.lib import config
from envlines.lib.theme import colorize


def main() -> None:
    """Run the pipeline on the configured file and write the result.

    On success one JSON line goes to stdout.  On a read failure one
    diagnostic line goes to stderr and stdout stays empty.
    """
    try:
        result = generate_env_list(log_dir=config.get_str("logging.directory"))
    except EnvFileReadError as exc:
        role = config.get_str("cli.error_role")
        sys.stderr.write(colorize(str(exc), role, stream=sys.stderr) + "\n")
        return

    sys.stdout.write(result.output + "\n")


if __name__ == "__main__":
    main()
