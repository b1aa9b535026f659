"""envlines — turn a ``.env`` file into a JSON list of its lines.

Stable public API:
    generate_env_list: Read, filter and encode an environment file.
    EnvListResult: Dataclass returned by generate_env_list.
    read_env_file: Read an environment file as text.
    split_lines, is_comment, filter_lines, encode_lines: Line operations.
    EnvFileReadError: Exception raised when the file cannot be read.
"""

__version__ = "0.1.0"

from envlines.engine import EnvListResult, generate_env_list, read_env_file
from envlines.exceptions import EnvFileReadError
from envlines.lib.lines import encode_lines, filter_lines, is_comment, split_lines

__all__ = [
    "__version__",
    "generate_env_list",
    "EnvListResult",
    "read_env_file",
    "split_lines",
    "is_comment",
    "filter_lines",
    "encode_lines",
    "EnvFileReadError",
]
