"""Infrastructure layer — process environment access.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cliparser.infra.environment import parse_process_args, read_process_args

__all__: list[str] = [
    "parse_process_args",
    "read_process_args",
]
