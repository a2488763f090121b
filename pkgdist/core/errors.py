"""Process exit codes.

Every command funnels its outcome through the exit code bridge, so the
numeric values below are the whole failure-to-exit-code policy of the tool.
Usage errors (exit code 2) are raised by click itself.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 3: Failure reported by a command (resolution failed, archive missing)
    """

    OK = 0
    FAILURE = 3
