"""Error codes for CLI exit status.

Each failure class of a release run maps to one of these codes, so scripts
calling ``ghrel`` can tell a bad manifest from an unreachable API.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the release command.

    These values are used as process exit codes and should remain stable.
    - 0: Success (released or already existing)
    - 1: User error (bad manifest, missing tag)
    - 2: Environment error (missing token, no changelog)
    - 4: Network error (GitHub API query or create failed)
    - 5: I/O error (changelog unreadable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5
