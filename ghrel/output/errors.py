"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghrel.core.errors import ErrorCode

if TYPE_CHECKING:
    from ghrel.core.config import ConfigError
    from ghrel.output.console import ConsoleProtocol
    from ghrel.services.release.errors import ReleaseError

__all__ = ["print_error", "release_error_exit_code"]


def print_error(error: ReleaseError | ConfigError, console: ConsoleProtocol) -> None:
    """Print an error and its hint, if any."""
    console.error(error.message)
    if error.hint:
        console.hint(error.hint)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get exit code for a release error."""
    match error.kind:
        case "config":
            return int(ErrorCode.ENV_ERROR)
        case "manifest" | "tag":
            return int(ErrorCode.USER_ERROR)
        case "changelog":
            return int(ErrorCode.IO_ERROR)
        case "remote_query" | "remote_create":
            return int(ErrorCode.NETWORK_ERROR)
