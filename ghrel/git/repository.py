"""Git repository abstraction.

Only the read-only operation a release run needs: listing tags. The project
directory may be a subdirectory of the checkout (monorepo packages).

Usage:
    repo = Repository(Path("/path/to/project"))
    match repo.tags_text():
        case Ok(listing):
            print(listing)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.platform.process import ProcessError
from ghrel.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A local git checkout.

    Attributes:
        path: Project directory inside the checkout
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def tags_text(self) -> Result[str, GitError]:
        """Raw `git tag` output, one tag per line.

        Returns:
            Ok(listing) on success
            Err(GitError) on failure
        """
        result = self._run(["tag"])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="tag",
                        message=e.stderr.strip() or "git tag failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(
            ["git", "-C", str(self.path), *args], cwd=self.path, timeout=_GIT_TIMEOUT_SECONDS
        )
