"""Git operations module.

Usage:
    from ghrel.git import Repository

    repo = Repository(Path("/path/to/project"))
    match repo.tags_text():
        case Ok(listing):
            print(listing)
"""

from ghrel.git.repository import (
    GitError,
    Repository,
)

__all__ = [
    "GitError",
    "Repository",
]
