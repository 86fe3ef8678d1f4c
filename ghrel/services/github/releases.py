"""GitHub Releases API operations.

Thin wrappers over the two REST endpoints a release run touches. Both take
an ``HttpClient`` so tests can substitute ``MockHttpClient``.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ghrel.core.result import Result
from ghrel.services.github.http import HttpClient, HttpError

__all__ = [
    "release_by_tag_url",
    "releases_url",
    "get_release_by_tag",
    "create_release",
]


def releases_url(api_url: str, owner: str, repo: str) -> str:
    return f"{api_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/releases"


def release_by_tag_url(api_url: str, owner: str, repo: str, tag: str) -> str:
    return f"{releases_url(api_url, owner, repo)}/tags/{quote(tag, safe='')}"


def get_release_by_tag(
    http: HttpClient,
    *,
    api_url: str,
    owner: str,
    repo: str,
    tag: str,
) -> Result[dict[str, Any], HttpError]:
    """Fetch a release by tag name.

    GitHub answers 404 when no release exists for the tag; callers check
    ``HttpError.is_not_found`` to tell that apart from real failures.
    """
    return http.get_json(release_by_tag_url(api_url, owner, repo, tag))


def create_release(
    http: HttpClient,
    *,
    api_url: str,
    owner: str,
    repo: str,
    tag: str,
    name: str,
    body: str,
) -> Result[dict[str, Any], HttpError]:
    """Create a published (non-draft) release for an existing tag."""
    payload: dict[str, Any] = {
        "tag_name": tag,
        "name": name,
        "body": body,
        "draft": False,
        "prerelease": False,
    }
    return http.post_json(releases_url(api_url, owner, repo), payload)
