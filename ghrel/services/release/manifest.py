from __future__ import annotations

import json
import re
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.core.structured import as_str_dict, get_str, get_table
from ghrel.services.release.errors import ReleaseError
from ghrel.services.release.model import Manifest, RepoSlug

MANIFEST_FILENAME = "package.json"

_GITHUB_URL_RE = re.compile(
    r"(?:https?|git(?:\+ssh)?)://(?:www\.)?github\.com/(.*)",
    re.IGNORECASE,
)


def _repository_url(data: dict[str, object]) -> str | None:
    # "repository": "https://..." or "repository": {"type": "git", "url": "..."}
    url = get_str(data, "repository")
    if url is not None:
        return url
    table = get_table(data, "repository")
    if table is None:
        return None
    return get_str(table, "url")


def parse_manifest_text(
    text: str, *, source: str = MANIFEST_FILENAME
) -> Result[Manifest, ReleaseError]:
    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ReleaseError(kind="manifest", message=f"invalid JSON in {source}: {e}"))

    data = as_str_dict(obj)
    if data is None:
        return Err(ReleaseError(kind="manifest", message=f"{source} is not a JSON object"))

    repository_url = _repository_url(data)
    if repository_url is None:
        return Err(
            ReleaseError(
                kind="manifest",
                message=f"no repository url found in {source}",
                hint='set "repository" or "repository.url"',
            )
        )

    version = get_str(data, "version")
    if version is None:
        return Err(ReleaseError(kind="manifest", message=f"no version found in {source}"))

    name = get_str(data, "name")
    if name is None:
        return Err(ReleaseError(kind="manifest", message=f"no name found in {source}"))

    return Ok(Manifest(name=name, version=version, repository_url=repository_url))


def load_manifest(project_root: Path) -> Result[Manifest, ReleaseError]:
    path = project_root / MANIFEST_FILENAME
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="manifest",
                message=f"no {MANIFEST_FILENAME} found in {project_root}",
                hint=str(e),
            )
        )
    return parse_manifest_text(text, source=str(path))


def parse_repository_url(url: str) -> Result[RepoSlug, ReleaseError]:
    """Extract owner/repo from a GitHub https or git(+ssh) URL.

    A trailing ``.git`` is stripped from the repository name.
    """
    match = _GITHUB_URL_RE.search(url)
    if match is None:
        return Err(
            ReleaseError(kind="manifest", message="unable to parse repository url", hint=url)
        )

    parts = match.group(1).split("/")
    owner = parts[0]
    repo = parts[1].removesuffix(".git") if len(parts) > 1 else ""
    if not owner or not repo:
        return Err(
            ReleaseError(kind="manifest", message="unable to parse repository url", hint=url)
        )

    return Ok(RepoSlug(owner=owner, repo=repo))
