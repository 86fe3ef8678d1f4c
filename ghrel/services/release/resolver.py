from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.git.repository import Repository
from ghrel.output.console import ConsoleProtocol, Style
from ghrel.services.release.changelog import extract_section, find_changelog, read_changelog
from ghrel.services.release.errors import ReleaseError
from ghrel.services.release.manifest import load_manifest, parse_repository_url
from ghrel.services.release.model import ReleaseDescriptor
from ghrel.services.release.tags import find_tag

TagLister = Callable[[Path], Result[str, ReleaseError]]


def git_tags(project_root: Path) -> Result[str, ReleaseError]:
    listing = Repository(project_root).tags_text()
    if isinstance(listing, Err):
        return Err(
            ReleaseError(
                kind="tag",
                message="unable to list git tags",
                hint=listing.error.message,
            )
        )
    return Ok(listing.value)


def resolve_release(
    *,
    project_root: Path,
    changelog_filename: str | None = None,
    list_tags: TagLister | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[ReleaseDescriptor, ReleaseError]:
    changelog_path = find_changelog(project_root, changelog_filename)
    if isinstance(changelog_path, Err):
        return changelog_path

    manifest = load_manifest(project_root)
    if isinstance(manifest, Err):
        return manifest

    changelog = read_changelog(changelog_path.value)
    if isinstance(changelog, Err):
        return changelog

    slug = parse_repository_url(manifest.value.repository_url)
    if isinstance(slug, Err):
        return slug

    tags_text = (list_tags or git_tags)(project_root)
    if isinstance(tags_text, Err):
        return tags_text

    tag = find_tag(tags_text.value, name=manifest.value.name, version=manifest.value.version)
    if isinstance(tag, Err):
        return tag

    body = extract_section(changelog.value, manifest.value.version)

    if console is not None:
        console.print(f"changelog: {changelog_path.value.name}", Style.DIM)
        console.print(f"repository: {slug.value.slug}", Style.DIM)
        console.print(f"tag: {tag.value}", Style.DIM)
        console.print(f"notes: {len(body.splitlines())} line(s)", Style.DIM)

    return Ok(
        ReleaseDescriptor(
            owner=slug.value.owner,
            repo=slug.value.repo,
            tag=tag.value,
            name=tag.value,
            body=body,
        )
    )
