from __future__ import annotations

from ghrel.core.result import Err, Ok, Result
from ghrel.services.github.http import HttpClient
from ghrel.services.github.releases import create_release, get_release_by_tag
from ghrel.services.release.errors import ReleaseError
from ghrel.services.release.model import PublishOutcome, ReleaseDescriptor


def publish_release(
    *,
    http: HttpClient,
    api_url: str,
    descriptor: ReleaseDescriptor,
) -> Result[PublishOutcome, ReleaseError]:
    """Create the release unless one already exists for the tag.

    Only a 404 from the existence check leads to a create; any other failure
    aborts so an ambiguous remote state never produces a duplicate release.
    """
    existing = get_release_by_tag(
        http,
        api_url=api_url,
        owner=descriptor.owner,
        repo=descriptor.repo,
        tag=descriptor.tag,
    )
    if isinstance(existing, Ok):
        return Ok(PublishOutcome(status="already_exists", descriptor=descriptor))

    if not existing.error.is_not_found:
        return Err(
            ReleaseError(
                kind="remote_query",
                message=f"unable to check release {descriptor.release_path}",
                hint=str(existing.error),
            )
        )

    created = create_release(
        http,
        api_url=api_url,
        owner=descriptor.owner,
        repo=descriptor.repo,
        tag=descriptor.tag,
        name=descriptor.name,
        body=descriptor.body,
    )
    if isinstance(created, Err):
        return Err(
            ReleaseError(
                kind="remote_create",
                message=f"unable to create release {descriptor.release_path}",
                hint=str(created.error),
            )
        )

    return Ok(PublishOutcome(status="released", descriptor=descriptor))
