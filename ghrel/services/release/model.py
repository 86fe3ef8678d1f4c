from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PublishStatus = Literal["released", "already_exists"]


@dataclass(frozen=True, slots=True)
class RepoSlug:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class Manifest:
    name: str
    version: str
    repository_url: str


@dataclass(frozen=True, slots=True)
class ReleaseDescriptor:
    """Everything needed to publish one GitHub release.

    ``name`` always equals ``tag``; ``body`` is the trimmed changelog section
    and may be empty.
    """

    owner: str
    repo: str
    tag: str
    name: str
    body: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def release_path(self) -> str:
        return f"{self.slug} {self.tag}"


@dataclass(frozen=True, slots=True)
class PublishOutcome:
    status: PublishStatus
    descriptor: ReleaseDescriptor

    @property
    def message(self) -> str:
        if self.status == "released":
            return f"{self.descriptor.release_path} released"
        return f"{self.descriptor.release_path} already exists"
