"""Resolve release metadata from local files and publish it to GitHub."""

from .errors import ReleaseError
from .model import PublishOutcome, ReleaseDescriptor
from .publisher import publish_release
from .resolver import resolve_release

__all__ = [
    "PublishOutcome",
    "ReleaseDescriptor",
    "ReleaseError",
    "publish_release",
    "resolve_release",
]
