"""GitHub REST API access."""

from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .releases import create_release, get_release_by_tag

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "create_release",
    "get_release_by_tag",
]
