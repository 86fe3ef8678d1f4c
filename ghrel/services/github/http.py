"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for JSON requests (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Protocol, cast, runtime_checkable

from ghrel import __version__
from ghrel.core.result import Err, Ok, Result
from ghrel.core.structured import as_str_dict

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for JSON-over-HTTP operations.

    This abstraction allows injecting mock clients for testing,
    avoiding real network calls in unit tests.
    """

    def get_json(self, url: str) -> Result[dict[str, Any], HttpError]:
        """GET url and parse the response as a JSON object."""
        ...

    def post_json(self, url: str, payload: dict[str, Any]) -> Result[dict[str, Any], HttpError]:
        """POST payload as JSON and parse the response as a JSON object."""
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Sends the GitHub token and API headers on every request.
    """

    def __init__(
        self,
        token: str | None = None,
        timeout: float = 30.0,
        user_agent: str = f"ghrel/{__version__}",
    ) -> None:
        """Initialize HTTP client.

        Args:
            token: GitHub token sent as ``Authorization: token ...``
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
        """
        self.token = token
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def _headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _request(
        self,
        url: str,
        *,
        method: str = "GET",
        data: bytes | None = None,
    ) -> Result[bytes, HttpError]:
        try:
            req = urllib.request.Request(
                url,
                data=data,
                method=method,
                headers=self._headers(has_body=data is not None),
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=_error_message(e)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

    def _decode(self, url: str, raw: bytes) -> Result[dict[str, Any], HttpError]:
        try:
            data_obj: object = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(HttpError(url=url, status=0, message="Expected JSON object"))
        # Values are dynamic; preserve as Any for callers.
        return Ok(cast(dict[str, Any], data))

    def get_json(self, url: str) -> Result[dict[str, Any], HttpError]:
        result = self._request(url)
        if isinstance(result, Err):
            return result
        return self._decode(url, result.value)

    def post_json(self, url: str, payload: dict[str, Any]) -> Result[dict[str, Any], HttpError]:
        result = self._request(url, method="POST", data=json.dumps(payload).encode("utf-8"))
        if isinstance(result, Err):
            return result
        return self._decode(url, result.value)


def _error_message(e: urllib.error.HTTPError) -> str:
    # GitHub puts the useful part in the JSON body ({"message": ...}).
    try:
        body: object = json.loads(e.read().decode("utf-8"))
    except (OSError, ValueError):
        return str(e.reason)
    data = as_str_dict(body)
    if data is not None and isinstance(data.get("message"), str):
        return cast(str, data["message"])
    return str(e.reason)


class MockHttpClient:
    """Mock HTTP client for testing.

    Unknown GET URLs answer 404; POST responses default to an empty object.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.example.com/data", {"key": "value"})
        result = client.get_json("https://api.example.com/data")
        assert result == Ok({"key": "value"})
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, dict[str, Any] | HttpError] = {}
        self._post_responses: dict[str, dict[str, Any] | HttpError] = {}
        self.calls: list[tuple[str, str]] = []
        self.posted: list[tuple[str, dict[str, Any]]] = []

    def set_json(self, url: str, response: dict[str, Any] | HttpError) -> None:
        """Set GET response for URL."""
        self._json_responses[url] = response

    def set_post(self, url: str, response: dict[str, Any] | HttpError) -> None:
        """Set POST response for URL."""
        self._post_responses[url] = response

    def get_json(self, url: str) -> Result[dict[str, Any], HttpError]:
        self.calls.append(("get_json", url))

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not Found"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    def post_json(self, url: str, payload: dict[str, Any]) -> Result[dict[str, Any], HttpError]:
        self.calls.append(("post_json", url))
        self.posted.append((url, payload))

        response = self._post_responses.get(url, {})
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
