from __future__ import annotations

from ghrel.core.result import Err, Ok
from ghrel.services.github.http import HttpError, MockHttpClient
from ghrel.services.release.model import ReleaseDescriptor
from ghrel.services.release.publisher import publish_release

API = "https://api.github.com"
LOOKUP = f"{API}/repos/acme/widget/releases/tags/1.2.0"
CREATE = f"{API}/repos/acme/widget/releases"

DESCRIPTOR = ReleaseDescriptor(
    owner="acme",
    repo="widget",
    tag="1.2.0",
    name="1.2.0",
    body="- Added spinning.",
)


def _posts(http: MockHttpClient) -> list[str]:
    return [url for kind, url in http.calls if kind == "post_json"]


def test_not_found_creates_once() -> None:
    http = MockHttpClient()
    http.set_json(LOOKUP, HttpError(url=LOOKUP, status=404, message="Not Found"))
    http.set_post(CREATE, {"id": 1, "tag_name": "1.2.0"})

    result = publish_release(http=http, api_url=API, descriptor=DESCRIPTOR)

    assert isinstance(result, Ok)
    assert result.value.status == "released"
    assert result.value.message == "acme/widget 1.2.0 released"
    assert http.posted == [
        (
            CREATE,
            {
                "tag_name": "1.2.0",
                "name": "1.2.0",
                "body": "- Added spinning.",
                "draft": False,
                "prerelease": False,
            },
        )
    ]


def test_existing_release_is_left_alone() -> None:
    http = MockHttpClient()
    http.set_json(LOOKUP, {"id": 7, "tag_name": "1.2.0"})

    result = publish_release(http=http, api_url=API, descriptor=DESCRIPTOR)

    assert isinstance(result, Ok)
    assert result.value.status == "already_exists"
    assert result.value.message == "acme/widget 1.2.0 already exists"
    assert _posts(http) == []


def test_publish_twice_is_idempotent() -> None:
    http = MockHttpClient()
    http.set_json(LOOKUP, {"id": 7})

    first = publish_release(http=http, api_url=API, descriptor=DESCRIPTOR)
    second = publish_release(http=http, api_url=API, descriptor=DESCRIPTOR)

    assert isinstance(first, Ok) and first.value.status == "already_exists"
    assert isinstance(second, Ok) and second.value.status == "already_exists"
    assert http.calls == [("get_json", LOOKUP), ("get_json", LOOKUP)]


def test_query_failure_never_creates() -> None:
    for status in (401, 403, 500, 0):
        http = MockHttpClient()
        http.set_json(LOOKUP, HttpError(url=LOOKUP, status=status, message="nope"))

        result = publish_release(http=http, api_url=API, descriptor=DESCRIPTOR)

        assert isinstance(result, Err), status
        assert result.error.kind == "remote_query"
        assert result.error.message == "unable to check release acme/widget 1.2.0"
        assert _posts(http) == []


def test_create_failure() -> None:
    http = MockHttpClient()
    http.set_post(CREATE, HttpError(url=CREATE, status=422, message="Validation Failed"))

    result = publish_release(http=http, api_url=API, descriptor=DESCRIPTOR)

    assert isinstance(result, Err)
    assert result.error.kind == "remote_create"
    assert result.error.hint == f"HTTP 422: Validation Failed ({CREATE})"
    assert len(_posts(http)) == 1
