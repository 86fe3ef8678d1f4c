from __future__ import annotations

import json
from pathlib import Path

import pytest

from ghrel.core.result import Err, Ok
from ghrel.services.release.manifest import load_manifest, parse_manifest_text, parse_repository_url
from ghrel.services.release.model import Manifest, RepoSlug


def _pkg(**fields: object) -> str:
    data: dict[str, object] = {"name": "widget", "version": "1.2.0"}
    data.update(fields)
    return json.dumps(data)


class TestParseRepositoryUrl:
    def test_https_with_git_suffix(self) -> None:
        assert parse_repository_url("https://github.com/acme/widget.git") == Ok(
            RepoSlug(owner="acme", repo="widget")
        )

    def test_git_ssh(self) -> None:
        assert parse_repository_url("git+ssh://github.com/acme/widget") == Ok(
            RepoSlug(owner="acme", repo="widget")
        )

    @pytest.mark.parametrize(
        "url",
        [
            "http://github.com/acme/widget",
            "git://github.com/acme/widget.git",
            "https://www.github.com/acme/widget",
            "HTTPS://GitHub.com/acme/widget",
            "git+https://github.com/acme/widget.git",
            "https://github.com/acme/widget/tree/main/packages/widget",
        ],
    )
    def test_accepted_forms(self, url: str) -> None:
        result = parse_repository_url(url)
        assert isinstance(result, Ok)
        assert result.value.slug == "acme/widget"

    @pytest.mark.parametrize(
        "url",
        [
            "https://gitlab.com/acme/widget.git",
            "git@github.com:acme/widget.git",
            "acme/widget",
            "https://github.com/acme",
            "https://github.com/acme/",
        ],
    )
    def test_rejected_forms(self, url: str) -> None:
        result = parse_repository_url(url)
        assert isinstance(result, Err)
        assert result.error.kind == "manifest"
        assert result.error.message == "unable to parse repository url"
        assert result.error.hint == url


class TestParseManifest:
    def test_string_repository(self) -> None:
        text = _pkg(repository="https://github.com/acme/widget.git")
        assert parse_manifest_text(text) == Ok(
            Manifest(
                name="widget",
                version="1.2.0",
                repository_url="https://github.com/acme/widget.git",
            )
        )

    def test_object_repository(self) -> None:
        text = _pkg(repository={"type": "git", "url": "git+ssh://github.com/acme/widget"})
        result = parse_manifest_text(text)
        assert isinstance(result, Ok)
        assert result.value.repository_url == "git+ssh://github.com/acme/widget"

    def test_missing_repository(self) -> None:
        result = parse_manifest_text(_pkg())
        assert isinstance(result, Err)
        assert result.error.kind == "manifest"
        assert "repository" in result.error.message

    def test_repository_object_without_url(self) -> None:
        result = parse_manifest_text(_pkg(repository={"type": "git"}))
        assert isinstance(result, Err)
        assert result.error.kind == "manifest"

    @pytest.mark.parametrize("missing", ["name", "version"])
    def test_missing_name_or_version(self, missing: str) -> None:
        data = {"name": "widget", "version": "1.2.0", "repository": "https://github.com/a/b"}
        del data[missing]
        result = parse_manifest_text(json.dumps(data))
        assert isinstance(result, Err)
        assert missing in result.error.message

    def test_invalid_json(self) -> None:
        result = parse_manifest_text("{nope")
        assert isinstance(result, Err)
        assert result.error.kind == "manifest"
        assert "invalid JSON" in result.error.message

    def test_not_an_object(self) -> None:
        result = parse_manifest_text("[1, 2]")
        assert isinstance(result, Err)
        assert "not a JSON object" in result.error.message


def test_load_manifest_missing(tmp_path: Path) -> None:
    result = load_manifest(tmp_path)
    assert isinstance(result, Err)
    assert result.error.kind == "manifest"
    assert result.error.message == f"no package.json found in {tmp_path}"


def test_load_manifest_ok(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        _pkg(repository="https://github.com/acme/widget"), encoding="utf-8"
    )
    result = load_manifest(tmp_path)
    assert isinstance(result, Ok)
    assert result.value.name == "widget"
