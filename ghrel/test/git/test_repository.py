"""Tests for git/repository.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from ghrel.core.result import Err, Ok
from ghrel.git.repository import Repository
from ghrel.platform.process import ProcessError


def test_tags_text_runs_git_tag_in_project(tmp_path: Path) -> None:
    with patch("ghrel.git.repository.run_process", return_value=Ok("1.0.0\nv1.1.0\n")) as run:
        result = Repository(tmp_path).tags_text()

    assert result == Ok("1.0.0\nv1.1.0\n")
    cmd = run.call_args.args[0]
    assert cmd == ["git", "-C", str(tmp_path), "tag"]


def test_tags_text_error_uses_stderr(tmp_path: Path) -> None:
    failure = Err(ProcessError(("git",), 128, "", "fatal: not a git repository\n"))
    with patch("ghrel.git.repository.run_process", return_value=failure):
        result = Repository(tmp_path).tags_text()

    assert isinstance(result, Err)
    assert result.error.command == "tag"
    assert result.error.message == "fatal: not a git repository"
    assert result.error.returncode == 128


def test_tags_text_error_default_message(tmp_path: Path) -> None:
    failure = Err(ProcessError(("git",), 1, "", ""))
    with patch("ghrel.git.repository.run_process", return_value=failure):
        result = Repository(tmp_path).tags_text()

    assert isinstance(result, Err)
    assert result.error.message == "git tag failed"
